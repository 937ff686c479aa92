"""Configuration management for chat-bridge."""

import os
import secrets
import logging

from translator.backend import DEFAULT_BASE_URL
from translator.openai_to_anthropic import DEFAULT_MAX_TOKENS

logger = logging.getLogger(__name__)


class Config:
    """Application configuration loaded from environment variables."""

    def __init__(self):
        # Proxy settings
        self.port = int(os.getenv('PROXY_PORT', '5000'))
        self.proxy_access_token = os.getenv('PROXY_ACCESS_TOKEN') or self._generate_token()

        # Anthropic backend
        self.anthropic_base_url = os.getenv('ANTHROPIC_BASE_URL', DEFAULT_BASE_URL)
        self.anthropic_api_key = os.getenv('ANTHROPIC_API_KEY')
        self.backend_timeout = float(os.getenv('BACKEND_TIMEOUT', '120'))

        self.default_max_tokens = int(os.getenv('DEFAULT_MAX_TOKENS', str(DEFAULT_MAX_TOKENS)))
        if self.default_max_tokens <= 0:
            logger.warning(f"DEFAULT_MAX_TOKENS={self.default_max_tokens} is not positive, "
                           f"using {DEFAULT_MAX_TOKENS}")
            self.default_max_tokens = DEFAULT_MAX_TOKENS

        # Behavior
        self.skip_ssl_verify = os.getenv('SKIP_SSL_VERIFY', 'false').lower() == 'true'

    def _generate_token(self) -> str:
        """Generate a random access token."""
        return f"chat-bridge-{secrets.token_hex(32)}"

    def is_api_key_configured(self) -> bool:
        """Check if the Anthropic API key is configured."""
        return bool(self.anthropic_api_key)

    def get_verify_ssl(self) -> bool:
        """Get SSL verification setting."""
        return not self.skip_ssl_verify

