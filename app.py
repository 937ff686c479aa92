#!/usr/bin/env python3
"""chat-bridge - OpenAI-compatible Chat Completions in front of Anthropic."""

import sys
import logging

from flask import Flask
from flask_cors import CORS
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%H:%M:%S'
)
logger = logging.getLogger(__name__)

# Import our modules
from config import Config
from logger_manager import LoggerManager
from handlers import proxy_bp, dashboard_bp
from translator import AnthropicClient


def create_app(config: Config = None, client: AnthropicClient = None) -> Flask:
    """Create and configure the Flask application."""
    app = Flask(__name__)
    CORS(app)

    config = config or Config()
    app.config['BRIDGE_CONFIG'] = config

    log_manager = LoggerManager()
    app.config['LOG_MANAGER'] = log_manager

    if client is None:
        if not config.is_api_key_configured():
            logger.warning("ANTHROPIC_API_KEY is not set; backend calls will be rejected")
        client = AnthropicClient.from_api_key(
            config.anthropic_api_key or '',
            base_url=config.anthropic_base_url,
            verify=config.get_verify_ssl(),
            default_max_tokens=config.default_max_tokens
        )
    app.config['ANTHROPIC_CLIENT'] = client

    app.register_blueprint(proxy_bp)
    app.register_blueprint(dashboard_bp)

    log_manager.log_server_event('info', 'chat-bridge started', {
        'port': config.port,
        'backend': config.anthropic_base_url,
        'api_key': config.is_api_key_configured(),
    })

    return app


def main():
    """Main entry point."""
    app = create_app()
    config = app.config['BRIDGE_CONFIG']

    print()
    print("=" * 60)
    print("  chat-bridge - OpenAI Chat Completions -> Anthropic Messages")
    print("=" * 60)
    print()
    print(f"  Endpoint:   http://localhost:{config.port}/v1/chat/completions")
    print(f"  Backend:    {config.anthropic_base_url}")
    print()
    print("  Point an OpenAI client at this proxy:")
    print()
    print(f"    export OPENAI_BASE_URL='http://localhost:{config.port}/v1'")
    print(f"    export OPENAI_API_KEY='{config.proxy_access_token}'")
    print()
    print("=" * 60)
    print()

    try:
        app.run(
            host='0.0.0.0',
            port=config.port,
            debug=False,
            threaded=True
        )
    except KeyboardInterrupt:
        logger.info("Shutting down...")
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
