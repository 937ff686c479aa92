"""API translation layer between OpenAI and Anthropic formats."""

from .openai_to_anthropic import translate_request, DEFAULT_MAX_TOKENS
from .anthropic_to_openai import translate_response, translate_error
from .client import AnthropicClient
from .errors import TranslatorError, UnsupportedFeatureError, BackendError, BackendCancelledError
from .types import ChatRequest, ChatCompletion, MessagesRequest, MessagesResponse

__all__ = [
    'translate_request', 'translate_response', 'translate_error', 'DEFAULT_MAX_TOKENS',
    'AnthropicClient', 'TranslatorError', 'UnsupportedFeatureError', 'BackendError',
    'BackendCancelledError', 'ChatRequest', 'ChatCompletion', 'MessagesRequest', 'MessagesResponse',
]
