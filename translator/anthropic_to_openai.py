"""Translate Anthropic Messages responses (and errors) to OpenAI format."""

import time
import logging
from typing import Dict, Any, Optional

from .types import ChatCompletion, MessagesResponse

logger = logging.getLogger(__name__)


def translate_response(
    messages_response: MessagesResponse,
    model: str
) -> ChatCompletion:
    """
    Translate an Anthropic /v1/messages response to an OpenAI chat completion.

    Args:
        messages_response: The parsed Anthropic response
        model: The model name from the original OpenAI request

    Returns:
        OpenAI-compatible chat completion with exactly one choice
    """
    # Adjacent text blocks are one continuous message: no separator
    content = ''.join(
        block.text for block in messages_response.content
        if block.type == 'text'
    )

    return ChatCompletion(
        id=messages_response.id,
        created=int(time.time()),
        model=model,
        content=content,
        finish_reason=_translate_stop_reason(messages_response.stop_reason),
        prompt_tokens=messages_response.input_tokens,
        completion_tokens=messages_response.output_tokens,
    )


def _translate_stop_reason(stop_reason: Optional[str]) -> str:
    """Translate Anthropic stop_reason to OpenAI finish_reason."""
    mapping = {
        'max_tokens': 'length',
        'tool_use': 'tool_calls',
    }

    return mapping.get(stop_reason, 'stop')


def build_error(message: str, error_type: str = 'server_error', code: int = 500) -> Dict[str, Any]:
    """Build an OpenAI-style error body."""
    return {
        'error': {
            'message': message,
            'type': error_type,
            'code': code
        }
    }


def translate_error(
    error_response: Optional[Dict[str, Any]],
    status_code: int = 502
) -> Dict[str, Any]:
    """
    Translate an Anthropic error response to OpenAI format.

    Anthropic errors look like {"type": "error", "error": {"type": ..., "message": ...}}.

    Args:
        error_response: The error body returned by the backend (may be None)
        status_code: HTTP status code to report

    Returns:
        OpenAI-compatible error response
    """
    logger.debug(f"Translating error response: {error_response}")
    error_response = error_response or {}

    # Already OpenAI format
    error_info = error_response.get('error')
    if isinstance(error_info, dict) and 'code' in error_info and error_response.get('type') != 'error':
        return error_response

    if isinstance(error_info, str):
        return build_error(error_info, 'server_error', status_code)

    error_info = error_info or {}

    # Map Anthropic error types to OpenAI types
    error_type_map = {
        'invalid_request_error': 'invalid_request_error',
        'authentication_error': 'authentication_error',
        'permission_error': 'permission_error',
        'not_found_error': 'not_found_error',
        'request_too_large': 'invalid_request_error',
        'rate_limit_error': 'rate_limit_error',
        'api_error': 'server_error',
        'overloaded_error': 'server_error',
    }

    openai_type = error_type_map.get(error_info.get('type'), 'server_error')
    error_message = (
        error_info.get('message') or
        error_response.get('message') or
        'An error occurred'
    )

    return build_error(error_message, openai_type, status_code)
