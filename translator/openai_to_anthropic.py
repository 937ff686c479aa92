"""Translate OpenAI chat completion requests to Anthropic Messages format."""

import logging
from typing import List, Optional, Union

from .content import extract_text
from .types import BackendMessage, ChatRequest, MessagesRequest

logger = logging.getLogger(__name__)

# Anthropic requires max_tokens; OpenAI does not
DEFAULT_MAX_TOKENS = 4096


def translate_request(
    chat_request: ChatRequest,
    default_max_tokens: int = DEFAULT_MAX_TOKENS
) -> MessagesRequest:
    """
    Translate an OpenAI /v1/chat/completions request to Anthropic /v1/messages format.

    System messages are lifted out of the message list into the top-level
    `system` field. When several system messages are present the last one wins.

    Args:
        chat_request: The parsed OpenAI request
        default_max_tokens: max_tokens to use when the request sets none

    Returns:
        Anthropic-compatible request
    """
    system_prompt = None
    messages = []

    for msg in chat_request.messages:
        if msg.role == 'system':
            if system_prompt is not None:
                logger.debug("Multiple system messages; replacing earlier system prompt")
            system_prompt = extract_text(msg.content)
        elif msg.role in ('user', 'assistant'):
            messages.append(BackendMessage(role=msg.role, text=extract_text(msg.content)))
        else:
            logger.debug(f"Skipping message with unsupported role: {msg.role}")

    return MessagesRequest(
        model=chat_request.model,
        messages=messages,
        max_tokens=_resolve_max_tokens(chat_request, default_max_tokens),
        system=system_prompt or None,
        temperature=chat_request.temperature,
        top_p=chat_request.top_p,
        stop_sequences=_translate_stop(chat_request.stop),
    )


def _resolve_max_tokens(chat_request: ChatRequest, default_max_tokens: int) -> int:
    """max_completion_tokens wins over the legacy max_tokens; both must be positive."""
    if chat_request.max_completion_tokens and chat_request.max_completion_tokens > 0:
        return chat_request.max_completion_tokens
    if chat_request.max_tokens and chat_request.max_tokens > 0:
        return chat_request.max_tokens

    logger.debug(f"Injected max_tokens={default_max_tokens} (not in original request)")
    return default_max_tokens


def _translate_stop(stop: Union[None, str, List[str]]) -> Optional[List[str]]:
    """Translate OpenAI stop (string or list) to Anthropic stop_sequences."""
    if isinstance(stop, list) and stop:
        return list(stop)
    if isinstance(stop, str) and stop:
        return [stop]
    return None
