"""OpenAI-compatible chat completions on top of the Anthropic Messages API."""

import json
import logging
from typing import Dict, Any, Optional

import requests

from .anthropic_to_openai import translate_response
from .backend import MessagesBackend, DEFAULT_BASE_URL, Timeout
from .errors import BackendCancelledError, BackendError, UnsupportedFeatureError
from .openai_to_anthropic import DEFAULT_MAX_TOKENS, translate_request
from .types import ChatCompletion, ChatRequest, MessagesResponse

logger = logging.getLogger(__name__)


class AnthropicClient:
    """
    Accepts OpenAI-format requests and returns OpenAI-format responses.

    The backend only needs a `create_message(payload, timeout=None)` method
    returning the decoded Messages response. The client holds no other state,
    so one instance can serve concurrent callers.
    """

    def __init__(self, backend, default_max_tokens: int = DEFAULT_MAX_TOKENS):
        self.backend = backend
        self.default_max_tokens = default_max_tokens

    @classmethod
    def from_api_key(
        cls,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        session: Optional[requests.Session] = None,
        verify: bool = True,
        default_max_tokens: int = DEFAULT_MAX_TOKENS
    ) -> 'AnthropicClient':
        backend = MessagesBackend(api_key, base_url=base_url, session=session, verify=verify)
        return cls(backend, default_max_tokens=default_max_tokens)

    def create_chat_completion(self, chat_request: ChatRequest, timeout: Timeout = None) -> ChatCompletion:
        """
        Translate, call Anthropic, translate back.

        Args:
            chat_request: Parsed OpenAI chat request
            timeout: Caller deadline, handed to the backend unmodified

        Raises:
            UnsupportedFeatureError: streaming was requested (backend not called)
            BackendCancelledError: the deadline expired during the backend call
            BackendError: any other backend failure
        """
        if chat_request.stream:
            raise UnsupportedFeatureError(
                'Streaming is not supported for Anthropic models',
                feature='stream'
            )

        messages_request = translate_request(chat_request, self.default_max_tokens)
        logger.info(f"-> {messages_request.model} | msgs={len(messages_request.messages)} | "
                    f"max_tokens={messages_request.max_tokens}")

        body = self._call_backend(messages_request.to_dict(), timeout)
        completion = translate_response(MessagesResponse.from_dict(body), chat_request.model)

        logger.info(f"<- finish_reason={completion.finish_reason} | "
                    f"tokens={completion.prompt_tokens}+{completion.completion_tokens}")
        return completion

    def chat_completion(self, chat_request: ChatRequest, timeout: Timeout = None) -> bytes:
        """Same as create_chat_completion, serialized to JSON bytes."""
        completion = self.create_chat_completion(chat_request, timeout=timeout)
        return json.dumps(completion.to_dict()).encode('utf-8')

    def _call_backend(self, payload: Dict[str, Any], timeout: Timeout) -> Dict[str, Any]:
        try:
            return self.backend.create_message(payload, timeout=timeout)
        except requests.exceptions.Timeout as e:
            raise BackendCancelledError(f"anthropic API call cancelled: {e}", cause=e) from e
        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            raise BackendError(
                f"anthropic API error: {e}",
                cause=e,
                status_code=status_code,
                error_body=_error_body(e.response)
            ) from e
        except requests.exceptions.RequestException as e:
            raise BackendError(f"anthropic API error: {e}", cause=e) from e


def _error_body(response: Optional[requests.Response]) -> Optional[Dict[str, Any]]:
    if response is None:
        return None
    try:
        body = response.json()
    except ValueError:
        return {'error': {'type': 'api_error', 'message': response.text or 'Unknown error'}}
    return body if isinstance(body, dict) else None
