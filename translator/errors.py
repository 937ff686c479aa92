"""Error types raised by the chat completion client."""

from typing import Any, Dict, Optional

import requests

RETRYABLE_STATUS_CODES = {408, 409, 429}


class TranslatorError(Exception):
    """Base class for errors surfaced to callers of AnthropicClient."""

    kind = 'error'


class UnsupportedFeatureError(TranslatorError):
    """The request asked for something this bridge does not do (e.g. streaming)."""

    kind = 'unsupported_feature'
    error_type = 'invalid_request_error'
    code = 400

    def __init__(self, message: str, feature: str = ''):
        super().__init__(message)
        self.message = message
        self.feature = feature

    def to_dict(self) -> Dict[str, Any]:
        return {
            'error': {
                'message': self.message,
                'type': self.error_type,
                'code': self.code
            }
        }


class BackendError(TranslatorError):
    """
    The Anthropic call failed.

    Wraps the underlying exception (also chained as __cause__). Retryability
    is read from the underlying failure, never decided here.
    """

    kind = 'backend_error'

    def __init__(
        self,
        message: str,
        cause: Optional[BaseException] = None,
        status_code: Optional[int] = None,
        error_body: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.status_code = status_code
        self.error_body = error_body

    @property
    def retryable(self) -> bool:
        if self.status_code is None:
            return isinstance(self.cause, requests.exceptions.ConnectionError)
        return self.status_code in RETRYABLE_STATUS_CODES or self.status_code >= 500


class BackendCancelledError(TranslatorError):
    """The caller's deadline expired while waiting on the backend."""

    kind = 'cancelled'

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause
