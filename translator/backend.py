"""HTTP transport for the Anthropic Messages API."""

import logging
from typing import Dict, Any, Optional, Tuple, Union

import requests

logger = logging.getLogger(__name__)

ANTHROPIC_VERSION = '2023-06-01'
DEFAULT_BASE_URL = 'https://api.anthropic.com'

Timeout = Union[None, float, Tuple[float, float]]


class MessagesBackend:
    """
    Sends Messages-API requests with a fixed credential.

    The requests.Session is safe to share across threads for plain POSTs.
    No retries, no token refresh: a failed call raises the requests exception.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        session: Optional[requests.Session] = None,
        verify: bool = True
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip('/')
        self.session = session or requests.Session()
        self.verify = verify

    @property
    def messages_url(self) -> str:
        return f"{self.base_url}/v1/messages"

    def _headers(self) -> Dict[str, str]:
        return {
            'Content-Type': 'application/json',
            'x-api-key': self.api_key,
            'anthropic-version': ANTHROPIC_VERSION,
        }

    def create_message(self, payload: Dict[str, Any], timeout: Timeout = None) -> Dict[str, Any]:
        """
        POST a Messages request and return the decoded response body.

        Args:
            payload: Anthropic /v1/messages request body
            timeout: Passed to requests as-is

        Raises:
            requests.HTTPError: non-2xx response
            requests.Timeout: the deadline expired
            requests.RequestException: any other transport failure
        """
        logger.debug(f"POST {self.messages_url} model={payload.get('model')}")
        response = self.session.post(
            self.messages_url,
            json=payload,
            headers=self._headers(),
            timeout=timeout,
            verify=self.verify
        )
        response.raise_for_status()
        return response.json()
