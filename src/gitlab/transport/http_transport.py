"""httpx-backed implementation of the transport interface.

Requests are synchronous and blocking. Timeouts come from the httpx
client; there is no retry layer here.
"""

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from src.gitlab.config import DEFAULT_USER_AGENT
from src.gitlab.exceptions import ParsingError, TransportError, error_for_status
from src.gitlab.transport.interfaces import TransportInterface, TransportResult

logger = logging.getLogger(__name__)


class HttpTransport(TransportInterface):
    """Transport that talks to the API over HTTP using httpx.

    Args:
        endpoint: API base URL (e.g. ``https://gitlab.example.com/api/v4``)
        private_token: Token sent in the ``PRIVATE-TOKEN`` header, if any
        user_agent: Value of the ``User-Agent`` header
        timeout: Request timeout in seconds for the owned httpx client
        client: Preconfigured ``httpx.Client`` to use instead of creating
            one. A supplied client is not closed by ``close()``.
    """

    def __init__(
        self,
        endpoint: str,
        private_token: str | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
        client: httpx.Client | None = None,
    ) -> None:
        self._endpoint = endpoint.rstrip("/")
        self._headers = {
            "Accept": "application/json",
            "User-Agent": user_agent,
        }
        if private_token:
            self._headers["PRIVATE-TOKEN"] = private_token

        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(timeout=timeout)

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def get(
        self,
        path: str,
        query: Mapping[str, Any] | None = None,
    ) -> TransportResult:
        return self.request("GET", path, query=query)

    def post(
        self,
        path: str,
        body: Mapping[str, Any] | None = None,
    ) -> TransportResult:
        return self.request("POST", path, body=body)

    def put(
        self,
        path: str,
        body: Mapping[str, Any] | None = None,
    ) -> TransportResult:
        return self.request("PUT", path, body=body)

    def delete(self, path: str) -> TransportResult:
        return self.request("DELETE", path)

    def request(
        self,
        method: str,
        path: str,
        query: Mapping[str, Any] | None = None,
        body: Mapping[str, Any] | None = None,
    ) -> TransportResult:
        """Send a request and decode the JSON response.

        Args:
            method: HTTP method
            path: Path relative to the endpoint, or an absolute URL
            query: Query parameters merged into the URL
            body: JSON request body

        Returns:
            Tuple of (decoded body or None if empty, response headers)

        Raises:
            TransportError: If the request could not be completed
            ParsingError: If a successful response is not valid JSON
            ResponseError: If the server answered with status >= 400
        """
        url = self._build_url(path)
        logger.debug("%s %s", method, url)

        try:
            response = self._client.request(
                method,
                url,
                params=dict(query) if query else None,
                json=dict(body) if body is not None else None,
                headers=self._headers,
            )
        except httpx.HTTPError as e:
            raise TransportError(f"{method} {url} failed: {e}") from e

        if response.is_error:
            self._raise_for_status(method, url, response)

        return self._decode(method, url, response), response.headers

    def _build_url(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        return f"{self._endpoint}/{path.lstrip('/')}"

    def _decode(self, method: str, url: str, response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ParsingError(
                f"{method} {url} returned a body that is not valid JSON"
            ) from e

    def _raise_for_status(
        self,
        method: str,
        url: str,
        response: httpx.Response,
    ) -> None:
        """Raise the ResponseError subclass matching the response status."""
        try:
            body: Any = response.json() if response.content else None
        except ValueError:
            body = response.text

        message = _error_message(body)
        logger.warning(
            "%s %s failed with status %s: %s",
            method,
            url,
            response.status_code,
            message,
        )

        error_cls = error_for_status(response.status_code)
        raise error_cls(
            f"Server responded with code {response.status_code}, "
            f"message: {message}. Request URI: {url}",
            status_code=response.status_code,
            method=method,
            url=url,
            body=body,
        )

    def close(self) -> None:
        """Close the underlying httpx client if this transport created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HttpTransport":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def _error_message(body: Any) -> str:
    """Extract a human-readable message from an error response body."""
    if isinstance(body, dict):
        for key in ("message", "error"):
            if key in body:
                return str(body[key])
        return str(body)
    if body is None or body == "":
        return "(no message)"
    return str(body)
