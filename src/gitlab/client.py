"""Entry point for talking to a GitLab API.

Usage:
    from src.gitlab.client import Client

    with Client("https://gitlab.example.com/api/v4", private_token="...") as gl:
        for mr in gl.merge_requests.list_merge_requests(5).auto_paginate():
            print(mr["title"])
"""

import logging
from collections.abc import Mapping
from typing import Any

from src.gitlab.config import Settings, get_settings
from src.gitlab.domain.paginated_response import PaginatedResponse
from src.gitlab.exceptions import ConfigurationError
from src.gitlab.services.merge_request_service import MergeRequestService
from src.gitlab.transport.http_transport import HttpTransport
from src.gitlab.transport.interfaces import TransportInterface

logger = logging.getLogger(__name__)


class Client:
    """GitLab API client.

    List responses are returned as ``PaginatedResponse`` pages bound to
    this client's transport, so callers can walk the remaining pages.
    Other responses are returned as decoded JSON.

    Args:
        endpoint: API base URL; falls back to ``GITLAB_ENDPOINT``
        private_token: API token; falls back to ``GITLAB_PRIVATE_TOKEN``
        transport: Transport to use instead of building an ``HttpTransport``
        settings: Settings to read defaults from; defaults to the
            environment

    Raises:
        ConfigurationError: If no transport is given and no endpoint is
            configured
    """

    def __init__(
        self,
        endpoint: str | None = None,
        private_token: str | None = None,
        transport: TransportInterface | None = None,
        settings: Settings | None = None,
    ) -> None:
        if transport is None:
            settings = settings or get_settings()
            endpoint = endpoint or settings.endpoint
            if not endpoint:
                raise ConfigurationError(
                    "Please set an endpoint to API (e.g. GITLAB_ENDPOINT)"
                )
            transport = HttpTransport(
                endpoint,
                private_token=private_token or settings.private_token,
                user_agent=settings.user_agent,
                timeout=settings.timeout_seconds,
            )
            logger.debug("Created HTTP transport for %s", transport.endpoint)

        self._transport = transport
        self.merge_requests = MergeRequestService(self)

    @property
    def transport(self) -> TransportInterface:
        return self._transport

    @property
    def endpoint(self) -> str:
        return self._transport.endpoint

    def get(
        self,
        path: str,
        query: Mapping[str, Any] | None = None,
    ) -> PaginatedResponse | Any:
        """GET *path*; list payloads come back as a paginated page."""
        payload, headers = self._transport.get(path, query or None)
        if isinstance(payload, list):
            return PaginatedResponse(payload, headers, transport=self._transport)
        return payload

    def post(self, path: str, body: Mapping[str, Any] | None = None) -> Any:
        payload, _headers = self._transport.post(path, body)
        return payload

    def put(self, path: str, body: Mapping[str, Any] | None = None) -> Any:
        payload, _headers = self._transport.put(path, body)
        return payload

    def delete(self, path: str) -> Any:
        payload, _headers = self._transport.delete(path)
        return payload

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
