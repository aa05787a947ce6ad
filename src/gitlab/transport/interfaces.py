"""Abstract base class for the HTTP transport.

Defines the contract that pagination and the endpoint services depend on.
Pages hold a reference to a transport (not a concrete HTTP client) so that
tests can drive traversal with an in-memory fake.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

TransportResult = tuple[Any, Mapping[str, str]]


class TransportInterface(ABC):
    """Abstract interface for issuing requests against the API.

    Every method returns a ``(payload, headers)`` tuple: the decoded JSON
    body and the response headers. Non-success responses are raised, never
    returned.
    """

    @property
    @abstractmethod
    def endpoint(self) -> str:
        """Base URL of the API (e.g. ``https://gitlab.example.com/api/v4``).

        Navigation links are turned into request paths by removing this
        prefix.
        """
        ...

    @abstractmethod
    def get(
        self,
        path: str,
        query: Mapping[str, Any] | None = None,
    ) -> TransportResult:
        """Issue a GET request.

        Args:
            path: Path relative to the endpoint; may carry a query string
            query: Additional query parameters

        Returns:
            Tuple of (decoded body, response headers)

        Raises:
            GitlabError: On transport failure or non-success status
        """
        ...

    @abstractmethod
    def post(
        self,
        path: str,
        body: Mapping[str, Any] | None = None,
    ) -> TransportResult:
        """Issue a POST request with a JSON body."""
        ...

    @abstractmethod
    def put(
        self,
        path: str,
        body: Mapping[str, Any] | None = None,
    ) -> TransportResult:
        """Issue a PUT request with a JSON body."""
        ...

    @abstractmethod
    def delete(self, path: str) -> TransportResult:
        """Issue a DELETE request."""
        ...

    def close(self) -> None:
        """Release any resources held by the transport."""
