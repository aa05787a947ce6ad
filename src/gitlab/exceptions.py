"""Exception hierarchy for the GitLab client.

Transport failures and non-success HTTP responses are raised as subclasses
of ``GitlabError``. Pagination traversal never wraps or retries these: a
failure on page N+1 reaches the caller of ``each_page``/``auto_paginate``
exactly as the transport raised it.

``UnsupportedOperationError`` and ``StopPagination`` belong to the
pagination wrapper rather than the transport and do not derive from
``GitlabError``.
"""

from typing import Any


class GitlabError(Exception):
    """Base class for all errors raised by the GitLab client."""


class ConfigurationError(GitlabError):
    """Raised when the client is missing required configuration."""


class TransportError(GitlabError):
    """Raised when a request could not be sent or no response was received."""


class ParsingError(GitlabError):
    """Raised when a successful response body is not valid JSON."""


class ResponseError(GitlabError):
    """Raised when the server answers with a non-success HTTP status.

    Attributes:
        status_code: HTTP status code of the response
        method: HTTP method of the failed request
        url: Absolute URL of the failed request
        body: Decoded response body (JSON value or raw text), if any
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        method: str,
        url: str,
        body: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.method = method
        self.url = url
        self.body = body


class BadRequestError(ResponseError):
    """Raised on HTTP 400."""


class UnauthorizedError(ResponseError):
    """Raised on HTTP 401."""


class ForbiddenError(ResponseError):
    """Raised on HTTP 403."""


class NotFoundError(ResponseError):
    """Raised on HTTP 404."""


class MethodNotAllowedError(ResponseError):
    """Raised on HTTP 405."""


class ConflictError(ResponseError):
    """Raised on HTTP 409."""


class UnprocessableEntityError(ResponseError):
    """Raised on HTTP 422."""


class TooManyRequestsError(ResponseError):
    """Raised on HTTP 429."""


class InternalServerError(ResponseError):
    """Raised on HTTP 500."""


class BadGatewayError(ResponseError):
    """Raised on HTTP 502."""


class ServiceUnavailableError(ResponseError):
    """Raised on HTTP 503."""


class UnsupportedOperationError(AttributeError):
    """Raised when neither a page nor its wrapped items support an operation.

    Subclasses ``AttributeError`` so ``hasattr()`` and ``getattr(obj, name,
    default)`` keep their usual behaviour on pages.
    """


class StopPagination(Exception):
    """Raised by a visitor to stop traversal before the next page is fetched."""


# ---------------------------------------------------------------------------
# Mapping: HTTP status code -> exception class
#
# Statuses without a dedicated class raise the ResponseError base.
# ---------------------------------------------------------------------------

_STATUS_ERRORS: dict[int, type[ResponseError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    405: MethodNotAllowedError,
    409: ConflictError,
    422: UnprocessableEntityError,
    429: TooManyRequestsError,
    500: InternalServerError,
    502: BadGatewayError,
    503: ServiceUnavailableError,
}


def error_for_status(status_code: int) -> type[ResponseError]:
    """Return the exception class raised for an HTTP error status.

    Args:
        status_code: HTTP status code (>= 400)

    Returns:
        The matching ``ResponseError`` subclass, or ``ResponseError`` itself
    """
    return _STATUS_ERRORS.get(status_code, ResponseError)
