"""Pagination-aware wrapper around one page of list results.

A ``PaginatedResponse`` can be used wherever the page's plain list of items
is expected (indexing, ``len``, iteration, ``==``, concatenation), and
additionally knows how to reach its neighbouring pages through the
``Link`` header that came with it.

Traversal is strictly sequential: page N+1 is only requested once the
caller is done with page N, and every page is requested at most once per
traversal. Fetched pages are not cached.
"""

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from typing import Any

from src.gitlab.domain.link_set import LinkSet
from src.gitlab.exceptions import (
    ParsingError,
    StopPagination,
    UnsupportedOperationError,
)
from src.gitlab.transport.interfaces import TransportInterface

logger = logging.getLogger(__name__)


class PaginatedResponse(Sequence):
    """One page of a paginated resource.

    Args:
        items: Items returned for this page, in server order
        links: Parsed ``LinkSet``, a header mapping, a raw Link header
            string, or None
        transport: Transport used to fetch sibling pages. Without one,
            navigation methods return None.
    """

    def __init__(
        self,
        items: Iterable[Any],
        links: LinkSet | Mapping[str, str] | str | None = None,
        transport: TransportInterface | None = None,
    ) -> None:
        self._items = tuple(items)
        self._links = links if isinstance(links, LinkSet) else LinkSet.from_headers(links)
        self._transport = transport

    # -------------------------------------------------------------------------
    # Attributes
    # -------------------------------------------------------------------------

    @property
    def items(self) -> tuple[Any, ...]:
        return self._items

    @property
    def links(self) -> LinkSet:
        return self._links

    @property
    def transport(self) -> TransportInterface | None:
        return self._transport

    # -------------------------------------------------------------------------
    # Sequence behaviour (delegated to the wrapped items)
    # -------------------------------------------------------------------------

    def __getitem__(self, index: int | slice) -> Any | list[Any]:
        if isinstance(index, slice):
            return list(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PaginatedResponse):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return list(self._items) == list(other)
        return NotImplemented

    __hash__ = None

    def __add__(self, other: object) -> list[Any]:
        if isinstance(other, (PaginatedResponse, list, tuple)):
            return list(self._items) + list(other)
        return NotImplemented

    def __radd__(self, other: object) -> list[Any]:
        if isinstance(other, (list, tuple)):
            return list(other) + list(self._items)
        return NotImplemented

    def __repr__(self) -> str:
        return repr(list(self._items))

    def __getattr__(self, name: str) -> Any:
        """Reject any operation the page does not define.

        Every read operation of the wrapped tuple is already provided by
        ``Sequence``, so nothing is left to forward. Mutators such as
        ``append`` are unsupported because pages are immutable.
        """
        raise UnsupportedOperationError(
            f"'{type(self).__name__}' does not support '{name}'"
        )

    # -------------------------------------------------------------------------
    # Single-page navigation
    # -------------------------------------------------------------------------

    def has_next_page(self) -> bool:
        return self._links.next is not None

    def next_page(self) -> "PaginatedResponse | None":
        """Fetch the next page, or return None if there is none."""
        return self._fetch_page(self._links.next)

    def has_prev_page(self) -> bool:
        return self._links.prev is not None

    def prev_page(self) -> "PaginatedResponse | None":
        """Fetch the previous page, or return None if there is none."""
        return self._fetch_page(self._links.prev)

    def has_first_page(self) -> bool:
        return self._links.first is not None

    def first_page(self) -> "PaginatedResponse | None":
        """Fetch the first page.

        Always issues a request, even when this page is the first one, so
        the result reflects current server state.
        """
        return self._fetch_page(self._links.first)

    def has_last_page(self) -> bool:
        return self._links.last is not None

    def last_page(self) -> "PaginatedResponse | None":
        """Fetch the last page. Always issues a request."""
        return self._fetch_page(self._links.last)

    def _fetch_page(self, url: str | None) -> "PaginatedResponse | None":
        """Fetch the page at *url* through the bound transport.

        Transport errors propagate unchanged. An empty body is an empty
        page; any other non-list body raises ``ParsingError``.
        """
        if url is None or self._transport is None:
            return None

        path = self._relative_path(url)
        logger.debug("Fetching page %s", path)
        payload, headers = self._transport.get(path)
        if payload is None:
            payload = []
        elif not isinstance(payload, list):
            raise ParsingError(
                f"Expected a list of items from {path}, "
                f"got {type(payload).__name__}"
            )
        return PaginatedResponse(payload, headers, transport=self._transport)

    def _relative_path(self, url: str) -> str:
        """Strip the transport's endpoint from *url*.

        Only strips at a path boundary, so ``/api/v10`` is not treated as
        being under ``/api/v1``. URLs outside the endpoint are returned
        unchanged.
        """
        endpoint = self._transport.endpoint.rstrip("/")
        if endpoint and (
            url == endpoint or url.startswith((endpoint + "/", endpoint + "?"))
        ):
            return url[len(endpoint):] or "/"
        return url

    # -------------------------------------------------------------------------
    # Multi-page traversal
    # -------------------------------------------------------------------------

    def iter_pages(self) -> Iterator["PaginatedResponse"]:
        """Yield this page, then each following page.

        The next page is only fetched when the consumer asks for it, so
        breaking out of the loop stops traversal.
        """
        page: PaginatedResponse | None = self
        while page is not None:
            yield page
            if not page.has_next_page():
                return
            page = page.next_page()

    def each_page(self, visit: Callable[["PaginatedResponse"], Any]) -> None:
        """Call *visit* with this page and every following page, in order.

        Raise ``StopPagination`` from *visit* to stop before the next page
        is fetched.
        """
        try:
            for page in self.iter_pages():
                visit(page)
        except StopPagination:
            logger.debug("Pagination stopped by visitor")

    def iter_items(self) -> Iterator[Any]:
        """Yield every item of this and the following pages, in order."""
        for page in self.iter_pages():
            yield from page

    def auto_paginate(
        self,
        visit: Callable[[Any], Any] | None = None,
    ) -> list[Any] | None:
        """Collect or stream every item from this page onwards.

        Args:
            visit: Optional callback invoked once per item. When given,
                items are streamed page by page and nothing is returned.
                Raise ``StopPagination`` from it to stop early.

        Returns:
            List of all items across pages when *visit* is None, otherwise
            None.
        """
        if visit is None:
            return list(self.iter_items())

        try:
            for item in self.iter_items():
                visit(item)
        except StopPagination:
            logger.debug("Pagination stopped by visitor")
        return None


PageResult = PaginatedResponse
