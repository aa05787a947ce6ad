"""Pydantic model for pagination navigation links."""

from collections.abc import Mapping
from urllib.parse import urlparse

from pydantic import BaseModel, Field, field_validator

from src.gitlab.utils.link_header_parser import parse_link_header

LINK_HEADER = "link"

NAVIGATION_RELS = ("first", "prev", "next", "last")


def is_absolute_url(url: str) -> bool:
    """Return True if *url* carries both a scheme and a host."""
    parsed = urlparse(url)
    return bool(parsed.scheme and parsed.netloc)


class LinkSet(BaseModel):
    """Navigation targets of one page of a paginated resource.

    Each field is an absolute URL, or None when the server did not
    advertise that page. A LinkSet is built once from the response that
    carried it and never changes afterwards.
    """

    first: str | None = Field(default=None, description="URL of the first page")
    prev: str | None = Field(default=None, description="URL of the previous page")
    next: str | None = Field(default=None, description="URL of the next page")
    last: str | None = Field(default=None, description="URL of the last page")

    model_config = {"frozen": True}

    @field_validator("first", "prev", "next", "last")
    @classmethod
    def url_must_be_absolute(cls, v: str | None) -> str | None:
        """Validate that a present link is an absolute URL."""
        if v is not None and not is_absolute_url(v):
            raise ValueError("Navigation link must be an absolute URL")
        return v

    @classmethod
    def parse(cls, header_value: str | None) -> "LinkSet":
        """Build a LinkSet from a raw Link header value.

        Never raises: unknown relations, malformed entries and relative
        URLs are dropped, leaving the matching fields as None.

        Args:
            header_value: Raw Link header, or None when absent.

        Returns:
            LinkSet with whichever of first/prev/next/last were present.
        """
        links = parse_link_header(header_value)
        return cls(
            **{
                rel: url
                for rel, url in links.items()
                if rel in NAVIGATION_RELS and is_absolute_url(url)
            }
        )

    @classmethod
    def from_headers(cls, headers: Mapping[str, str] | str | None) -> "LinkSet":
        """Build a LinkSet from response headers.

        Args:
            headers: A header mapping (looked up case-insensitively), a raw
                Link header string, or None.

        Returns:
            Parsed LinkSet; empty when no Link header is present.
        """
        if headers is None or isinstance(headers, str):
            return cls.parse(headers)

        value = next(
            (v for k, v in headers.items() if k.lower() == LINK_HEADER),
            None,
        )
        return cls.parse(value)
