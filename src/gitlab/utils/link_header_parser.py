"""Parser utilities for HTTP ``Link`` headers.

Paginated list endpoints describe neighbouring pages in a single header:

    Link: <https://gitlab.example.com/api/v4/projects?page=2>; rel="next",
          <https://gitlab.example.com/api/v4/projects?page=9>; rel="last"

Servers are not always consistent about this format, so parsing never
raises: entries that cannot be understood are skipped and the remaining
ones are still returned.
"""

import logging
import re

logger = logging.getLogger(__name__)

# Entries are separated by commas, but URLs may legally contain commas too.
# Only split on a comma that starts a new "<...>" entry.
_ENTRY_SEPARATOR = re.compile(r",\s*(?=<)")

# Format: <url>; param1=value1; param2="value2"
LINK_ENTRY_PATTERN = re.compile(r"^\s*<(?P<url>[^<>]*)>\s*(?P<params>(?:;.*)?)$")

# rel="next", rel=next or rel="next last"
REL_PARAM_PATTERN = re.compile(
    r';\s*rel\s*=\s*(?:"(?P<quoted>[^"]*)"|(?P<token>[^\s;,"]+))',
    re.IGNORECASE,
)


def parse_link_entry(entry: str) -> tuple[str, list[str]] | None:
    """Parse a single ``<url>; rel="name"`` entry.

    Args:
        entry: One comma-separated entry of a Link header.

    Returns:
        Tuple of (url, relation names) if the entry is valid, None if it is
        blank or malformed.

    Examples:
        >>> parse_link_entry('<https://h/api/v4/x?page=2>; rel="next"')
        ('https://h/api/v4/x?page=2', ['next'])
        >>> parse_link_entry('https://h/api/v4/x; rel="next"')
        None
    """
    match = LINK_ENTRY_PATTERN.match(entry)
    if not match:
        return None

    url = match.group("url").strip()
    if not url:
        return None

    rel_match = REL_PARAM_PATTERN.search(match.group("params"))
    if not rel_match:
        return None

    rel_value = rel_match.group("quoted")
    if rel_value is None:
        rel_value = rel_match.group("token")

    rels = [rel.lower() for rel in rel_value.split()]
    if not rels:
        return None

    return url, rels


def parse_link_header(value: str | None) -> dict[str, str]:
    """Parse a full Link header into a mapping of relation name to URL.

    Args:
        value: Raw header value, or None when the header was absent.

    Returns:
        Dictionary mapping each relation name to its URL. When a relation
        appears more than once, the first occurrence wins. Malformed
        entries are skipped.

    Examples:
        >>> parse_link_header('<https://h/x?page=2>; rel="next", <https://h/x?page=5>; rel="last"')
        {'next': 'https://h/x?page=2', 'last': 'https://h/x?page=5'}
        >>> parse_link_header(None)
        {}
    """
    links: dict[str, str] = {}

    if not value or not value.strip():
        return links

    for raw_entry in _ENTRY_SEPARATOR.split(value.strip()):
        parsed = parse_link_entry(raw_entry)
        if parsed is None:
            logger.debug("Skipping malformed Link header entry: %r", raw_entry)
            continue

        url, rels = parsed
        for rel in rels:
            links.setdefault(rel, url)

    return links
