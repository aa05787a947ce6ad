# Utils package (header parsers)

from src.gitlab.utils.link_header_parser import parse_link_entry, parse_link_header

__all__ = [
    "parse_link_entry",
    "parse_link_header",
]
