# Domain models package (navigation links, paginated pages)

from src.gitlab.domain.link_set import LinkSet
from src.gitlab.domain.paginated_response import PageResult, PaginatedResponse

__all__ = [
    "LinkSet",
    "PageResult",
    "PaginatedResponse",
]
