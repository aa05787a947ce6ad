# Services package (endpoint methods)

from src.gitlab.services.merge_request_service import (
    MergeRequestService,
    encode_project,
)

__all__ = ["MergeRequestService", "encode_project"]
