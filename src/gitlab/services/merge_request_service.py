"""Endpoint methods for project merge requests.

Each method maps to one API endpoint. Options are forwarded unchanged as
query parameters (GET) or as the JSON body (POST/PUT).
"""

from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from src.gitlab.domain.paginated_response import PaginatedResponse

if TYPE_CHECKING:
    from src.gitlab.client import Client


def encode_project(project: int | str) -> str:
    """Encode a project ID or ``namespace/name`` path for use in a URL.

    Examples:
        >>> encode_project(5)
        '5'
        >>> encode_project("gitlab-org/gitlab")
        'gitlab-org%2Fgitlab'
    """
    return quote(str(project), safe="")


class MergeRequestService:
    """Merge request endpoints.

    Usually reached through ``Client.merge_requests``.
    """

    def __init__(self, client: "Client") -> None:
        """Initialize service with the client used to issue requests.

        Args:
            client: Client whose transport performs the requests
        """
        self._client = client

    def _base_path(self, project: int | str, merge_request_id: int | None = None) -> str:
        project_path = f"/projects/{encode_project(project)}"
        if merge_request_id is None:
            return f"{project_path}/merge_requests"
        return f"{project_path}/merge_request/{merge_request_id}"

    def list_merge_requests(
        self,
        project: int | str,
        **options: Any,
    ) -> PaginatedResponse:
        """List a project's merge requests.

        Args:
            project: Project ID or ``namespace/name`` path
            **options: Query parameters such as ``page``, ``per_page``,
                ``state``

        Returns:
            First requested page of merge requests
        """
        return self._client.get(self._base_path(project), query=options)

    def get_merge_request(self, project: int | str, merge_request_id: int) -> Any:
        """Get a single merge request."""
        return self._client.get(self._base_path(project, merge_request_id))

    def create_merge_request(
        self,
        project: int | str,
        title: str,
        **options: Any,
    ) -> Any:
        """Create a merge request.

        Args:
            project: Project ID or ``namespace/name`` path
            title: Title of the merge request
            **options: Body fields such as ``source_branch`` (required by
                the server), ``target_branch``, ``assignee_id``,
                ``target_project_id``

        Returns:
            The created merge request
        """
        body = {"title": title, **options}
        return self._client.post(self._base_path(project), body=body)

    def update_merge_request(
        self,
        project: int | str,
        merge_request_id: int,
        **options: Any,
    ) -> Any:
        """Update a merge request.

        Options include ``title``, ``source_branch``, ``target_branch``,
        ``assignee_id`` and ``state_event`` (``close``, ``reopen`` or
        ``merge``).
        """
        return self._client.put(
            self._base_path(project, merge_request_id),
            body=options,
        )

    def accept_merge_request(
        self,
        project: int | str,
        merge_request_id: int,
        **options: Any,
    ) -> Any:
        """Accept (merge) a merge request.

        Options include ``merge_commit_message``.
        """
        return self._client.put(
            f"{self._base_path(project, merge_request_id)}/merge",
            body=options,
        )

    def create_merge_request_comment(
        self,
        project: int | str,
        merge_request_id: int,
        note: str,
    ) -> Any:
        """Add a comment to a merge request."""
        return self._client.post(
            f"{self._base_path(project, merge_request_id)}/comments",
            body={"note": note},
        )

    def list_merge_request_comments(
        self,
        project: int | str,
        merge_request_id: int,
        **options: Any,
    ) -> PaginatedResponse:
        """List the comments on a merge request.

        Options include ``page`` and ``per_page``.
        """
        return self._client.get(
            f"{self._base_path(project, merge_request_id)}/comments",
            query=options,
        )

    def get_merge_request_changes(
        self,
        project: int | str,
        merge_request_id: int,
    ) -> Any:
        """Get a merge request together with its diff."""
        return self._client.get(
            f"{self._base_path(project, merge_request_id)}/changes"
        )
