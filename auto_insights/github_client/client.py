"""GitHub Projects (v2) client using PyGitHub's GraphQL requester."""

import logging
import os
from typing import Any

from github import Auth, Github
from github.GithubException import GithubException, UnknownObjectException

from ..exceptions import BoardError, ConfigurationError, ProjectNotFoundError
from .models import BoardItem, BoardItemPage
from .queries import PROJECT_ID_QUERY, PROJECT_ITEMS_QUERY

logger = logging.getLogger(__name__)

PAGE_SIZE = 100


class GitHubClient:
    """GitHub GraphQL client for reading project boards."""

    def __init__(self, token: str | None = None):
        """Initialize GitHub client with authentication.

        Args:
            token: GitHub personal access token with ``read:project`` scope.
                If None, reads from GITHUB_TOKEN env var.
        """
        self.token = token or os.getenv("GITHUB_TOKEN")
        if not self.token:
            raise ConfigurationError(
                "GitHub token is required. Set GITHUB_TOKEN environment variable."
            )

        self.github = Github(auth=Auth.Token(self.token))

    def _graphql(self, query: str, variables: dict[str, Any]) -> dict[str, Any]:
        """Execute a GraphQL query and return its ``data`` payload.

        Raises:
            ProjectNotFoundError: If GitHub reports a NOT_FOUND error
            BoardError: For any other API failure
        """
        try:
            _, response = self.github.requester.graphql_query(query, variables)
        except UnknownObjectException as e:
            raise ProjectNotFoundError(f"GitHub object not found: {e}") from e
        except GithubException as e:
            raise BoardError(f"GraphQL request failed: {e}") from e

        return dict(response.get("data") or {})

    def get_project_id(self, login: str, number: int) -> str:
        """Resolve an organization project number to its GraphQL node id.

        Args:
            login: Organization login
            number: Project number (visible in the project URL)

        Returns:
            Opaque project node id

        Raises:
            ProjectNotFoundError: If the organization or project does not exist
        """
        data = self._graphql(PROJECT_ID_QUERY, {"login": login, "number": number})

        project = (data.get("organization") or {}).get("projectV2")
        if not project:
            raise ProjectNotFoundError(
                f"Project #{number} not found for organization {login}"
            )

        logger.debug(f"Resolved {login} project #{number} to {project['id']}")
        return str(project["id"])

    def get_project_items_page(
        self, project_id: str, after: str | None = None, first: int = PAGE_SIZE
    ) -> BoardItemPage:
        """Fetch one page of board items.

        Args:
            project_id: Project node id from get_project_id
            after: End cursor of the previous page, None for the first page
            first: Page size (GitHub caps this at 100)

        Returns:
            BoardItemPage with the items and pagination info
        """
        data = self._graphql(
            PROJECT_ITEMS_QUERY, {"id": project_id, "first": first, "after": after}
        )

        node = data.get("node")
        if node is None:
            raise ProjectNotFoundError(f"Project {project_id} not found")

        items = node.get("items") or {}
        page_info = items.get("pageInfo") or {}
        return BoardItemPage(
            items=[BoardItem.model_validate(raw) for raw in items.get("nodes") or []],
            end_cursor=page_info.get("endCursor"),
            has_next_page=bool(page_info.get("hasNextPage")),
        )
