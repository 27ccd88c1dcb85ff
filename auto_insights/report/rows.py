"""Project reportable board items into report rows."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from ..github_client.models import IssueContent, PullRequestContent
from .normalize import NormalizedItem

TYPE_LABELS = {"Issue": "Issue", "PullRequest": "PR"}


class RowLayout(str, Enum):
    """Which repository column the report carries."""

    # owner/name
    REPO = "repo"
    # repository short name
    TRACK = "track"


class ReportRow(BaseModel):
    """One line of the iteration report."""

    number: int = Field(..., description="Issue or pull request number")
    type: str = Field(..., description="'Issue' or 'PR'")
    repository: str = Field(..., description="owner/name or short name, by layout")
    title: str = Field(..., description="Issue or pull request title")
    layout: RowLayout = Field(RowLayout.REPO, exclude=True)

    def as_record(self) -> dict[str, Any]:
        """Return the row as an ordered column -> value mapping."""
        return {
            "number": self.number,
            "type": self.type,
            self.layout.value: self.repository,
            "title": self.title,
        }


def project_row(item: NormalizedItem, layout: RowLayout = RowLayout.REPO) -> ReportRow:
    """Build the report row for an item that passed the inclusion rules."""
    content = item.content
    if not isinstance(content, (IssueContent, PullRequestContent)):
        raise ValueError("Only issues and pull requests can be reported")
    if content.repository is None:
        raise ValueError(f"#{content.number} is not linked to a repository")

    if layout is RowLayout.TRACK:
        repository = content.repository.name
    else:
        repository = content.repository.full_name

    return ReportRow(
        number=content.number,
        type=TYPE_LABELS[content.typename],
        repository=repository,
        title=content.title,
        layout=layout,
    )
