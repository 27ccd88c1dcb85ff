"""GitHub client package for project board access."""

from .client import GitHubClient
from .models import (
    BoardItem,
    BoardItemPage,
    DraftIssueContent,
    IssueContent,
    IterationFieldValue,
    PullRequestContent,
    PullRequestFieldValue,
    SingleSelectFieldValue,
    UnknownFieldValue,
)
from .pagination import BoardItemPages, fetch_board_items

__all__ = [
    "GitHubClient",
    "BoardItem",
    "BoardItemPage",
    "BoardItemPages",
    "DraftIssueContent",
    "IssueContent",
    "IterationFieldValue",
    "PullRequestContent",
    "PullRequestFieldValue",
    "SingleSelectFieldValue",
    "UnknownFieldValue",
    "fetch_board_items",
]
