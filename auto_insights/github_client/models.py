"""Pydantic models for GitHub Projects (v2) board data.

These models map directly to the GraphQL response of the ProjectV2 items query.
API Reference: https://docs.github.com/en/graphql/reference/objects#projectv2item
"""

from datetime import date
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, field_validator

ITERATION_VALUE = "ProjectV2ItemFieldIterationValue"
SINGLE_SELECT_VALUE = "ProjectV2ItemFieldSingleSelectValue"
PULL_REQUEST_VALUE = "ProjectV2ItemFieldPullRequestValue"


def _typename(value: Any) -> str | None:
    if isinstance(value, dict):
        return value.get("__typename", value.get("typename"))
    return getattr(value, "typename", None)


def _unwrap_nodes(value: Any) -> Any:
    """Flatten a GraphQL connection ``{"nodes": [...]}`` into a plain list."""
    if isinstance(value, dict):
        return value.get("nodes") or []
    return value


class GitHubOwner(BaseModel):
    """Repository owner (user or organization)."""

    login: str = Field(..., description="Owner login (string)")


class GitHubRepositoryRef(BaseModel):
    """Repository reference attached to issue and pull request content."""

    name: str = Field(..., description="Repository short name (string)")
    owner: GitHubOwner = Field(..., description="Repository owner")

    @property
    def full_name(self) -> str:
        return f"{self.owner.login}/{self.name}"


class IssueContent(BaseModel):
    """Issue card content.

    Maps to GitHub GraphQL Issue object.
    API Reference: https://docs.github.com/en/graphql/reference/objects#issue
    """

    model_config = ConfigDict(populate_by_name=True)

    typename: Literal["Issue"] = Field("Issue", alias="__typename")
    title: str = Field(..., description="Issue title (string)")
    number: int = Field(..., description="Issue number within the repository")
    state: str = Field(..., description="Current state: OPEN or CLOSED (string)")
    repository: GitHubRepositoryRef | None = Field(
        None, description="Repository the issue was filed against"
    )


class PullRequestContent(BaseModel):
    """Pull request card content.

    Maps to GitHub GraphQL PullRequest object.
    API Reference: https://docs.github.com/en/graphql/reference/objects#pullrequest
    """

    model_config = ConfigDict(populate_by_name=True)

    typename: Literal["PullRequest"] = Field("PullRequest", alias="__typename")
    id: str = Field(..., description="GraphQL node id of the pull request")
    title: str = Field(..., description="Pull request title (string)")
    number: int = Field(..., description="Pull request number within the repository")
    state: str = Field(..., description="Current state: OPEN, CLOSED or MERGED")
    repository: GitHubRepositoryRef | None = Field(
        None, description="Repository the pull request belongs to"
    )


class DraftIssueContent(BaseModel):
    """Draft issue that has not been filed against a repository yet."""

    model_config = ConfigDict(populate_by_name=True)

    typename: Literal["DraftIssue"] = Field("DraftIssue", alias="__typename")
    title: str = Field("", description="Draft title (string)")


ItemContent = Annotated[
    Union[
        Annotated[IssueContent, Tag("Issue")],
        Annotated[PullRequestContent, Tag("PullRequest")],
        Annotated[DraftIssueContent, Tag("DraftIssue")],
    ],
    Discriminator(_typename),
]


class FieldRef(BaseModel):
    """Project field a value belongs to."""

    name: str = Field(..., description="Field name as shown on the board")


class IterationFieldValue(BaseModel):
    """Value of an iteration field (e.g. ``Iteration``)."""

    model_config = ConfigDict(populate_by_name=True)

    typename: Literal["ProjectV2ItemFieldIterationValue"] = Field(
        ITERATION_VALUE, alias="__typename"
    )
    field: FieldRef
    title: str = Field(..., description="Iteration title (string)")
    start_date: date = Field(..., alias="startDate", description="Iteration start")
    duration: int | None = Field(
        None, description="Iteration length in days, absent on newer boards"
    )


class SingleSelectFieldValue(BaseModel):
    """Value of a single select field (e.g. ``Status``)."""

    model_config = ConfigDict(populate_by_name=True)

    typename: Literal["ProjectV2ItemFieldSingleSelectValue"] = Field(
        SINGLE_SELECT_VALUE, alias="__typename"
    )
    field: FieldRef
    name: str = Field(..., description="Selected option name (string)")


class PullRequestFieldValue(BaseModel):
    """Pull requests linked to an item through the board's PR field."""

    model_config = ConfigDict(populate_by_name=True)

    typename: Literal["ProjectV2ItemFieldPullRequestValue"] = Field(
        PULL_REQUEST_VALUE, alias="__typename"
    )
    field: FieldRef
    pull_request_ids: list[str] = Field(
        default_factory=list,
        alias="pullRequests",
        description="GraphQL node ids of the linked pull requests",
    )

    @field_validator("pull_request_ids", mode="before")
    @classmethod
    def _flatten_pull_requests(cls, value: Any) -> Any:
        nodes = _unwrap_nodes(value) or []
        return [node["id"] if isinstance(node, dict) else node for node in nodes]


class UnknownFieldValue(BaseModel):
    """Any field value type the report does not use (text, number, ...)."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    typename: str | None = Field(None, alias="__typename")


def _field_value_tag(value: Any) -> str:
    typename = _typename(value)
    if typename in (ITERATION_VALUE, SINGLE_SELECT_VALUE, PULL_REQUEST_VALUE):
        return typename
    return "unknown"


FieldValue = Annotated[
    Union[
        Annotated[IterationFieldValue, Tag(ITERATION_VALUE)],
        Annotated[SingleSelectFieldValue, Tag(SINGLE_SELECT_VALUE)],
        Annotated[PullRequestFieldValue, Tag(PULL_REQUEST_VALUE)],
        Annotated[UnknownFieldValue, Tag("unknown")],
    ],
    Discriminator(_field_value_tag),
]


class BoardItem(BaseModel):
    """One card on a GitHub Projects board.

    Maps to GitHub GraphQL ProjectV2Item object.
    API Reference: https://docs.github.com/en/graphql/reference/objects#projectv2item
    """

    model_config = ConfigDict(populate_by_name=True)

    content: Optional[ItemContent] = Field(
        None, description="Issue, pull request or draft issue on the card"
    )
    field_values: list[FieldValue] = Field(
        default_factory=list,
        alias="fieldValues",
        description="Custom field values set on the card",
    )

    @field_validator("content", mode="before")
    @classmethod
    def _empty_content(cls, value: Any) -> Any:
        # Redacted or inaccessible content comes back as an empty object
        return value or None

    @field_validator("field_values", mode="before")
    @classmethod
    def _flatten_field_values(cls, value: Any) -> Any:
        return _unwrap_nodes(value)


class BoardItemPage(BaseModel):
    """One page of board items plus its pagination info."""

    items: list[BoardItem] = Field(default_factory=list)
    end_cursor: str | None = Field(None, description="Cursor of the last item")
    has_next_page: bool = Field(False, description="Whether more items follow")
