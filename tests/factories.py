"""Raw GraphQL payload builders for board item tests."""

from typing import Any

from auto_insights.github_client.models import BoardItem


def repo_ref(name: str = "widgets", owner: str = "acme") -> dict[str, Any]:
    return {"name": name, "owner": {"login": owner}}


def status_value(name: str, field: str = "Status") -> dict[str, Any]:
    return {
        "__typename": "ProjectV2ItemFieldSingleSelectValue",
        "name": name,
        "field": {"name": field},
    }


def iteration_value(
    start_date: str = "2024-01-01",
    duration: int | None = 14,
    title: str = "Sprint 1",
    field: str = "Iteration",
) -> dict[str, Any]:
    value: dict[str, Any] = {
        "__typename": "ProjectV2ItemFieldIterationValue",
        "title": title,
        "startDate": start_date,
        "field": {"name": field},
    }
    if duration is not None:
        value["duration"] = duration
    return value


def linked_prs_value(*pr_ids: str) -> dict[str, Any]:
    return {
        "__typename": "ProjectV2ItemFieldPullRequestValue",
        "pullRequests": {"nodes": [{"id": pr_id} for pr_id in pr_ids]},
        "field": {"name": "Linked pull requests"},
    }


def issue_content(
    number: int = 1, title: str = "Fix bug", repository: dict | None = None
) -> dict[str, Any]:
    return {
        "__typename": "Issue",
        "title": title,
        "number": number,
        "state": "OPEN",
        "repository": repository or repo_ref(),
    }


def pr_content(
    pr_id: str = "PR_1",
    number: int = 2,
    title: str = "Bug fix",
    repository: dict | None = None,
) -> dict[str, Any]:
    return {
        "__typename": "PullRequest",
        "id": pr_id,
        "title": title,
        "number": number,
        "state": "OPEN",
        "repository": repository or repo_ref(),
    }


def draft_content(title: str = "Idea") -> dict[str, Any]:
    return {"__typename": "DraftIssue", "title": title}


def raw_item(
    content: dict[str, Any] | None = None,
    status: str | None = "In Progress",
    iteration: dict[str, Any] | None = None,
    extra_values: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Build a raw ProjectV2Item node as returned by GraphQL."""
    nodes: list[dict[str, Any]] = []
    if status is not None:
        nodes.append(status_value(status))
    if iteration is not None:
        nodes.append(iteration)
    nodes.extend(extra_values or [])
    return {
        "fieldValues": {"nodes": nodes},
        "content": content if content is not None else issue_content(),
    }


def make_item(**kwargs: Any) -> BoardItem:
    """Build a validated BoardItem, see raw_item for arguments."""
    kwargs.setdefault("iteration", iteration_value())
    return BoardItem.model_validate(raw_item(**kwargs))
