"""Inclusion rules deciding which board items belong in the report.

Rules run in a fixed order and the first failing rule excludes the item:

1. Status: items whose Status ends with "done" (any case) are finished.
2. Iteration assignment: items outside any iteration are skipped.
3. Iteration window: the iteration must be current, see ``WindowPolicy``.
4. Draft: items not filed against a repository are skipped.
5. Linked PR: pull requests already linked from an issue are skipped.
"""

import logging
from collections.abc import Set
from datetime import datetime
from enum import Enum

from ..exceptions import MissingStatusError
from ..github_client.models import PullRequestContent
from .normalize import IterationValue, NormalizedItem

logger = logging.getLogger(__name__)

DONE_SUFFIX = "done"


class WindowPolicy(str, Enum):
    """How an item's iteration is matched against the current time."""

    # start <= now < start + duration, excluded when duration is unknown
    CLOSED = "closed"
    # start <= now, no upper bound
    OPEN = "open"


def is_done(item: NormalizedItem) -> bool:
    """Whether the item's Status marks it finished.

    Raises:
        MissingStatusError: If the item has no Status value
    """
    status = item.status
    if status is None:
        title = getattr(item.content, "title", "<no content>")
        raise MissingStatusError(f"Board item '{title}' has no Status field value")
    return status.value.lower().endswith(DONE_SUFFIX)


def in_iteration_window(
    iteration: IterationValue, now: datetime, policy: WindowPolicy
) -> bool:
    """Whether ``now`` (timezone-aware, UTC) falls in the iteration window."""
    if now < iteration.start:
        return False
    if policy is WindowPolicy.OPEN:
        return True

    # closed windows need a duration
    end = iteration.end
    return end is not None and now < end


def is_draft(item: NormalizedItem) -> bool:
    """Whether the item has not been filed against a repository."""
    repository = getattr(item.content, "repository", None)
    return repository is None or not repository.name


def is_linked_pull_request(item: NormalizedItem, linked_prs: Set[str]) -> bool:
    """Whether the item is a pull request already linked from another item."""
    return isinstance(item.content, PullRequestContent) and (
        item.content.id in linked_prs
    )


def exclusion_reason(
    item: NormalizedItem,
    linked_prs: Set[str],
    now: datetime,
    policy: WindowPolicy = WindowPolicy.CLOSED,
) -> str | None:
    """Return why the item is excluded, or None when it is reportable."""
    if is_done(item):
        return "done"

    iteration = item.iteration
    if iteration is None:
        return "no iteration"

    if not in_iteration_window(iteration, now, policy):
        return f"outside iteration '{iteration.title}'"

    if is_draft(item):
        return "draft"

    if is_linked_pull_request(item, linked_prs):
        return "pull request linked from an issue"

    return None


def is_reportable(
    item: NormalizedItem,
    linked_prs: Set[str],
    now: datetime,
    policy: WindowPolicy = WindowPolicy.CLOSED,
) -> bool:
    """Apply the inclusion rules to a normalized item."""
    reason = exclusion_reason(item, linked_prs, now, policy)
    if reason is not None:
        title = getattr(item.content, "title", "<no content>")
        logger.debug(f"Excluding '{title}': {reason}")
        return False
    return True
