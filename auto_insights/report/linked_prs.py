"""Index of pull requests already linked to a board item."""

import logging
from collections.abc import Iterable

from ..github_client.models import BoardItem, PullRequestFieldValue

logger = logging.getLogger(__name__)


def build_linked_pr_index(items: Iterable[BoardItem]) -> frozenset[str]:
    """Collect the ids of every pull request linked from any board item.

    Must be given the full, unfiltered item list: a PR stays suppressed even
    when the issue linking it is itself left out of the report.
    """
    linked: set[str] = set()
    for item in items:
        for value in item.field_values:
            if isinstance(value, PullRequestFieldValue):
                linked.update(value.pull_request_ids)

    logger.debug(f"Found {len(linked)} linked pull requests")
    return frozenset(linked)
