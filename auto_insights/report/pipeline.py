"""Board items -> filtered report rows -> CSV."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Protocol

from ..config import InsightsConfig
from ..github_client.models import BoardItem
from ..github_client.pagination import PageSource, fetch_board_items
from ..utils.date_parser import utc_now
from .csv_export import to_csv
from .filters import WindowPolicy, is_reportable
from .linked_prs import build_linked_pr_index
from .normalize import normalize_item
from .rows import ReportRow, RowLayout, project_row

logger = logging.getLogger(__name__)

REPORT_FILENAME = "auto-insights-{date}.csv"


class BoardSource(PageSource, Protocol):
    """Page source that can also resolve a project number to a board id."""

    def get_project_id(self, login: str, number: int) -> str: ...


@dataclass
class InsightsReport:
    """Result of one report run."""

    rows: list[ReportRow]
    csv: str
    filename: str
    total_items: int

    @property
    def is_empty(self) -> bool:
        return not self.rows


def report_filename(now: datetime) -> str:
    """Return ``auto-insights-<YYYY-MM-DD>.csv`` for the UTC date of ``now``."""
    return REPORT_FILENAME.format(date=now.astimezone(timezone.utc).date().isoformat())


def build_report(
    items: Sequence[BoardItem],
    now: datetime,
    policy: WindowPolicy = WindowPolicy.CLOSED,
    layout: RowLayout = RowLayout.REPO,
) -> list[ReportRow]:
    """Filter board items down to report rows, keeping board order."""
    linked_prs = build_linked_pr_index(items)

    rows = []
    for item in items:
        normalized = normalize_item(item)
        if is_reportable(normalized, linked_prs, now, policy):
            rows.append(project_row(normalized, layout))

    logger.info(f"{len(rows)} of {len(items)} board items are reportable")
    return rows


def run_report(
    client: BoardSource, config: InsightsConfig, now: datetime | None = None
) -> InsightsReport:
    """Fetch the configured board and build its iteration report.

    Args:
        client: Board source, normally a GitHubClient
        config: Validated run configuration
        now: Reference time, defaults to the current UTC time

    Returns:
        InsightsReport with rows and rendered CSV
    """
    config.validate_for_run()
    assert config.org is not None  # guaranteed by validation above
    assert config.project_number is not None  # guaranteed by validation above

    if now is None:
        now = utc_now()

    project_id = client.get_project_id(config.org, config.project_number)
    items = fetch_board_items(client, project_id)
    rows = build_report(items, now, config.window_policy, config.row_layout)

    return InsightsReport(
        rows=rows,
        csv=to_csv([row.as_record() for row in rows]),
        filename=report_filename(now),
        total_items=len(items),
    )
