"""Forward pagination over a project's board items."""

import logging
from collections.abc import Iterator
from typing import Protocol

from ..exceptions import BoardError
from .models import BoardItem, BoardItemPage

logger = logging.getLogger(__name__)


class PageSource(Protocol):
    """Anything that can fetch a page of board items."""

    def get_project_items_page(
        self, project_id: str, after: str | None = None, first: int = ...
    ) -> BoardItemPage: ...


class BoardItemPages:
    """Restartable, finite sequence of board item pages.

    Every iteration starts again from the first page. Pages are fetched
    strictly one after another since each request needs the previous
    page's end cursor. Fetch errors propagate unchanged. A page that
    promises more items without a cursor raises ``BoardError``.
    """

    def __init__(self, source: PageSource, project_id: str, page_size: int = 100):
        self.source = source
        self.project_id = project_id
        self.page_size = page_size

    def __iter__(self) -> Iterator[BoardItemPage]:
        cursor: str | None = None
        page_number = 0
        while True:
            page = self.source.get_project_items_page(
                self.project_id, after=cursor, first=self.page_size
            )
            page_number += 1
            logger.debug(
                f"Fetched page {page_number} with {len(page.items)} items "
                f"(has_next_page={page.has_next_page})"
            )
            yield page

            if not page.has_next_page:
                return
            if not page.end_cursor:
                raise BoardError(
                    f"Page {page_number} reports more items but has no end cursor"
                )
            cursor = page.end_cursor

    def items(self) -> Iterator[BoardItem]:
        """Iterate over every item of every page in arrival order."""
        for page in self:
            yield from page.items


def fetch_board_items(
    source: PageSource, project_id: str, page_size: int = 100
) -> list[BoardItem]:
    """Fetch all items on a board, newest position first."""
    items = list(BoardItemPages(source, project_id, page_size).items())
    logger.info(f"Fetched {len(items)} board items")
    return items
