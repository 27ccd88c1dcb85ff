"""Test configuration and fixtures."""

import pytest

from auto_insights.github_client.models import BoardItem
from tests.factories import make_item


@pytest.fixture
def board_item() -> BoardItem:
    """An open issue in the 2024-01-01 two-week iteration."""
    return make_item()
