"""Tests for report row projection."""

import pytest

from auto_insights.report.normalize import normalize_item
from auto_insights.report.rows import ReportRow, RowLayout, project_row
from tests.factories import draft_content, issue_content, make_item, pr_content, repo_ref


class TestProjectRow:
    """Test project_row."""

    def test_issue_row(self) -> None:
        """Test issue rows carry owner/name and the Issue type."""
        item = normalize_item(
            make_item(content=issue_content(number=12, title="Fix login"))
        )

        row = project_row(item)

        assert row.as_record() == {
            "number": 12,
            "type": "Issue",
            "repo": "acme/widgets",
            "title": "Fix login",
        }

    def test_pull_request_row(self) -> None:
        """Test pull request rows are tagged PR."""
        item = normalize_item(make_item(content=pr_content(number=34)))

        row = project_row(item)

        assert row.type == "PR"
        assert row.number == 34

    def test_track_layout(self) -> None:
        """Test the track layout uses the repository short name."""
        item = normalize_item(
            make_item(content=issue_content(repository=repo_ref("firstorder", "EQWorks")))
        )

        row = project_row(item, RowLayout.TRACK)

        assert list(row.as_record()) == ["number", "type", "track", "title"]
        assert row.as_record()["track"] == "firstorder"

    def test_draft_cannot_be_projected(self) -> None:
        """Test drafts are rejected."""
        item = normalize_item(make_item(content=draft_content()))

        with pytest.raises(ValueError, match="Only issues and pull requests"):
            project_row(item)


class TestReportRow:
    """Test ReportRow model."""

    def test_layout_not_serialized(self) -> None:
        """Test layout is excluded from model dumps."""
        row = ReportRow(number=1, type="Issue", repository="acme/widgets", title="x")

        assert "layout" not in row.model_dump()
        assert row.layout is RowLayout.REPO
