"""Tests for CSV rendering."""

from auto_insights.report.csv_export import to_csv


class TestToCsv:
    """Test to_csv."""

    def test_single_row(self) -> None:
        """Test the exact header and row layout."""
        rows = [{"number": 1, "type": "Issue", "title": "Fix bug"}]

        assert to_csv(rows) == '"number","type","title"\n"1","Issue","Fix bug"'

    def test_multiple_rows_keep_order(self) -> None:
        """Test rows are emitted in input order without a trailing newline."""
        rows = [
            {"number": 2, "type": "PR", "repo": "acme/api", "title": "B"},
            {"number": 1, "type": "Issue", "repo": "acme/web", "title": "A"},
        ]

        result = to_csv(rows)

        assert result.splitlines() == [
            '"number","type","repo","title"',
            '"2","PR","acme/api","B"',
            '"1","Issue","acme/web","A"',
        ]
        assert not result.endswith("\n")

    def test_empty(self) -> None:
        """Test no rows renders as an empty string."""
        assert to_csv([]) == ""

    def test_values_are_not_escaped(self) -> None:
        """Test embedded quotes and commas pass through unchanged."""
        rows = [{"title": 'Say "hi", then leave'}]

        assert to_csv(rows) == '"title"\n"Say "hi", then leave"'
