"""Test main CLI functionality."""

from typer.testing import CliRunner

from auto_insights.cli.main import app

runner = CliRunner()


def test_version_command() -> None:
    """Test version command."""
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert "Auto Insights v" in result.stdout


def test_help_lists_report_command() -> None:
    """Test the top-level help lists the report command."""
    result = runner.invoke(app, ["-h"])
    assert result.exit_code == 0
    assert "report" in result.stdout
