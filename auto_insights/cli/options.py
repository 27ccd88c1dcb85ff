"""Standardized CLI option definitions for consistent shorthand mappings."""

import typer

from ..report.filters import WindowPolicy
from ..report.rows import RowLayout

# Board options
ORG_OPTION = typer.Option(
    None, "--org", "-o", help="GitHub organization login (defaults to GITHUB_ORG)"
)

PROJECT_NUMBER_OPTION = typer.Option(
    None,
    "--project-number",
    "-n",
    help="Project number from the board URL (defaults to GITHUB_PROJECT_NUMBER)",
)

# Authentication options
TOKEN_OPTION = typer.Option(
    None, "--token", "-t", help="GitHub API token (defaults to GITHUB_TOKEN env var)"
)

# Report options
WINDOW_OPTION = typer.Option(
    WindowPolicy.CLOSED,
    "--window",
    "-w",
    help="Iteration window: 'closed' (start to start+duration) or 'open' (since start)",
)

LAYOUT_OPTION = typer.Option(
    RowLayout.REPO,
    "--layout",
    "-l",
    help="Repository column: 'repo' (owner/name) or 'track' (short name)",
)

AS_OF_OPTION = typer.Option(
    None, "--as-of", help="Report as of this date instead of now (YYYY-MM-DD)"
)

OUTPUT_OPTION = typer.Option(
    None, "--output", help="Output file path (default: print to stdout)"
)

# Delivery options
SLACK_OPTION = typer.Option(
    False, "--slack/--no-slack", help="Upload the report to Slack"
)

SLACK_CHANNEL_OPTION = typer.Option(
    None,
    "--slack-channel",
    "-c",
    help="Slack channel to upload to (can be used multiple times, "
    "defaults to SLACK_CHANNEL)",
)

VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Enable debug logging")
