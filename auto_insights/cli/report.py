"""CLI command for building iteration reports."""

import logging
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from slack_sdk.errors import SlackApiError

from ..config import InsightsConfig
from ..exceptions import ConfigurationError, InsightsError
from ..github_client.client import GitHubClient
from ..report.filters import WindowPolicy
from ..report.pipeline import InsightsReport, run_report
from ..report.rows import RowLayout
from ..slack.client import SlackClient
from ..utils.date_parser import parse_date_input, utc_now
from .options import (
    AS_OF_OPTION,
    LAYOUT_OPTION,
    ORG_OPTION,
    OUTPUT_OPTION,
    PROJECT_NUMBER_OPTION,
    SLACK_CHANNEL_OPTION,
    SLACK_OPTION,
    TOKEN_OPTION,
    VERBOSE_OPTION,
    WINDOW_OPTION,
)

# stdout carries the CSV, everything else goes to stderr
console = Console(stderr=True)
logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def report(
    org: str | None = ORG_OPTION,
    project_number: int | None = PROJECT_NUMBER_OPTION,
    token: str | None = TOKEN_OPTION,
    window: WindowPolicy = WINDOW_OPTION,
    layout: RowLayout = LAYOUT_OPTION,
    as_of: str | None = AS_OF_OPTION,
    output: str | None = OUTPUT_OPTION,
    slack: bool = SLACK_OPTION,
    slack_channel: list[str] | None = SLACK_CHANNEL_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Report the open items of the current iteration as CSV.

    Items are skipped when their Status ends with "done", when they have no
    iteration or their iteration is not current, when they are draft issues,
    and when they are pull requests already linked from an issue.

    Examples:
        auto-insights report --org EQWorks --project-number 16

        auto-insights report -o EQWorks -n 16 --window open --layout track

        auto-insights report -o EQWorks -n 16 --slack --slack-channel C0123456
    """
    _setup_logging(verbose)

    try:
        now = parse_date_input(as_of) if as_of else utc_now()
        config = InsightsConfig.from_env(
            org=org,
            project_number=project_number,
            github_token=token,
            window_policy=window,
            row_layout=layout,
            slack_channels=slack_channel,
        )
        config.validate_for_run()
        if slack:
            config.slack.validate()
    except (ConfigurationError, ValueError) as e:
        console.print(f"❌ Error: {e}")
        raise typer.Exit(1)

    params_table = Table(title="Report Parameters")
    params_table.add_column("Parameter", style="cyan")
    params_table.add_column("Value", style="green")
    params_table.add_row("Organization", str(config.org))
    params_table.add_row("Project", str(config.project_number))
    params_table.add_row("As of", now.isoformat())
    params_table.add_row("Window", config.window_policy.value)
    params_table.add_row("Layout", config.row_layout.value)
    if slack:
        params_table.add_row("Slack", ", ".join(config.slack.channels))
    console.print(params_table)

    try:
        console.print("🔎 Fetching board items...")
        client = GitHubClient(token=config.github_token)
        result = run_report(client, config, now)
    except ValidationError as e:
        logger.debug("Board response did not match the expected schema", exc_info=True)
        console.print(f"❌ Unexpected board response from GitHub: {e}")
        raise typer.Exit(1)
    except InsightsError as e:
        logger.debug("Report run failed", exc_info=True)
        console.print(f"❌ Error: {e}")
        raise typer.Exit(1)
    except Exception as e:
        logger.debug("Report run failed", exc_info=True)
        console.print(f"❌ Unexpected error: {e}")
        console.print("Please check your GitHub token and network connection.")
        raise typer.Exit(1)

    console.print(
        f"✅ {len(result.rows)} of {result.total_items} board items are reportable"
    )
    _write_output(result, output)

    if slack:
        _deliver_to_slack(result, config)


def _write_output(result: InsightsReport, output: str | None) -> None:
    if output:
        output_path = Path(output)
        with output_path.open("w", encoding="utf-8") as f:
            f.write(result.csv)
        console.print(f"💾 Saved report to {output_path}")
    elif not result.is_empty:
        typer.echo(result.csv)


def _deliver_to_slack(result: InsightsReport, config: InsightsConfig) -> None:
    if result.is_empty:
        console.print("⚠️  No reportable items, skipping Slack upload")
        return

    title = result.filename.removesuffix(".csv")
    try:
        SlackClient(config.slack).upload_report(
            title=title,
            filename=result.filename,
            content=result.csv,
            filetype="csv",
        )
    except SlackApiError as e:
        console.print(f"❌ Slack upload failed: {e}")
        raise typer.Exit(1)

    console.print(f"📨 Uploaded {result.filename} to Slack")
