"""Main CLI entry point."""

import typer
from dotenv import load_dotenv
from rich.console import Console

from .report import report

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="auto-insights",
    help="Iteration status reports from GitHub Projects boards",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


app.command(name="report", context_settings={"help_option_names": ["-h", "--help"]})(
    report
)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from auto_insights import __version__

    console.print(f"Auto Insights v{__version__}")


if __name__ == "__main__":
    app()
