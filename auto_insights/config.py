"""Run configuration for iteration reports."""

import os

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import ConfigurationError
from .report.filters import WindowPolicy
from .report.rows import RowLayout
from .slack.config import SlackConfig


class InsightsConfig(BaseModel):
    """Everything a report run needs, built once at the process boundary."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    org: str | None = Field(None, description="GitHub organization login")
    project_number: int | None = Field(None, description="Project (board) number")
    github_token: str | None = Field(None, description="Token with read:project")
    window_policy: WindowPolicy = Field(
        WindowPolicy.CLOSED, description="Iteration window matching policy"
    )
    row_layout: RowLayout = Field(RowLayout.REPO, description="Report column layout")
    slack: SlackConfig = Field(default_factory=SlackConfig)

    @classmethod
    def from_env(
        cls,
        org: str | None = None,
        project_number: int | None = None,
        github_token: str | None = None,
        window_policy: WindowPolicy = WindowPolicy.CLOSED,
        row_layout: RowLayout = RowLayout.REPO,
        slack_token: str | None = None,
        slack_channels: list[str] | None = None,
    ) -> "InsightsConfig":
        """Build a config from explicit values with environment fallbacks.

        Environment variables: GITHUB_ORG, GITHUB_PROJECT_NUMBER, GITHUB_TOKEN,
        SLACK_BOT_TOKEN and SLACK_CHANNEL (comma-separated).
        """
        if project_number is None:
            raw_number = os.getenv("GITHUB_PROJECT_NUMBER")
            if raw_number:
                try:
                    project_number = int(raw_number)
                except ValueError:
                    raise ConfigurationError(
                        f"GITHUB_PROJECT_NUMBER must be an integer, got '{raw_number}'"
                    )

        return cls(
            org=org or os.getenv("GITHUB_ORG"),
            project_number=project_number,
            github_token=github_token or os.getenv("GITHUB_TOKEN"),
            window_policy=window_policy,
            row_layout=row_layout,
            slack=SlackConfig(bot_token=slack_token, channels=slack_channels),
        )

    def validate_for_run(self) -> None:
        """Raise ConfigurationError naming every missing board setting."""
        missing = []
        if not self.org:
            missing.append("organization (--org or GITHUB_ORG)")
        if self.project_number is None:
            missing.append("project number (--project-number or GITHUB_PROJECT_NUMBER)")
        if not self.github_token:
            missing.append("GitHub token (--token or GITHUB_TOKEN)")

        if missing:
            raise ConfigurationError(f"Missing configuration: {', '.join(missing)}")
