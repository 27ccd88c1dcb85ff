"""Configuration for Slack report delivery."""

import os
from typing import List, Optional

from ..exceptions import ConfigurationError


def _split_channels(value: Optional[str]) -> List[str]:
    if not value:
        return []
    return [channel.strip() for channel in value.split(",") if channel.strip()]


class SlackConfig:
    """Configuration class for Slack API integration."""

    def __init__(
        self,
        bot_token: Optional[str] = None,
        channels: Optional[List[str]] = None,
    ) -> None:
        """Initialize Slack configuration, falling back to environment variables.

        Args:
            bot_token: Bot token with ``files:write``. Defaults to SLACK_BOT_TOKEN.
            channels: Channel ids or names. Defaults to the comma-separated
                SLACK_CHANNEL variable.
        """
        self.bot_token: Optional[str] = bot_token or os.getenv("SLACK_BOT_TOKEN")
        self.channels: List[str] = list(channels or []) or _split_channels(
            os.getenv("SLACK_CHANNEL")
        )

    def validate(self) -> None:
        """Validate configuration and raise error if invalid."""
        missing = []
        if not self.bot_token:
            missing.append("SLACK_BOT_TOKEN")
        if not self.channels:
            missing.append("SLACK_CHANNEL")

        if missing:
            raise ConfigurationError(
                f"Environment variables required for Slack delivery: {', '.join(missing)}"
            )
