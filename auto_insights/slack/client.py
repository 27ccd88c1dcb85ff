"""Slack client for delivering iteration reports."""

import logging
from typing import List, Optional

from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError

from .config import SlackConfig

logger = logging.getLogger(__name__)


class SlackClient:
    """Client for uploading report files to Slack channels."""

    def __init__(self, config: Optional[SlackConfig] = None) -> None:
        """Initialize Slack client with configuration."""
        self.config = config or SlackConfig()
        self._bot_client: Optional[WebClient] = None

    @property
    def bot_client(self) -> WebClient:
        """Get or create Slack WebClient instance for the bot token."""
        if self._bot_client is None:
            self.config.validate()
            self._bot_client = WebClient(token=self.config.bot_token)
        return self._bot_client

    def upload_report(
        self,
        title: str,
        filename: str,
        content: str,
        filetype: str = "csv",
    ) -> List[str]:
        """
        Upload a report file to every configured channel.

        Args:
            title: Title shown above the file in Slack
            filename: Name of the uploaded file
            content: File content
            filetype: Slack snippet type of the file

        Returns:
            Ids of the uploaded files, one per channel

        Raises:
            SlackApiError: If any upload fails. Remaining channels are skipped.
        """
        file_ids: List[str] = []
        for channel in self.config.channels:
            try:
                response = self.bot_client.files_upload_v2(
                    channel=channel,
                    title=title,
                    filename=filename,
                    content=content,
                    snippet_type=filetype,
                )
            except SlackApiError as e:
                logger.error(f"Error uploading {filename} to {channel}: {e}")
                raise

            file_info = response.get("file") or {}
            file_ids.append(str(file_info.get("id", "")))
            logger.info(f"Uploaded {filename} to {channel}")

        return file_ids
