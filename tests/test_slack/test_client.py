"""Tests for Slack report delivery."""

import os
from unittest.mock import Mock, patch

import pytest
from slack_sdk.errors import SlackApiError

from auto_insights.exceptions import ConfigurationError
from auto_insights.slack.client import SlackClient
from auto_insights.slack.config import SlackConfig


class TestSlackConfig:
    """Test SlackConfig."""

    @patch.dict(
        os.environ, {"SLACK_BOT_TOKEN": "xoxb-env", "SLACK_CHANNEL": "C1,,C2 "}, clear=True
    )
    def test_env_fallback(self) -> None:
        """Test channels are read from a comma-separated variable."""
        config = SlackConfig()

        assert config.bot_token == "xoxb-env"
        assert config.channels == ["C1", "C2"]

    @patch.dict(os.environ, {}, clear=True)
    def test_validate_missing(self) -> None:
        """Test validation names missing variables."""
        config = SlackConfig()

        with pytest.raises(ConfigurationError, match="SLACK_BOT_TOKEN, SLACK_CHANNEL"):
            config.validate()

    @patch.dict(os.environ, {"SLACK_CHANNEL": "C1"}, clear=True)
    def test_validate_missing_token_only(self) -> None:
        """Test a configured channel is not reported as missing."""
        config = SlackConfig()

        with pytest.raises(ConfigurationError) as exc_info:
            config.validate()
        assert str(exc_info.value).endswith(": SLACK_BOT_TOKEN")


class TestSlackClient:
    """Test SlackClient.upload_report."""

    @patch("auto_insights.slack.client.WebClient")
    def test_uploads_to_every_channel(self, mock_web_client_class: Mock) -> None:
        """Test one upload per configured channel."""
        mock_web_client = Mock()
        mock_web_client.files_upload_v2.side_effect = [
            {"ok": True, "file": {"id": "F1"}},
            {"ok": True, "file": {"id": "F2"}},
        ]
        mock_web_client_class.return_value = mock_web_client

        client = SlackClient(SlackConfig(bot_token="xoxb-test", channels=["C1", "C2"]))
        file_ids = client.upload_report(
            title="auto-insights-2024-01-10",
            filename="auto-insights-2024-01-10.csv",
            content='"number"\n"1"',
        )

        assert file_ids == ["F1", "F2"]
        mock_web_client_class.assert_called_once_with(token="xoxb-test")
        first_call = mock_web_client.files_upload_v2.call_args_list[0]
        assert first_call.kwargs == {
            "channel": "C1",
            "title": "auto-insights-2024-01-10",
            "filename": "auto-insights-2024-01-10.csv",
            "content": '"number"\n"1"',
            "snippet_type": "csv",
        }

    @patch("auto_insights.slack.client.WebClient")
    def test_upload_failure_propagates(self, mock_web_client_class: Mock) -> None:
        """Test Slack errors are raised, not swallowed."""
        mock_web_client = Mock()
        mock_web_client.files_upload_v2.side_effect = SlackApiError(
            "channel_not_found", {"ok": False, "error": "channel_not_found"}
        )
        mock_web_client_class.return_value = mock_web_client

        client = SlackClient(SlackConfig(bot_token="xoxb-test", channels=["C1", "C2"]))

        with pytest.raises(SlackApiError):
            client.upload_report(title="t", filename="f.csv", content="x")
        assert mock_web_client.files_upload_v2.call_count == 1

    @patch.dict(os.environ, {}, clear=True)
    def test_requires_configuration(self) -> None:
        """Test uploading without a token fails validation."""
        client = SlackClient(SlackConfig(channels=["C1"]))

        with pytest.raises(ConfigurationError, match="SLACK_BOT_TOKEN"):
            client.upload_report(title="t", filename="f.csv", content="x")
