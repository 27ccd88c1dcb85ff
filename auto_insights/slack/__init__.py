"""Slack integration module for delivering iteration reports."""

from .client import SlackClient
from .config import SlackConfig

__all__ = ["SlackClient", "SlackConfig"]
