"""Custom exceptions for auto-insights."""


class InsightsError(Exception):
    """Base exception for auto-insights errors."""


class ConfigurationError(InsightsError, ValueError):
    """Required configuration is missing or invalid."""


class BoardError(InsightsError):
    """A GitHub Projects board request failed."""


class ProjectNotFoundError(BoardError):
    """Organization or project number does not exist."""


class MissingStatusError(InsightsError):
    """A board item has no Status field value."""
