"""Date parsing utilities for report reference times."""

from datetime import datetime, timezone


def parse_date_input(date_str: str) -> datetime:
    """Parse a date or datetime string into a UTC datetime.

    Supports:
    - ISO dates: 2024-01-01, 2024-01-01T10:00:00Z
    - Common formats: January 1, 2024, Jan 1 2024, 2024/01/01

    Values without a timezone are taken as UTC.

    Args:
        date_str: Date string to parse

    Returns:
        Timezone-aware datetime in UTC

    Raises:
        ValueError: If date format is not recognized
    """
    formats = [
        "%Y-%m-%d",  # 2024-01-01
        "%Y-%m-%dT%H:%M:%SZ",  # 2024-01-01T10:00:00Z
        "%Y-%m-%dT%H:%M:%S",  # 2024-01-01T10:00:00
        "%B %d, %Y",  # January 1, 2024
        "%b %d, %Y",  # Jan 1, 2024
        "%B %d %Y",  # January 1 2024
        "%b %d %Y",  # Jan 1 2024
        "%Y/%m/%d",  # 2024/01/01
    ]

    for fmt in formats:
        try:
            parsed = datetime.strptime(date_str, fmt)
        except ValueError:
            continue
        return parsed.replace(tzinfo=timezone.utc)

    raise ValueError(
        f"Unable to parse date '{date_str}'. "
        f"Supported formats include: YYYY-MM-DD, YYYY-MM-DDTHH:MM:SSZ, "
        f"'January 1, 2024', 'Jan 1 2024', YYYY/MM/DD"
    )


def utc_now() -> datetime:
    """Return the current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)
