"""Date parsing and report window utilities."""

from collections.abc import Iterable, Iterator
from datetime import date, datetime, timedelta, timezone

from ..github_client.models import ActivityEvent


def ensure_utc(dt: datetime) -> datetime:
    """Treat naive datetimes as UTC so they compare with API timestamps."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def parse_date_input(date_str: str) -> datetime:
    """Parse various date formats into UTC datetime objects.

    Supports:
    - Month-day-year: 1-15-2024, 01/15/2024
    - ISO dates: 2024-01-15, 2024-01-15T10:00:00Z
    - Common formats: January 15, 2024, Jan 15 2024

    Args:
        date_str: Date string to parse

    Returns:
        Parsed datetime object in UTC

    Raises:
        ValueError: If date format is not recognized
    """
    formats = [
        "%m-%d-%Y",  # 1-15-2024
        "%Y-%m-%d",  # 2024-01-15
        "%Y-%m-%dT%H:%M:%SZ",  # 2024-01-15T10:00:00Z
        "%Y-%m-%dT%H:%M:%S",  # 2024-01-15T10:00:00
        "%B %d, %Y",  # January 15, 2024
        "%b %d, %Y",  # Jan 15, 2024
        "%B %d %Y",  # January 15 2024
        "%b %d %Y",  # Jan 15 2024
        "%Y/%m/%d",  # 2024/01/15
        "%m/%d/%Y",  # 01/15/2024
    ]

    for fmt in formats:
        try:
            return ensure_utc(datetime.strptime(date_str, fmt))
        except ValueError:
            continue

    raise ValueError(
        f"Unable to parse date '{date_str}'. "
        f"Supported formats include: M-D-YYYY, YYYY-MM-DD, YYYY-MM-DDTHH:MM:SSZ, "
        f"'January 1, 2024', 'Jan 1 2024', MM/DD/YYYY"
    )


def last_completed_week_monday(today: date | None = None) -> datetime:
    """Return midnight UTC on the Monday that started the last full week.

    On a Monday that is seven days back; on a Sunday it is thirteen.

    Args:
        today: Reference day, defaults to the current UTC date
    """
    if today is None:
        today = datetime.now(timezone.utc).date()
    monday = today - timedelta(days=today.weekday() + 7)
    return datetime(monday.year, monday.month, monday.day, tzinfo=timezone.utc)


def filter_events_for_window(
    events: Iterable[ActivityEvent], start: datetime, end: datetime
) -> Iterator[ActivityEvent]:
    """Yield events created strictly between ``start`` and ``end``.

    Order is preserved.
    """
    start = ensure_utc(start)
    end = ensure_utc(end)
    for event in events:
        created_at = ensure_utc(event.created_at)
        if start < created_at < end:
            yield event


def format_date(dt: datetime) -> str:
    """Format a datetime the way report windows are shown to the user."""
    return f"{dt.month}-{dt.day}-{dt.year}"
