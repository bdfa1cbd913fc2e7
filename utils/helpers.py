"""Helper utility functions."""

from datetime import date, datetime, time, timedelta, timezone
from typing import Any, Dict, Optional, Tuple


def format_error_response(status: int, message: str, **extra: Any) -> Dict[str, Any]:
    """Error body shared by every failing endpoint."""
    return {
        "success": False,
        "status": status,
        "message": message,
        "error": message,
        **extra,
    }


def ordinal_suffix(day: int) -> str:
    """Return the English ordinal suffix for a day of the month."""
    if day % 10 == 1 and day % 100 != 11:
        return "st"
    if day % 10 == 2 and day % 100 != 12:
        return "nd"
    if day % 10 == 3 and day % 100 != 13:
        return "rd"
    return "th"


def ordinal(number: int) -> str:
    return f"{number}{ordinal_suffix(number)}"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def day_bounds(day: date) -> Tuple[datetime, datetime]:
    """Start (inclusive) and end (exclusive) of a UTC calendar day."""
    start = datetime.combine(day, time.min, tzinfo=timezone.utc)
    return start, start + timedelta(days=1)


def parse_date_param(value: Optional[str]) -> Optional[date]:
    """Parse a ``YYYY-MM-DD`` or ISO-8601 datetime query value.

    Returns None for a missing value and raises ValueError for a malformed one.
    """
    if value is None or not value.strip():
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return date.fromisoformat(text)
    except ValueError:
        parsed = datetime.fromisoformat(text)
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone(timezone.utc)
        return parsed.date()
