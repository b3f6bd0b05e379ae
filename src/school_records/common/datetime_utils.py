from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def today_local() -> date:
    """Current local calendar day.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today()


def to_calendar_date(value: Any) -> Optional[date]:
    """Reduce whatever the store sent to a local calendar day.

    Accepts ``date``, ``datetime`` (aware values are converted to local time
    first), ``YYYY-MM-DD`` strings and ISO-8601 timestamps. Anything else
    yields ``None``.
    """

    if value is None:
        return None
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None
    if len(text) == 10:
        try:
            return parse_iso_date(text)
        except ValueError:
            return None

    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    return to_calendar_date(parsed)


def format_api_date(value: Any) -> Optional[str]:
    """Format a date-ish value as ``YYYY-MM-DD`` for the store."""
    day = to_calendar_date(value)
    return day.isoformat() if day else None
