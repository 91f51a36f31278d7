from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Optional, Union

from ..core.constants import MONTHS


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def to_day(value: Union[date, datetime, None]) -> Optional[date]:
    """Calendar day of a backend timestamp.

    Aware timestamps are converted to UTC first, matching how the backend
    stores attendance dates (midnight UTC of the marked day).
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    return value


def iso_day(value: Union[date, datetime, None]) -> Optional[str]:
    day = to_day(value)
    return day.strftime("%Y-%m-%d") if day else None


def month_name(value: date) -> str:
    return MONTHS[value.month - 1]
