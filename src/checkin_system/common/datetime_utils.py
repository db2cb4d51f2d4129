from __future__ import annotations

from calendar import monthrange
from datetime import date, datetime, timedelta
from typing import List, Optional

from ..core.constants import DAYS_IN_WEEK, WORKING_WEEKDAYS
from ..core.exceptions import ValidationError


def to_date_key(value: date) -> str:
    """Format a date (or datetime) as YYYY-MM-DD."""
    return value.strftime("%Y-%m-%d")


def parse_date_key(value: str) -> date:
    """Parse YYYY-MM-DD string into date. Only the zero-padded form is accepted."""
    try:
        parsed = datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date: {value!r} (expected YYYY-MM-DD)")
    if parsed.isoformat() != value:
        raise ValidationError(f"Invalid date: {value!r} (expected YYYY-MM-DD)")
    return parsed


def parse_month_key(value: str) -> tuple[int, int]:
    """Parse YYYY-MM string into (year, month)."""
    try:
        parsed = datetime.strptime(value, "%Y-%m")
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid month: {value!r} (expected YYYY-MM)")
    if f"{parsed.year:04d}-{parsed.month:02d}" != value:
        raise ValidationError(f"Invalid month: {value!r} (expected YYYY-MM)")
    return parsed.year, parsed.month


def is_working_day(value: date) -> bool:
    return value.weekday() in WORKING_WEEKDAYS


def week_dates(today: date) -> List[date]:
    """Monday through Sunday of the week containing `today`."""
    monday = today - timedelta(days=today.weekday())
    return [monday + timedelta(days=i) for i in range(DAYS_IN_WEEK)]


def month_dates(year: int, month: int) -> List[date]:
    _, last_day = monthrange(year, month)
    return [date(year, month, day) for day in range(1, last_day + 1)]


def to_iso_timestamp(value: datetime) -> str:
    return value.isoformat(timespec="milliseconds")


def parse_iso_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp, accepting a trailing 'Z'."""
    if not value:
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def to_local(value: datetime) -> datetime:
    """Aware datetimes are converted to local time; naive ones are already local."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
