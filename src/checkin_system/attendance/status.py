"""Attendance status derivation.

Status is a pure function of (date, in_time, out_time, today). It is recomputed
on every read and never persisted, so it cannot drift from the timestamps.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Union

from ..common.datetime_utils import is_working_day, parse_date_key, parse_iso_timestamp, to_local
from ..core.constants import LATE_CUTOFF
from ..core.enums import AttendanceStatus
from .model import AttendanceDay, RawDay

Timestamp = Union[str, datetime, None]


def _as_datetime(value: Timestamp) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    return parse_iso_timestamp(value)


def is_late(in_time: datetime) -> bool:
    """Strictly after the cutoff on the check-in's own local date."""
    local = to_local(in_time)
    cutoff = datetime.combine(local.date(), LATE_CUTOFF)
    return local > cutoff


def derive_status(date_key: str, in_time: Timestamp, out_time: Timestamp, *, today: date) -> AttendanceStatus:
    day = parse_date_key(date_key)
    check_in = _as_datetime(in_time)
    check_out = _as_datetime(out_time)

    if check_in is None and check_out is None:
        if day == today:
            return AttendanceStatus.INCOMPLETE
        if day < today and is_working_day(day):
            return AttendanceStatus.ABSENT
        # weekend or future
        return AttendanceStatus.INCOMPLETE

    if check_in is None or check_out is None:
        return AttendanceStatus.INCOMPLETE

    return AttendanceStatus.LATE if is_late(check_in) else AttendanceStatus.OK


def normalize_day(date_key: str, raw: Optional[RawDay], *, today: date) -> AttendanceDay:
    in_time = raw.in_time if raw else None
    out_time = raw.out_time if raw else None
    return AttendanceDay(
        date=date_key,
        in_time=in_time,
        out_time=out_time,
        status=derive_status(date_key, in_time, out_time, today=today),
    )
