from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable, List

from ..common.datetime_utils import (
    month_dates,
    now_local,
    parse_date_key,
    parse_month_key,
    to_date_key,
    to_iso_timestamp,
    week_dates,
)
from ..core.exceptions import AlreadyCompleted, InvalidCode, MissingCode
from ..users.repository import UserRepository
from .model import AdminRow, AttendanceDay, RawDay
from .repository import AttendanceRepository
from .status import normalize_day

logger = logging.getLogger(__name__)


class AttendanceService:
    """Two-punch (in/out) attendance per user per calendar day.

    Every day returned here has its status freshly derived against `now`.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        users: UserRepository,
        *,
        office_code: str,
        clock: Callable[[], datetime] = now_local,
    ):
        self._attendance = attendance
        self._users = users
        self._office_code = office_code
        self._clock = clock

    def get_day(self, user_id: str, date_key: str, *, now: datetime | None = None) -> AttendanceDay:
        now = now or self._clock()
        parse_date_key(date_key)
        raw = self._attendance.get_day(user_id, date_key)
        return normalize_day(date_key, raw, today=now.date())

    def record_scan(self, user_id: str, code: str, *, now: datetime | None = None) -> AttendanceDay:
        if not code:
            raise MissingCode()
        if code != self._office_code:
            logger.info("Rejected scan with wrong office code for user %s", user_id)
            raise InvalidCode()

        now = now or self._clock()
        date_key = to_date_key(now)
        current = self._attendance.get_day(user_id, date_key) or RawDay(date=date_key)

        if current.in_time is None:
            updated = replace(current, in_time=to_iso_timestamp(now))
            action = "in"
        elif current.out_time is None:
            updated = replace(current, out_time=to_iso_timestamp(now))
            action = "out"
        else:
            raise AlreadyCompleted()

        self._attendance.save_day(user_id, updated)
        logger.info("User %s checked %s at %s", user_id, action, now.isoformat(timespec="seconds"))
        return normalize_day(date_key, updated, today=now.date())

    def get_week(self, user_id: str, *, now: datetime | None = None) -> List[AttendanceDay]:
        """Monday through Sunday of the current week."""

        now = now or self._clock()
        return [self.get_day(user_id, to_date_key(d), now=now) for d in week_dates(now.date())]

    def get_history(self, user_id: str, month_key: str, *, now: datetime | None = None) -> List[AttendanceDay]:
        """One entry per calendar day of a YYYY-MM month."""

        now = now or self._clock()
        year, month = parse_month_key(month_key)
        return [self.get_day(user_id, to_date_key(d), now=now) for d in month_dates(year, month)]

    def get_admin_rows(self, date_key: str, *, now: datetime | None = None) -> List[AdminRow]:
        now = now or self._clock()
        rows: List[AdminRow] = []
        for user in self._users.list_all():
            if not user.active:
                continue
            day = self.get_day(user.id, date_key, now=now)
            rows.append(
                AdminRow(
                    user_id=user.id,
                    full_name=user.full_name,
                    in_time=day.in_time,
                    out_time=day.out_time,
                    status=day.status,
                )
            )
        return rows
