from __future__ import annotations

from typing import Optional, Protocol

from .model import RawDay


class AttendanceRepository(Protocol):
    """Raw punches keyed by (user_id, date_key). Status is never stored here."""

    def get_day(self, user_id: str, date_key: str) -> Optional[RawDay]:
        raise NotImplementedError

    def save_day(self, user_id: str, day: RawDay) -> None:
        raise NotImplementedError
