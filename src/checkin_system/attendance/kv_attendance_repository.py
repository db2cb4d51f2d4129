from __future__ import annotations

from typing import Dict, Optional

from ..core.constants import STORAGE_KEY_ATTENDANCE
from ..storage.base import KeyValueStorage, read_json, write_json
from .model import RawDay
from .repository import AttendanceRepository


class KeyValueAttendanceRepository(AttendanceRepository):
    """Stores every user's days as one JSON object: {user_id: {date_key: day}}.

    Writes are read-modify-write of the whole object, which is only safe with a
    single writer.
    """

    def __init__(self, storage: KeyValueStorage):
        self._storage = storage

    def _load(self) -> Dict[str, dict]:
        return read_json(self._storage, STORAGE_KEY_ATTENDANCE, {}, expected=dict)

    def get_day(self, user_id: str, date_key: str) -> Optional[RawDay]:
        user_days = self._load().get(user_id)
        if not isinstance(user_days, dict):
            return None
        return RawDay.from_dict(date_key, user_days.get(date_key))

    def save_day(self, user_id: str, day: RawDay) -> None:
        store = self._load()
        user_days = store.get(user_id)
        if not isinstance(user_days, dict):
            user_days = {}
        user_days[day.date] = day.to_dict()
        store[user_id] = user_days
        write_json(self._storage, STORAGE_KEY_ATTENDANCE, store)
