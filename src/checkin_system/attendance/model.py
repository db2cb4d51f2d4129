from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_iso_timestamp
from ..core.enums import AttendanceStatus


def _clean_timestamp(value: Any) -> Optional[str]:
    if not isinstance(value, str) or not value:
        return None
    try:
        parse_iso_timestamp(value)
    except ValueError:
        return None
    return value


@dataclass(frozen=True)
class RawDay:
    """What is actually persisted for one (user, day): the two punches."""

    date: str
    in_time: Optional[str] = None
    out_time: Optional[str] = None

    def to_dict(self) -> dict:
        return {"date": self.date, "inTime": self.in_time, "outTime": self.out_time}

    @classmethod
    def from_dict(cls, date_key: str, data: Any) -> Optional["RawDay"]:
        """Stored entry -> RawDay. Entries that are not objects read as missing."""
        if not isinstance(data, Mapping):
            return None
        return cls(
            date=date_key,
            in_time=_clean_timestamp(data.get("inTime")),
            out_time=_clean_timestamp(data.get("outTime")),
        )


@dataclass(frozen=True)
class AttendanceDay:
    """Read-model: one calendar day with its derived status."""

    date: str
    in_time: Optional[str]
    out_time: Optional[str]
    status: AttendanceStatus

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "inTime": self.in_time,
            "outTime": self.out_time,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AttendanceDay":
        return cls(
            date=str(data["date"]),
            in_time=data.get("inTime"),
            out_time=data.get("outTime"),
            status=AttendanceStatus(data["status"]),
        )


@dataclass(frozen=True)
class AdminRow:
    """Read-model for the admin daily listing."""

    user_id: str
    full_name: str
    in_time: Optional[str]
    out_time: Optional[str]
    status: AttendanceStatus

    def to_dict(self) -> dict:
        return {
            "userId": self.user_id,
            "fullName": self.full_name,
            "inTime": self.in_time,
            "outTime": self.out_time,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AdminRow":
        return cls(
            user_id=str(data["userId"]),
            full_name=str(data["fullName"]),
            in_time=data.get("inTime"),
            out_time=data.get("outTime"),
            status=AttendanceStatus(data["status"]),
        )
