from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for access and demo login."""

    EMPLOYEE = "employee"
    ADMIN = "admin"


class AttendanceStatus(str, Enum):
    """Derived status of one attendance day. Never stored as authoritative."""

    OK = "OK"
    LATE = "LATE"
    ABSENT = "ABSENT"
    INCOMPLETE = "INCOMPLETE"
