from __future__ import annotations

from typing import List, Optional

from ..attendance.model import AdminRow, AttendanceDay
from ..attendance.service import AttendanceService
from ..core.enums import Role
from ..users.model import AuthSession, User
from ..users.service import AuthService, UserService
from .base import CheckinApi


class LocalCheckinApi(CheckinApi):
    """Mock mode: every operation runs against the local key-value store."""

    def __init__(self, auth: AuthService, users: UserService, attendance: AttendanceService):
        self._auth = auth
        self._users = users
        self._attendance = attendance

    def get_session(self) -> Optional[AuthSession]:
        return self._auth.get_session()

    def login(self, email: str, password: str) -> AuthSession:
        return self._auth.login(email, password)

    def demo_login(self, role: Role) -> AuthSession:
        return self._auth.demo_login(role)

    def logout(self) -> None:
        self._auth.logout()

    def scan_qr(self, user_id: str, code: str) -> AttendanceDay:
        return self._attendance.record_scan(user_id, code)

    def get_week(self, user_id: str) -> List[AttendanceDay]:
        return self._attendance.get_week(user_id)

    def get_history(self, user_id: str, month_key: str) -> List[AttendanceDay]:
        return self._attendance.get_history(user_id, month_key)

    def get_admin_rows(self, date_key: str) -> List[AdminRow]:
        return self._attendance.get_admin_rows(date_key)

    def list_users(self) -> List[User]:
        return list(self._users.list_users())

    def upsert_user(self, user: User) -> User:
        return self._users.upsert_user(user)

    def toggle_user(self, user_id: str) -> Optional[User]:
        return self._users.toggle_user(user_id)
