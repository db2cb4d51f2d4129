from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from ..attendance.model import AdminRow, AttendanceDay
from ..core.enums import Role
from ..users.model import AuthSession, User


class CheckinApi(ABC):
    """Strategy Pattern: one request/response surface over either the local
    store (mock mode) or a remote HTTP backend.

    Callers pick an implementation once (see `build_api`) instead of branching
    on the mode at every call site.
    """

    @abstractmethod
    def get_session(self) -> Optional[AuthSession]:
        raise NotImplementedError

    @abstractmethod
    def login(self, email: str, password: str) -> AuthSession:
        raise NotImplementedError

    @abstractmethod
    def demo_login(self, role: Role) -> AuthSession:
        raise NotImplementedError

    @abstractmethod
    def logout(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def scan_qr(self, user_id: str, code: str) -> AttendanceDay:
        raise NotImplementedError

    @abstractmethod
    def get_week(self, user_id: str) -> List[AttendanceDay]:
        raise NotImplementedError

    @abstractmethod
    def get_history(self, user_id: str, month_key: str) -> List[AttendanceDay]:
        raise NotImplementedError

    @abstractmethod
    def get_admin_rows(self, date_key: str) -> List[AdminRow]:
        raise NotImplementedError

    @abstractmethod
    def list_users(self) -> List[User]:
        raise NotImplementedError

    @abstractmethod
    def upsert_user(self, user: User) -> User:
        raise NotImplementedError

    @abstractmethod
    def toggle_user(self, user_id: str) -> Optional[User]:
        raise NotImplementedError
