from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional, TypeVar
from urllib.parse import quote

import httpx

from ..attendance.model import AdminRow, AttendanceDay
from ..core.constants import DEFAULT_HTTP_TIMEOUT_SECONDS
from ..core.enums import Role
from ..core.exceptions import RequestFailed, ValidationError
from ..users.model import AuthSession, User
from .base import CheckinApi

logger = logging.getLogger(__name__)

T = TypeVar("T")


class HttpCheckinApi(CheckinApi):
    """Remote mode: each operation is one JSON request against the backend.

    Any transport error or non-2xx answer surfaces as `RequestFailed`.
    Nothing is retried here; retrying is the caller's decision.
    """

    def __init__(
        self,
        base_url: str,
        *,
        client: Optional[httpx.Client] = None,
        timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
    ):
        self._base_url = (base_url or "").rstrip("/")
        self._client = client or httpx.Client(timeout=timeout)

    def close(self) -> None:
        self._client.close()

    def _request(self, method: str, path: str, *, json: Any = None, params: Optional[dict] = None) -> Any:
        if not self._base_url:
            raise RequestFailed("API base URL is not configured.")

        try:
            response = self._client.request(
                method,
                f"{self._base_url}{path}",
                json=json,
                params=params,
                headers={"Content-Type": "application/json"},
            )
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise RequestFailed() from e

        if not response.is_success:
            logger.warning("%s %s answered %s", method, path, response.status_code)
            raise RequestFailed()

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            logger.warning("%s %s returned a non-JSON body", method, path)
            raise RequestFailed() from e

    def _decode(self, path: str, data: Any, decode: Callable[[Any], T]) -> T:
        try:
            return decode(data)
        except (KeyError, TypeError, ValueError, ValidationError) as e:
            logger.warning("%s returned a malformed body: %s", path, e)
            raise RequestFailed() from e

    def _decode_list(self, path: str, data: Any, decode: Callable[[Any], T]) -> List[T]:
        return self._decode(path, data, lambda items: [decode(item) for item in items or []])

    def get_session(self) -> Optional[AuthSession]:
        data = self._request("GET", "/auth/session")
        return self._decode("/auth/session", data, AuthSession.from_dict) if data else None

    def login(self, email: str, password: str) -> AuthSession:
        data = self._request("POST", "/auth/login", json={"email": email, "password": password})
        return self._decode("/auth/login", data, AuthSession.from_dict)

    def demo_login(self, role: Role) -> AuthSession:
        data = self._request("POST", "/auth/demo", json={"role": role.value})
        return self._decode("/auth/demo", data, AuthSession.from_dict)

    def logout(self) -> None:
        self._request("POST", "/auth/logout")

    def scan_qr(self, user_id: str, code: str) -> AttendanceDay:
        data = self._request("POST", "/attendance/scan", json={"userId": user_id, "code": code})
        return self._decode("/attendance/scan", data, AttendanceDay.from_dict)

    def get_week(self, user_id: str) -> List[AttendanceDay]:
        data = self._request("GET", "/attendance/week", params={"userId": user_id})
        return self._decode_list("/attendance/week", data, AttendanceDay.from_dict)

    def get_history(self, user_id: str, month_key: str) -> List[AttendanceDay]:
        data = self._request("GET", "/attendance/history", params={"userId": user_id, "month": month_key})
        return self._decode_list("/attendance/history", data, AttendanceDay.from_dict)

    def get_admin_rows(self, date_key: str) -> List[AdminRow]:
        data = self._request("GET", "/admin/attendance", params={"date": date_key})
        return self._decode_list("/admin/attendance", data, AdminRow.from_dict)

    def list_users(self) -> List[User]:
        data = self._request("GET", "/admin/users")
        return self._decode_list("/admin/users", data, User.from_dict)

    def upsert_user(self, user: User) -> User:
        data = self._request("POST", "/admin/users", json=user.to_dict())
        return self._decode("/admin/users", data, User.from_dict)

    def toggle_user(self, user_id: str) -> Optional[User]:
        path = f"/admin/users/{quote(user_id, safe='')}/toggle"
        data = self._request("POST", path)
        return self._decode(path, data, User.from_dict) if data else None
