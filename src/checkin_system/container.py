from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from .api.base import CheckinApi
from .api.http_api import HttpCheckinApi
from .api.local_api import LocalCheckinApi
from .attendance.kv_attendance_repository import KeyValueAttendanceRepository
from .attendance.service import AttendanceService
from .common.datetime_utils import now_local
from .config import Settings
from .storage.base import KeyValueStorage
from .storage.file_storage import JsonFileStorage
from .storage.memory import InMemoryStorage
from .users.kv_session_repository import KeyValueSessionRepository
from .users.kv_user_repository import KeyValueUserRepository
from .users.service import AuthService, UserService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    settings: Settings
    storage: KeyValueStorage

    users_repo: KeyValueUserRepository
    sessions_repo: KeyValueSessionRepository
    attendance_repo: KeyValueAttendanceRepository

    auth_service: AuthService
    user_service: UserService
    attendance_service: AttendanceService

    api: CheckinApi
    clock: Callable[[], datetime]


def build_storage(settings: Settings) -> KeyValueStorage:
    if settings.storage_path:
        logger.info("Using JSON file storage at %s", settings.storage_path)
        return JsonFileStorage(settings.storage_path)
    logger.info("No STORAGE_PATH configured, keeping data in memory")
    return InMemoryStorage()


def build_api(settings: Settings, *, auth: AuthService, users: UserService, attendance: AttendanceService) -> CheckinApi:
    if settings.use_mock_api:
        return LocalCheckinApi(auth, users, attendance)
    return HttpCheckinApi(settings.api_base_url)


def build_container(
    settings: Settings,
    *,
    storage: Optional[KeyValueStorage] = None,
    clock: Callable[[], datetime] = now_local,
) -> Container:
    storage = storage if storage is not None else build_storage(settings)

    users_repo = KeyValueUserRepository(storage)
    sessions_repo = KeyValueSessionRepository(storage)
    attendance_repo = KeyValueAttendanceRepository(storage)

    auth_service = AuthService(users_repo, sessions_repo)
    user_service = UserService(users_repo)
    attendance_service = AttendanceService(
        attendance_repo,
        users_repo,
        office_code=settings.office_qr_code,
        clock=clock,
    )

    api = build_api(settings, auth=auth_service, users=user_service, attendance=attendance_service)

    return Container(
        settings=settings,
        storage=storage,
        users_repo=users_repo,
        sessions_repo=sessions_repo,
        attendance_repo=attendance_repo,
        auth_service=auth_service,
        user_service=user_service,
        attendance_service=attendance_service,
        api=api,
        clock=clock,
    )
