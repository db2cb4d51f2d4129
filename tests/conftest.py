from __future__ import annotations

from datetime import datetime

import pytest

from checkin_system.config import Settings
from checkin_system.container import build_container
from checkin_system.storage.memory import InMemoryStorage

OFFICE_CODE = "TEST-OFFICE-CODE"


@pytest.fixture
def fixed_now() -> datetime:
    # Wednesday
    return datetime(2026, 2, 4, 8, 30, 0)


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        app_name="Office Check-in (test)",
        use_mock_api=True,
        api_base_url="",
        office_qr_code=OFFICE_CODE,
        storage_path=None,
        secret_key="test-secret",
        testing=True,
        log_level="WARNING",
    )


class Clock:
    """Settable clock handed to services instead of datetime.now."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def clock(fixed_now) -> Clock:
    return Clock(fixed_now)


@pytest.fixture
def container(settings, storage, clock):
    return build_container(settings, storage=storage, clock=clock)
