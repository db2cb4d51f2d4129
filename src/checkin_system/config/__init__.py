from __future__ import annotations

import importlib
import os
from dataclasses import dataclass
from types import ModuleType
from typing import Optional

from ..core.exceptions import ConfigurationError


def get_settings_module() -> str:
    # APP_ENV picks the settings module; anything unknown means development.
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "checkin_system.config.production"

    if env in {"test", "testing"}:
        return "checkin_system.config.testing"

    return "checkin_system.config.development"


def parse_bool(value: object) -> bool:
    if isinstance(value, bool):
        return value
    return str(value or "").strip().lower() == "true"


@dataclass(frozen=True)
class Settings:
    app_name: str
    use_mock_api: bool
    api_base_url: str
    office_qr_code: str
    storage_path: Optional[str]
    secret_key: str
    debug: bool = False
    testing: bool = False
    log_level: str = "INFO"


def settings_from_module(module: ModuleType) -> Settings:
    """Build and validate Settings from a settings module.

    Raises ConfigurationError when a required value is missing.
    """

    app_name = str(getattr(module, "APP_NAME", "") or "").strip()
    office_qr_code = str(getattr(module, "OFFICE_QR_CODE", "") or "")
    use_mock_api = parse_bool(getattr(module, "USE_MOCK_API", ""))
    api_base_url = str(getattr(module, "API_BASE_URL", "") or "").strip()

    if not app_name:
        raise ConfigurationError("Missing required setting: APP_NAME")
    if not office_qr_code:
        raise ConfigurationError("Missing required setting: OFFICE_QR_CODE")
    if not use_mock_api and not api_base_url:
        raise ConfigurationError("API_BASE_URL is required when USE_MOCK_API is false")

    return Settings(
        app_name=app_name,
        use_mock_api=use_mock_api,
        api_base_url=api_base_url,
        office_qr_code=office_qr_code,
        storage_path=str(getattr(module, "STORAGE_PATH", "") or "") or None,
        secret_key=str(getattr(module, "SECRET_KEY", "") or ""),
        debug=parse_bool(getattr(module, "DEBUG", False)),
        testing=parse_bool(getattr(module, "TESTING", False)),
        log_level=str(getattr(module, "LOG_LEVEL", "INFO") or "INFO").upper(),
    )


def load_settings(module_name: Optional[str] = None) -> Settings:
    module = importlib.import_module(module_name or get_settings_module())
    return settings_from_module(module)
