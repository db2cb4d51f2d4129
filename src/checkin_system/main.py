from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional

from dotenv import load_dotenv
from flask import Flask

from .attendance.controller import register as register_attendance
from .common.datetime_utils import now_local
from .config import Settings, get_settings_module, load_settings
from .container import build_container
from .storage.base import KeyValueStorage
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    *,
    storage: Optional[KeyValueStorage] = None,
    clock: Callable[[], datetime] = now_local,
) -> Flask:
    load_dotenv(override=False)

    if settings is None:
        settings_module = get_settings_module()
        settings = load_settings(settings_module)
        logger.debug("Loaded settings from %s", settings_module)

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app = Flask(__name__)
    app.secret_key = settings.secret_key
    app.config["DEBUG"] = settings.debug
    app.config["TESTING"] = settings.testing
    app.config["APP_NAME"] = settings.app_name

    container = build_container(settings, storage=storage, clock=clock)

    logger.info(
        "%s starting (mode=%s%s)",
        settings.app_name,
        "mock" if settings.use_mock_api else "remote",
        "" if settings.use_mock_api else f", api={settings.api_base_url}",
    )

    register_users(app, container)
    register_attendance(app, container)

    return app
