from __future__ import annotations

import logging
from typing import Optional

from ..core.constants import STORAGE_KEY_AUTH
from ..core.exceptions import ValidationError
from ..storage.base import KeyValueStorage, read_json, write_json
from .model import AuthSession
from .repository import SessionRepository

logger = logging.getLogger(__name__)


class KeyValueSessionRepository(SessionRepository):
    def __init__(self, storage: KeyValueStorage):
        self._storage = storage

    def load(self) -> Optional[AuthSession]:
        raw = read_json(self._storage, STORAGE_KEY_AUTH, None, expected=dict)
        if raw is None:
            return None
        try:
            return AuthSession.from_dict(raw)
        except ValidationError as e:
            logger.warning("Ignoring malformed stored session: %s", e)
            return None

    def save(self, session: AuthSession) -> None:
        write_json(self._storage, STORAGE_KEY_AUTH, session.to_dict())

    def clear(self) -> None:
        self._storage.remove(STORAGE_KEY_AUTH)
