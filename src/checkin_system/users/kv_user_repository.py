from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from ..core.constants import DEMO_USERS, STORAGE_KEY_USERS
from ..core.exceptions import ValidationError
from ..storage.base import KeyValueStorage, read_json, write_json
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)


class KeyValueUserRepository(UserRepository):
    """User list persisted as one JSON array.

    An empty (or unreadable) list is reseeded with the demo users.
    """

    def __init__(self, storage: KeyValueStorage, *, seed: Sequence[dict] = DEMO_USERS):
        self._storage = storage
        self._seed = [dict(item) for item in seed]

    def _load(self) -> List[User]:
        raw = read_json(self._storage, STORAGE_KEY_USERS, [], expected=list)
        if not raw and self._seed:
            logger.info("User store is empty, seeding %d demo users", len(self._seed))
            write_json(self._storage, STORAGE_KEY_USERS, self._seed)
            raw = self._seed

        users: List[User] = []
        for item in raw:
            try:
                users.append(User.from_dict(item))
            except ValidationError as e:
                logger.warning("Skipping malformed stored user %r: %s", item, e)
        return users

    def _save(self, users: Sequence[User]) -> None:
        write_json(self._storage, STORAGE_KEY_USERS, [u.to_dict() for u in users])

    def list_all(self) -> Sequence[User]:
        return self._load()

    def get_by_id(self, user_id: str) -> Optional[User]:
        for user in self._load():
            if user.id == user_id:
                return user
        return None

    def upsert(self, user: User) -> None:
        users = self._load()
        for index, existing in enumerate(users):
            if existing.id == user.id:
                users[index] = user
                break
        else:
            users.append(user)
        self._save(users)

    def toggle_active(self, user_id: str) -> Optional[User]:
        users = self._load()
        for index, existing in enumerate(users):
            if existing.id == user_id:
                users[index] = existing.toggled()
                self._save(users)
                return users[index]
        return None
