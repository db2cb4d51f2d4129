from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AuthSession, User


class UserRepository(Protocol):
    """Repository interface for User.

    Note (DIP): the service layer depends on this interface, not on a concrete store.
    Users are never hard-deleted; deactivation goes through `toggle_active`.
    """

    def list_all(self) -> Sequence[User]:
        raise NotImplementedError

    def get_by_id(self, user_id: str) -> Optional[User]:
        raise NotImplementedError

    def upsert(self, user: User) -> None:
        raise NotImplementedError

    def toggle_active(self, user_id: str) -> Optional[User]:
        raise NotImplementedError


class SessionRepository(Protocol):
    def load(self) -> Optional[AuthSession]:
        raise NotImplementedError

    def save(self, session: AuthSession) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError
