from __future__ import annotations

import logging
import secrets
from typing import Callable, Optional, Sequence

from ..common.validators import require_bool, require_non_empty
from ..core.constants import SESSION_TOKEN_PREFIX
from ..core.enums import Role
from ..core.exceptions import DemoUnavailable, InvalidCredentials, MissingCredentials, ValidationError
from .model import AuthSession, User
from .repository import SessionRepository, UserRepository

logger = logging.getLogger(__name__)


def new_session_token() -> str:
    return f"{SESSION_TOKEN_PREFIX}{secrets.token_hex(4)}"


class AuthService:
    """Use case: authenticate a user and keep the current session.

    Note: passwords are not verified; any non-empty password is accepted for an
    active user whose email matches.
    """

    def __init__(
        self,
        users: UserRepository,
        sessions: SessionRepository,
        *,
        token_factory: Callable[[], str] = new_session_token,
    ):
        self._users = users
        self._sessions = sessions
        self._token_factory = token_factory

    def _start_session(self, user: User) -> AuthSession:
        session = AuthSession(token=self._token_factory(), user=user)
        self._sessions.save(session)
        return session

    def login(self, email: str, password: str) -> AuthSession:
        if not email or not password:
            raise MissingCredentials()

        wanted = email.lower()
        user = next((u for u in self._users.list_all() if u.active and u.email.lower() == wanted), None)
        if not user:
            logger.info("Rejected login for %s", email)
            raise InvalidCredentials()

        logger.info("User %s logged in", user.id)
        return self._start_session(user)

    def demo_login(self, role: Role) -> AuthSession:
        user = next((u for u in self._users.list_all() if u.active and u.role == role), None)
        if not user:
            raise DemoUnavailable()

        logger.info("Demo login as %s (%s)", user.id, role.value)
        return self._start_session(user)

    def logout(self) -> None:
        self._sessions.clear()

    def get_session(self) -> Optional[AuthSession]:
        return self._sessions.load()


class UserService:
    """Use case: manage users (admin)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def list_users(self) -> Sequence[User]:
        return list(self._users.list_all())

    def _ensure_email_free(self, user: User) -> None:
        # email is the login key, so at most one active user may hold it
        email = user.email.lower()
        for other in self._users.list_all():
            if other.id != user.id and other.active and other.email.lower() == email:
                raise ValidationError("Email is already used by another active user")

    def upsert_user(self, user: User) -> User:
        """Insert, or replace the whole record with the same id."""

        require_non_empty(user.id, "id")
        require_non_empty(user.full_name, "fullName")
        require_non_empty(user.email, "email")
        if not isinstance(user.role, Role):
            raise ValidationError("Role must be 'employee' or 'admin'")
        require_bool(user.active, "active")

        if user.active:
            self._ensure_email_free(user)

        self._users.upsert(user)
        logger.info("Saved user %s (%s, active=%s)", user.id, user.role.value, user.active)
        return user

    def toggle_user(self, user_id: str) -> Optional[User]:
        """Flip `active`. Unknown ids return None and change nothing."""

        current = self._users.get_by_id(user_id)
        if current is None:
            return None
        if not current.active:
            self._ensure_email_free(current)

        user = self._users.toggle_active(user_id)
        if user:
            logger.info("User %s is now %s", user.id, "active" if user.active else "inactive")
        return user
