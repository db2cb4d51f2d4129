from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Mapping

from ..common.validators import require_bool, require_non_empty
from ..core.enums import Role
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Note: plain data object; the camelCase dict form is what gets persisted
    and what travels over HTTP.
    """

    id: str
    full_name: str
    email: str
    role: Role
    active: bool = True

    def toggled(self) -> "User":
        return replace(self, active=not self.active)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "fullName": self.full_name,
            "email": self.email,
            "role": self.role.value,
            "active": self.active,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "User":
        if not isinstance(data, Mapping):
            raise ValidationError("User must be an object")
        try:
            role = Role(data.get("role"))
        except ValueError:
            raise ValidationError("Role must be 'employee' or 'admin'")
        return cls(
            id=require_non_empty(data.get("id"), "id"),
            full_name=require_non_empty(data.get("fullName"), "fullName"),
            email=require_non_empty(data.get("email"), "email"),
            role=role,
            active=require_bool(data.get("active", True), "active"),
        )


@dataclass(frozen=True)
class AuthSession:
    """Authenticated session: token plus the user snapshot taken at login."""

    token: str
    user: User

    def to_dict(self) -> dict:
        return {"token": self.token, "user": self.user.to_dict()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AuthSession":
        if not isinstance(data, Mapping):
            raise ValidationError("Session must be an object")
        return cls(
            token=require_non_empty(data.get("token"), "token"),
            user=User.from_dict(data.get("user")),
        )
