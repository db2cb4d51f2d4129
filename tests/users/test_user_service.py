from __future__ import annotations

import json

import pytest

from checkin_system.core.constants import STORAGE_KEY_USERS
from checkin_system.core.enums import Role
from checkin_system.core.exceptions import ValidationError
from checkin_system.users.model import User


def test_empty_store_is_seeded_with_demo_users(container, storage):
    users = container.user_service.list_users()

    assert [u.id for u in users] == ["user-employee", "user-admin"]
    assert all(u.active for u in users)
    assert json.loads(storage.get(STORAGE_KEY_USERS))[0]["email"] == "employee@demo.local"


def test_upsert_inserts_then_replaces(container):
    svc = container.user_service
    user = User(id="u-1", full_name="Ann", email="ann@x.local", role=Role.EMPLOYEE)

    assert svc.upsert_user(user) == user
    assert user in svc.list_users()

    changed = User(id="u-1", full_name="Ann B.", email="ann@x.local", role=Role.ADMIN, active=False)
    svc.upsert_user(changed)

    users = svc.list_users()
    assert [u for u in users if u.id == "u-1"] == [changed]
    assert len(users) == 3


def test_upsert_rejects_duplicate_active_email(container):
    clash = User(id="u-9", full_name="Copy", email="Employee@Demo.Local", role=Role.EMPLOYEE)

    with pytest.raises(ValidationError):
        container.user_service.upsert_user(clash)

    inactive_clash = User(id="u-9", full_name="Copy", email="employee@demo.local", role=Role.EMPLOYEE, active=False)
    container.user_service.upsert_user(inactive_clash)
    assert len(container.user_service.list_users()) == 3


def test_toggle_flips_only_active(container):
    before = {u.id: u for u in container.user_service.list_users()}

    toggled = container.user_service.toggle_user("user-employee")

    assert toggled.active is False
    assert toggled.id == before["user-employee"].id
    assert toggled.full_name == before["user-employee"].full_name
    assert toggled.email == before["user-employee"].email
    assert toggled.role == before["user-employee"].role

    after = {u.id: u for u in container.user_service.list_users()}
    assert after["user-employee"] == toggled
    assert after["user-admin"] == before["user-admin"]

    assert container.user_service.toggle_user("user-employee").active is True


def test_toggle_unknown_user_returns_none_and_changes_nothing(container, storage):
    container.user_service.list_users()
    before = storage.get(STORAGE_KEY_USERS)

    assert container.user_service.toggle_user("nope") is None
    assert storage.get(STORAGE_KEY_USERS) == before


@pytest.mark.parametrize("blob", ["not json", "{}", "[]"])
def test_unreadable_user_list_falls_back_to_demo_users(container, storage, blob):
    storage.set(STORAGE_KEY_USERS, blob)

    assert [u.id for u in container.user_service.list_users()] == ["user-employee", "user-admin"]


def test_malformed_entries_are_skipped(container, storage):
    storage.set(
        STORAGE_KEY_USERS,
        json.dumps(
            [
                {"id": "ok", "fullName": "Ok", "email": "ok@x.local", "role": "employee", "active": True},
                {"id": "bad", "fullName": "Bad", "email": "bad@x.local", "role": "boss", "active": True},
                "junk",
            ]
        ),
    )

    assert [u.id for u in container.user_service.list_users()] == ["ok"]


@pytest.mark.parametrize(
    "payload",
    [
        {"id": "", "fullName": "A", "email": "a@x", "role": "employee"},
        {"id": "a", "fullName": " ", "email": "a@x", "role": "employee"},
        {"id": "a", "fullName": "A", "email": "a@x", "role": "owner"},
        {"id": "a", "fullName": "A", "email": "a@x", "role": "admin", "active": "yes"},
    ],
)
def test_user_payload_validation(payload):
    with pytest.raises(ValidationError):
        User.from_dict(payload)


def test_user_dict_round_trip():
    user = User(id="a", full_name="A", email="a@x.local", role=Role.ADMIN, active=False)

    assert user.to_dict() == {"id": "a", "fullName": "A", "email": "a@x.local", "role": "admin", "active": False}
    assert User.from_dict(user.to_dict()) == user


def test_upsert_keeps_fields_exactly_as_given(container):
    user = User(id="u-5", full_name="Ann ", email=" ann@x.local", role=Role.EMPLOYEE)

    container.user_service.upsert_user(user)

    assert user in container.user_service.list_users()


@pytest.mark.parametrize(
    "user",
    [
        User(id="", full_name="A", email="a@x.local", role=Role.EMPLOYEE),
        User(id="u-6", full_name="", email="a@x.local", role=Role.EMPLOYEE),
        User(id="u-6", full_name="A", email="  ", role=Role.EMPLOYEE),
        User(id="u-6", full_name="A", email="a@x.local", role="boss"),
        User(id="u-6", full_name="A", email="a@x.local", role=Role.EMPLOYEE, active="yes"),
    ],
)
def test_upsert_rejects_incomplete_user_without_writing(container, storage, user):
    container.user_service.list_users()
    before = storage.get(STORAGE_KEY_USERS)

    with pytest.raises(ValidationError):
        container.user_service.upsert_user(user)

    assert storage.get(STORAGE_KEY_USERS) == before


def test_toggle_refuses_to_activate_a_duplicate_email(container, storage):
    svc = container.user_service
    svc.upsert_user(User(id="u-9", full_name="Copy", email="employee@demo.local", role=Role.EMPLOYEE, active=False))
    before = storage.get(STORAGE_KEY_USERS)

    with pytest.raises(ValidationError):
        svc.toggle_user("u-9")

    assert storage.get(STORAGE_KEY_USERS) == before
    active = [u.id for u in svc.list_users() if u.active and u.email == "employee@demo.local"]
    assert active == ["user-employee"]


def test_toggle_activates_once_the_email_is_free(container):
    svc = container.user_service
    svc.upsert_user(User(id="u-9", full_name="Copy", email="employee@demo.local", role=Role.EMPLOYEE, active=False))
    svc.toggle_user("user-employee")

    assert svc.toggle_user("u-9").active is True
