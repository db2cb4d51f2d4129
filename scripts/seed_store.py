from __future__ import annotations

import argparse

from dotenv import load_dotenv

from checkin_system.config import load_settings
from checkin_system.container import build_container
from checkin_system.core.constants import STORAGE_KEY_ATTENDANCE, STORAGE_KEY_AUTH, STORAGE_KEY_USERS


def main() -> None:
    parser = argparse.ArgumentParser(description="Reset the check-in store and seed the demo users.")
    parser.add_argument("--keep-attendance", action="store_true", help="do not wipe attendance records")
    args = parser.parse_args()

    load_dotenv(override=False)
    settings = load_settings()
    container = build_container(settings)

    container.storage.remove(STORAGE_KEY_USERS)
    container.storage.remove(STORAGE_KEY_AUTH)
    if not args.keep_attendance:
        container.storage.remove(STORAGE_KEY_ATTENDANCE)

    # Listing an empty store reseeds the demo users.
    users = container.user_service.list_users()

    print(f"OK: Seeded {len(users)} users -> {settings.storage_path or '(in-memory)'}")
    for user in users:
        print(f"  {user.id:<16} {user.role.value:<9} {user.email}")


if __name__ == "__main__":
    main()
