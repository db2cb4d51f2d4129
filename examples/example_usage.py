"""Example: use the check-in API without going through Flask.

The same calls work in mock and remote mode; `build_container` picks the
implementation from USE_MOCK_API.
"""

from checkin_system.config import load_settings
from checkin_system.container import build_container
from checkin_system.core.enums import Role


def main():
    settings = load_settings()
    api = build_container(settings).api

    session = api.demo_login(Role.EMPLOYEE)
    day = api.scan_qr(session.user.id, settings.office_qr_code)
    print(f"{session.user.full_name}: {day.date} in={day.in_time} out={day.out_time} -> {day.status.value}")

    for d in api.get_week(session.user.id):
        print(d.date, d.status.value)


if __name__ == "__main__":
    main()
