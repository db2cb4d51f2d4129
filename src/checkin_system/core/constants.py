"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

# Check-ins strictly after this local time-of-day are late.
LATE_CUTOFF = time(9, 10, 0)

# Monday=0 ... Friday=4 (datetime.weekday()).
WORKING_WEEKDAYS = frozenset(range(5))

DAYS_IN_WEEK = 7

STORAGE_KEY_USERS = "checkin_users"
STORAGE_KEY_ATTENDANCE = "checkin_attendance"
STORAGE_KEY_AUTH = "checkin_auth"

SESSION_TOKEN_PREFIX = "mock-"

DEFAULT_HTTP_TIMEOUT_SECONDS = 10.0

DEMO_USERS = (
    {
        "id": "user-employee",
        "fullName": "Demo Employee",
        "email": "employee@demo.local",
        "role": "employee",
        "active": True,
    },
    {
        "id": "user-admin",
        "fullName": "Demo Admin",
        "email": "admin@demo.local",
        "role": "admin",
        "active": True,
    },
)
