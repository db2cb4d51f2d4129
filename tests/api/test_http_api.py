from __future__ import annotations

import json

import httpx
import pytest

from checkin_system.api.http_api import HttpCheckinApi
from checkin_system.core.enums import AttendanceStatus, Role
from checkin_system.core.exceptions import RequestFailed
from checkin_system.users.model import User

BASE = "https://api.example.test/v1"

EMPLOYEE = {"id": "e-1", "fullName": "Emp", "email": "e@x.local", "role": "employee", "active": True}
DAY = {"date": "2026-02-04", "inTime": "2026-02-04T08:30:00.000", "outTime": None, "status": "INCOMPLETE"}


class Recorder:
    """MockTransport handler answering from a route table and keeping every request."""

    def __init__(self, routes):
        self.routes = routes
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.path)
        if key not in self.routes:
            return httpx.Response(404, json={"message": "not found"})
        status, body = self.routes[key]
        return httpx.Response(status, json=body)


def make_api(routes):
    recorder = Recorder(routes)
    client = httpx.Client(transport=httpx.MockTransport(recorder))
    return HttpCheckinApi(BASE, client=client), recorder


def test_login_posts_credentials_and_parses_session():
    api, rec = make_api({("POST", "/v1/auth/login"): (200, {"token": "tok", "user": EMPLOYEE})})

    session = api.login("e@x.local", "pw")

    assert session.token == "tok"
    assert session.user == User.from_dict(EMPLOYEE)
    assert json.loads(rec.requests[0].content) == {"email": "e@x.local", "password": "pw"}


def test_get_session_null_means_no_session():
    api, _ = make_api({("GET", "/v1/auth/session"): (200, None)})

    assert api.get_session() is None


def test_demo_login_sends_role_value():
    api, rec = make_api({("POST", "/v1/auth/demo"): (200, {"token": "t", "user": EMPLOYEE})})

    api.demo_login(Role.EMPLOYEE)

    assert json.loads(rec.requests[0].content) == {"role": "employee"}


def test_scan_sends_user_and_code():
    api, rec = make_api({("POST", "/v1/attendance/scan"): (200, DAY)})

    day = api.scan_qr("e-1", "CODE")

    assert day.status == AttendanceStatus.INCOMPLETE
    assert day.in_time == DAY["inTime"]
    assert json.loads(rec.requests[0].content) == {"userId": "e-1", "code": "CODE"}


def test_queries_are_passed_as_parameters():
    api, rec = make_api(
        {
            ("GET", "/v1/attendance/week"): (200, [DAY] * 7),
            ("GET", "/v1/attendance/history"): (200, [DAY]),
            ("GET", "/v1/admin/attendance"): (
                200,
                [{"userId": "e-1", "fullName": "Emp", "inTime": None, "outTime": None, "status": "ABSENT"}],
            ),
        }
    )

    assert len(api.get_week("e-1")) == 7
    assert len(api.get_history("e-1", "2026-02")) == 1
    rows = api.get_admin_rows("2026-02-03")

    assert rows[0].status == AttendanceStatus.ABSENT
    assert rec.requests[0].url.params["userId"] == "e-1"
    assert dict(rec.requests[1].url.params) == {"userId": "e-1", "month": "2026-02"}
    assert rec.requests[2].url.params["date"] == "2026-02-03"


def test_user_admin_calls():
    api, rec = make_api(
        {
            ("GET", "/v1/admin/users"): (200, [EMPLOYEE]),
            ("POST", "/v1/admin/users"): (200, EMPLOYEE),
            ("POST", "/v1/admin/users/e-1/toggle"): (200, dict(EMPLOYEE, active=False)),
            ("POST", "/v1/admin/users/ghost/toggle"): (200, None),
        }
    )
    user = User.from_dict(EMPLOYEE)

    assert api.list_users() == [user]
    assert api.upsert_user(user) == user
    assert json.loads(rec.requests[1].content) == EMPLOYEE
    assert api.toggle_user("e-1").active is False
    assert api.toggle_user("ghost") is None


def test_logout_accepts_empty_body():
    calls = []

    def handler(request):
        calls.append(request.url.path)
        return httpx.Response(204)

    api = HttpCheckinApi(BASE, client=httpx.Client(transport=httpx.MockTransport(handler)))
    api.logout()

    assert calls == ["/v1/auth/logout"]


@pytest.mark.parametrize("status", [400, 401, 404, 500, 503])
def test_non_success_status_raises_request_failed(status):
    api, _ = make_api({("POST", "/v1/attendance/scan"): (status, {"message": "nope"})})

    with pytest.raises(RequestFailed, match="Request failed."):
        api.scan_qr("e-1", "CODE")


def test_transport_error_raises_request_failed_without_retry():
    attempts = []

    def handler(request):
        attempts.append(request)
        raise httpx.ConnectError("refused", request=request)

    api = HttpCheckinApi(BASE, client=httpx.Client(transport=httpx.MockTransport(handler)))

    with pytest.raises(RequestFailed):
        api.list_users()
    assert len(attempts) == 1


def test_missing_base_url_fails_before_any_request():
    api = HttpCheckinApi("", client=httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(200))))

    with pytest.raises(RequestFailed, match="API base URL is not configured."):
        api.get_session()


@pytest.mark.parametrize(
    "method, path, body, call",
    [
        ("POST", "/v1/auth/login", {"token": "t"}, lambda api: api.login("e@x.local", "pw")),
        ("POST", "/v1/attendance/scan", {"date": "2026-02-04", "status": "LATER"}, lambda api: api.scan_qr("e-1", "C")),
        ("GET", "/v1/attendance/week", [{"inTime": None}], lambda api: api.get_week("e-1")),
        ("GET", "/v1/attendance/history", 42, lambda api: api.get_history("e-1", "2026-02")),
        ("GET", "/v1/admin/users", [dict(EMPLOYEE, role="boss")], lambda api: api.list_users()),
        ("POST", "/v1/admin/users/e-1/toggle", "yes", lambda api: api.toggle_user("e-1")),
    ],
)
def test_malformed_success_body_raises_request_failed(method, path, body, call):
    api, _ = make_api({(method, path): (200, body)})

    with pytest.raises(RequestFailed, match="Request failed."):
        call(api)


def test_close_releases_the_client():
    client = httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(200, json=[])))
    api = HttpCheckinApi(BASE, client=client)

    assert api.list_users() == []
    api.close()

    assert client.is_closed
    with pytest.raises(RuntimeError):
        client.get(f"{BASE}/admin/users")
