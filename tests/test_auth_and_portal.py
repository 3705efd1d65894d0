from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from src.emptrack.emptrack.container import build_container
from src.emptrack.emptrack.core.enums import Role
from src.emptrack.emptrack.core.exceptions import AuthenticationError
from src.emptrack.emptrack.portal.views import AdminPortal, EmployeePortal, portal_for


class FakeFeed:
    def __init__(self):
        self.running = False
        self.starts = 0

    def start(self):
        self.starts += 1
        self.running = True

    def stop(self, timeout=None):
        self.running = False


@pytest.fixture
def container(fixed_now):
    return build_container(feed_enabled=False, insight_latency=0, clock=lambda: fixed_now)


def test_portal_dispatch_by_role():
    assert isinstance(portal_for(Role.SUPER_ADMIN), AdminPortal)
    for role in (Role.STORE_MANAGER, Role.ASSISTANT_MANAGER, Role.AUDITOR):
        assert isinstance(portal_for(role), EmployeePortal)


def test_login_choices(container):
    admin = container.auth_service.login("ADMIN")
    assert admin.role == Role.SUPER_ADMIN

    default_employee = container.auth_service.login("employee")
    assert default_employee.id == "emp-101"
    assert default_employee.tenant_name == "Alpha Retail Corp"

    other = container.auth_service.login("EMPLOYEE", "emp-103")
    assert other.role == Role.ASSISTANT_MANAGER

    with pytest.raises(AuthenticationError):
        container.auth_service.login("EMPLOYEE", "emp-999")
    with pytest.raises(AuthenticationError):
        container.auth_service.login("ROOT")


def test_feed_runs_while_someone_is_logged_in(container):
    from src.emptrack.emptrack.auth.service import AuthService

    feed = FakeFeed()
    auth = AuthService(container.employee_service, container.admin_profile, feed=feed)

    auth.login("ADMIN")
    auth.login("EMPLOYEE")
    assert feed.running

    auth.logout()
    assert feed.running
    auth.logout()
    assert not feed.running

    auth.logout()
    assert auth.active_logins == 0


def test_seeded_container_matches_demo_data(container):
    assert [s.id for s in container.store_service.list_stores()] == ["store-001", "store-002", "store-003"]
    assert len(container.attendance_service.open_sessions()) == 2
    assert len(container.events) == 7
    assert container.feed is None


def test_admin_portal_payload(container):
    payload = AdminPortal().build(container, container.admin_profile)

    assert payload["view"] == "admin"
    assert payload["stats"]["active_sessions"] == 2
    assert payload["stats"]["average_dwell_minutes"] == 75
    assert len(payload["stores"]) == 3
    assert {row["status"] for row in payload["sessions"]} == {"Active / On-Site"}


def test_employee_portal_payload(container, fixed_now):
    profile = container.auth_service.login("EMPLOYEE", "emp-103")

    payload = EmployeePortal().build(container, profile, now=fixed_now + timedelta(minutes=5))

    assert payload["view"] == "employee"
    assert payload["duty_state"] == "OFF_DUTY"
    assert payload["current_session"] is None
    assert payload["elapsed"] is None
    assert payload["suggested_network"] == "Boutique_Secure"
    assert [s["id"] for s in payload["my_stores"]] == ["store-002"]
    assert "Kiosk_Mgmt" in payload["networks"]


def test_seeded_on_duty_employee_sees_elapsed(container, fixed_now):
    profile = container.auth_service.login("EMPLOYEE", "emp-101")

    payload = EmployeePortal().build(container, profile, now=fixed_now)

    assert payload["duty_state"] == "ON_DUTY"
    assert payload["elapsed"] == "2h 0m"
    assert len(payload["shifts"]) == 2
