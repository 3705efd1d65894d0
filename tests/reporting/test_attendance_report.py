from __future__ import annotations

import csv
import io
from datetime import datetime, timedelta

import pytest

from src.emptrack.emptrack.reporting.service import AttendanceReportService, average_dwell
from src.emptrack.emptrack.stores.service import StoreService


@pytest.fixture
def report(attendance, employee_service, store_repo, events, clock):
    return AttendanceReportService(attendance, employee_service, StoreService(store_repo), events, clock=clock)


def _two_sessions(attendance, clock, fixed_now):
    # emp-103: 120 minutes, closed. emp-101: still on-site.
    attendance.clock_in("emp-103", "Boutique_Secure")
    clock.now = fixed_now + timedelta(minutes=120)
    attendance.clock_out("emp-103")
    attendance.clock_in("emp-101", "ShopNet_Staff")


def test_export_marks_open_session_active(report, attendance, clock, fixed_now):
    _two_sessions(attendance, clock, fixed_now)

    rows = {r.employee_id: r for r in report.export_rows()}

    closed = rows["emp-103"]
    assert closed.duration_minutes == 120
    assert closed.status == "Completed"
    assert closed.time_in == "9:00 AM"
    assert closed.time_out == "11:00 AM"
    assert closed.date == "Feb 2, 2026"
    assert closed.store_name == "Mall Boutique"
    assert closed.employee_name == "Syed"

    active = rows["emp-101"]
    assert active.time_out == "Active"
    assert active.status == "Active / On-Site"
    assert active.duration_minutes == 0


def test_export_uses_unknown_for_missing_references(report, attendance, employee_service, store_repo):
    attendance.clock_in("emp-101", "ShopNet_Staff")
    employee_service.delete_employee("emp-101")
    store_repo.delete_by_id("store-001")

    (row,) = report.export_rows()

    assert row.employee_name == "Unknown"
    assert row.store_name == "Unknown"
    assert row.employee_id == "emp-101"


def test_dashboard_stats(report, attendance, clock, fixed_now):
    _two_sessions(attendance, clock, fixed_now)

    stats = report.dashboard_stats()

    assert stats.active_sessions == 1
    assert stats.average_dwell_minutes == 60
    assert stats.store_count == 2
    assert stats.employee_count == 3
    assert stats.recent_event_count == 3


def test_average_dwell_of_nothing_is_zero():
    assert average_dwell([]) == 0


def test_csv_has_summary_then_table(report, attendance, clock, fixed_now):
    _two_sessions(attendance, clock, fixed_now)

    text = report.build_csv(now=datetime(2026, 2, 2, 14, 30))
    lines = list(csv.reader(io.StringIO(text)))

    assert lines[0] == ["EMPLOYEE ATTENDANCE REPORT"]
    assert lines[1] == ["Generated On", "Feb 2, 2026 2:30 PM"]
    assert lines[2] == ["Total Locations", "2"]
    assert lines[3] == ["Total Shifts Recorded", "2"]
    assert lines[4] == ["Average Shift Duration", "60 minutes"]
    assert lines[5] == []
    assert lines[6][0] == "Employee Name"
    assert lines[7][5:] == ["Active", "0", "Active / On-Site"]
    assert lines[8][5:] == ["11:00 AM", "120", "Completed"]
