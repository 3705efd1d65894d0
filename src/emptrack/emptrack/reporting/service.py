from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional, Sequence

from ..attendance.model import AttendanceExportRow, AttendanceSession
from ..attendance.service import AttendanceService
from ..common.datetime_utils import format_report_date, format_report_time, now_local
from ..core.constants import ACTIVE_TIME_OUT, UNKNOWN_LABEL
from ..core.enums import SessionStatus
from ..employees.service import EmployeeService
from ..presence.buffer import EventBuffer
from ..stores.service import StoreService

EXPORT_HEADERS = [
    "Employee Name",
    "Employee ID",
    "Store Location",
    "Date",
    "Time In",
    "Time Out",
    "Duration (Mins)",
    "Status",
]


@dataclass(frozen=True)
class DashboardStats:
    active_sessions: int
    average_dwell_minutes: int
    store_count: int
    employee_count: int
    recent_event_count: int

    def to_dict(self) -> dict:
        return {
            "active_sessions": self.active_sessions,
            "average_dwell_minutes": self.average_dwell_minutes,
            "store_count": self.store_count,
            "employee_count": self.employee_count,
            "recent_event_count": self.recent_event_count,
        }


def average_dwell(sessions: Sequence[AttendanceSession]) -> int:
    """Mean dwell over every session (open ones count with their current value)."""
    if not sessions:
        return 0
    return int(sum(s.dwell_minutes for s in sessions) / len(sessions) + 0.5)


class AttendanceReportService:
    """Read side: dashboard figures and the attendance export."""

    def __init__(
        self,
        attendance: AttendanceService,
        employees: EmployeeService,
        stores: StoreService,
        events: EventBuffer,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._attendance = attendance
        self._employees = employees
        self._stores = stores
        self._events = events
        self._clock = clock

    def export_rows(self, sessions: Optional[Sequence[AttendanceSession]] = None) -> list[AttendanceExportRow]:
        if sessions is None:
            sessions = self._attendance.all_sessions()

        names = {e.id: e.name for e in self._employees.list_employees()}
        store_names = {s.id: s.name for s in self._stores.list_stores()}

        rows: list[AttendanceExportRow] = []
        for s in sessions:
            rows.append(
                AttendanceExportRow(
                    employee_name=names.get(s.employee_id, UNKNOWN_LABEL),
                    employee_id=s.employee_id,
                    store_name=store_names.get(s.store_id, UNKNOWN_LABEL),
                    date=format_report_date(s.entry_time),
                    time_in=format_report_time(s.entry_time),
                    time_out=format_report_time(s.exit_time) if s.exit_time else ACTIVE_TIME_OUT,
                    duration_minutes=s.dwell_minutes,
                    status=(SessionStatus.COMPLETED if s.exit_time else SessionStatus.ACTIVE).value,
                )
            )
        return rows

    def dashboard_stats(self) -> DashboardStats:
        sessions = self._attendance.all_sessions()
        return DashboardStats(
            active_sessions=sum(1 for s in sessions if s.is_open),
            average_dwell_minutes=average_dwell(sessions),
            store_count=len(self._stores.list_stores()),
            employee_count=len(self._employees.list_employees()),
            recent_event_count=len(self._events),
        )

    def build_csv(self, *, now: Optional[datetime] = None) -> str:
        """Attendance report as CSV text: summary block, blank line, table."""
        now = now or self._clock()
        sessions = self._attendance.all_sessions()
        rows = self.export_rows(sessions)

        out = io.StringIO()
        writer = csv.writer(out, lineterminator="\n")
        writer.writerow(["EMPLOYEE ATTENDANCE REPORT"])
        writer.writerow(["Generated On", f"{format_report_date(now)} {format_report_time(now)}"])
        writer.writerow(["Total Locations", len(self._stores.list_stores())])
        writer.writerow(["Total Shifts Recorded", len(sessions)])
        writer.writerow(["Average Shift Duration", f"{average_dwell(sessions)} minutes"])
        writer.writerow([])
        writer.writerow(EXPORT_HEADERS)
        for r in rows:
            writer.writerow(
                [r.employee_name, r.employee_id, r.store_name, r.date, r.time_in, r.time_out, r.duration_minutes, r.status]
            )
        return out.getvalue()
