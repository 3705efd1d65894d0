from __future__ import annotations

import random
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.service import AttendanceService
from .auth.model import UserProfile
from .auth.service import AuthService
from .common.datetime_utils import now_local
from .core.constants import (
    DEFAULT_TENANT_ID,
    DEFAULT_TENANT_NAME,
    FEED_INTERVAL_SECONDS,
    INSIGHT_LATENCY_SECONDS,
    RECENT_EVENTS_LIMIT,
)
from .employees.memory_employee_repository import InMemoryEmployeeRepository
from .employees.service import EmployeeService
from .insights.generator import SimulatedInsightGenerator
from .insights.service import InsightService
from .presence.buffer import EventBuffer
from .presence.feed import LiveFeedSimulator
from .reporting.service import AttendanceReportService
from .seed import mock_data
from .shifts.memory_shift_repository import InMemoryShiftRepository
from .shifts.service import ShiftService
from .stores.memory_store_repository import InMemoryStoreRepository
from .stores.service import StoreService


@dataclass(frozen=True)
class Container:
    """Application state: every repository and service, built once per app."""

    admin_profile: UserProfile

    stores_repo: InMemoryStoreRepository
    employees_repo: InMemoryEmployeeRepository
    attendance_repo: InMemoryAttendanceRepository
    shifts_repo: InMemoryShiftRepository
    events: EventBuffer
    feed: Optional[LiveFeedSimulator]

    store_service: StoreService
    employee_service: EmployeeService
    attendance_service: AttendanceService
    shift_service: ShiftService
    report_service: AttendanceReportService
    insight_service: InsightService
    auth_service: AuthService


def build_container(
    *,
    seed_demo_data: bool = True,
    feed_enabled: bool = True,
    feed_interval: float = FEED_INTERVAL_SECONDS,
    recent_events_limit: int = RECENT_EVENTS_LIMIT,
    insight_latency: float = INSIGHT_LATENCY_SECONDS,
    tenant_id: str = DEFAULT_TENANT_ID,
    tenant_name: str = DEFAULT_TENANT_NAME,
    clock: Callable[[], datetime] = now_local,
    rng: Optional[random.Random] = None,
) -> Container:
    now = clock()
    rng = rng or random.Random()
    admin_profile = mock_data.admin_profile(tenant_id, tenant_name)

    if seed_demo_data:
        stores_repo = InMemoryStoreRepository(mock_data.demo_stores(tenant_id))
        employees_repo = InMemoryEmployeeRepository(mock_data.demo_employees())
        attendance_repo = InMemoryAttendanceRepository(mock_data.demo_sessions(now))
        shifts_repo = InMemoryShiftRepository(mock_data.demo_shifts(now.date()))
    else:
        stores_repo = InMemoryStoreRepository()
        employees_repo = InMemoryEmployeeRepository()
        attendance_repo = InMemoryAttendanceRepository()
        shifts_repo = InMemoryShiftRepository()

    events = EventBuffer(recent_events_limit)
    if seed_demo_data:
        events.load(mock_data.demo_events(now, rng))

    feed = None
    if feed_enabled:
        feed = LiveFeedSimulator(
            events,
            employee_id=mock_data.FEED_EMPLOYEE_ID,
            store_id=mock_data.FEED_STORE_ID,
            ssid=mock_data.FEED_SSID,
            bssid=mock_data.FEED_BSSID,
            interval=feed_interval,
            rng=rng,
            clock=clock,
        )

    store_service = StoreService(stores_repo)
    employee_service = EmployeeService(employees_repo, stores_repo)
    attendance_service = AttendanceService(attendance_repo, employee_service, events, clock=clock)
    shift_service = ShiftService(shifts_repo, employee_service)
    report_service = AttendanceReportService(attendance_service, employee_service, store_service, events, clock=clock)
    insight_service = InsightService(SimulatedInsightGenerator(latency=insight_latency))
    auth_service = AuthService(employee_service, admin_profile, feed=feed)

    return Container(
        admin_profile=admin_profile,
        stores_repo=stores_repo,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        shifts_repo=shifts_repo,
        events=events,
        feed=feed,
        store_service=store_service,
        employee_service=employee_service,
        attendance_service=attendance_service,
        shift_service=shift_service,
        report_service=report_service,
        insight_service=insight_service,
        auth_service=auth_service,
    )
