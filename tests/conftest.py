from __future__ import annotations

from datetime import datetime

import pytest

from src.emptrack.emptrack.attendance.memory_attendance_repository import InMemoryAttendanceRepository
from src.emptrack.emptrack.attendance.service import AttendanceService
from src.emptrack.emptrack.core.enums import Role
from src.emptrack.emptrack.employees.memory_employee_repository import InMemoryEmployeeRepository
from src.emptrack.emptrack.employees.model import Employee
from src.emptrack.emptrack.employees.service import EmployeeService
from src.emptrack.emptrack.presence.buffer import EventBuffer
from src.emptrack.emptrack.stores.memory_store_repository import InMemoryStoreRepository
from src.emptrack.emptrack.stores.model import Store


class FrozenClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 9, 0, 0)


@pytest.fixture
def clock(fixed_now) -> FrozenClock:
    return FrozenClock(fixed_now)


@pytest.fixture
def stores() -> list[Store]:
    return [
        Store(
            id="store-001",
            tenant_id="tenant-alpha",
            name="Downtown Flagship",
            ssids=("ShopNet_Staff", "ShopNet_Guest", "Intelense_5G"),
            bssids=("aa:bb:cc:dd:ee:01",),
        ),
        Store(
            id="store-002",
            tenant_id="tenant-alpha",
            name="Mall Boutique",
            ssids=("Boutique_Secure",),
            bssids=("11:22:33:44:55:66",),
        ),
    ]


@pytest.fixture
def employees() -> list[Employee]:
    return [
        Employee(id="emp-101", name="Gouthami", email="g@example.com", role=Role.STORE_MANAGER, assigned_store_ids=("store-001",)),
        Employee(id="emp-103", name="Syed", email="s@example.com", role=Role.ASSISTANT_MANAGER, assigned_store_ids=("store-002",)),
        Employee(id="emp-104", name="Nobody", email="n@example.com", role=Role.AUDITOR),
    ]


@pytest.fixture
def store_repo(stores) -> InMemoryStoreRepository:
    return InMemoryStoreRepository(stores)


@pytest.fixture
def employee_service(employees, store_repo) -> EmployeeService:
    return EmployeeService(InMemoryEmployeeRepository(employees), store_repo)


@pytest.fixture
def events() -> EventBuffer:
    return EventBuffer(50)


@pytest.fixture
def attendance_repo() -> InMemoryAttendanceRepository:
    return InMemoryAttendanceRepository()


@pytest.fixture
def attendance(attendance_repo, employee_service, events, clock) -> AttendanceService:
    return AttendanceService(attendance_repo, employee_service, events, clock=clock)
