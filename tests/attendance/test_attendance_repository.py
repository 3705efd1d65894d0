from datetime import datetime

import pytest

from src.emptrack.emptrack.attendance.memory_attendance_repository import InMemoryAttendanceRepository
from src.emptrack.emptrack.attendance.model import AttendanceSession
from src.emptrack.emptrack.core.exceptions import ValidationError


def _open(session_id: str, employee_id: str = "emp-1") -> AttendanceSession:
    return AttendanceSession(id=session_id, employee_id=employee_id, store_id="s", entry_time=datetime(2026, 1, 1, 9, 0))


def test_refuses_second_open_session_for_same_employee():
    repo = InMemoryAttendanceRepository()
    repo.open_session(_open("a"))

    with pytest.raises(ValidationError):
        repo.open_session(_open("b"))


def test_close_requires_matching_open_session():
    repo = InMemoryAttendanceRepository()
    repo.open_session(_open("a"))
    stranger = AttendanceSession(
        id="zzz",
        employee_id="emp-1",
        store_id="s",
        entry_time=datetime(2026, 1, 1, 9, 0),
        exit_time=datetime(2026, 1, 1, 10, 0),
        dwell_minutes=60,
    )

    assert repo.close_session(stranger) is False
    assert repo.get_open("emp-1").id == "a"


def test_seeded_sessions_split_into_open_and_history():
    closed = AttendanceSession(
        id="c",
        employee_id="emp-2",
        store_id="s",
        entry_time=datetime(2026, 1, 1, 8, 0),
        exit_time=datetime(2026, 1, 1, 10, 0),
        dwell_minutes=120,
    )
    repo = InMemoryAttendanceRepository([_open("a"), closed])

    assert repo.get_open("emp-1").id == "a"
    assert [s.id for s in repo.get_history()] == ["c"]
    assert [s.id for s in repo.list_all()] == ["a", "c"]
