from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..core.exceptions import ValidationError
from .model import AttendanceSession
from .repository import AttendanceRepository


class InMemoryAttendanceRepository(AttendanceRepository):
    def __init__(self, sessions: Iterable[AttendanceSession] = ()):
        self._open: dict[str, AttendanceSession] = {}
        self._history: list[AttendanceSession] = []

        for s in sessions:
            if s.is_open:
                self.open_session(s)
            else:
                self._history.append(s)
        self._history.sort(key=lambda s: s.exit_time, reverse=True)

    def get_open(self, employee_id: str) -> Optional[AttendanceSession]:
        return self._open.get(employee_id)

    def list_open(self) -> Sequence[AttendanceSession]:
        return sorted(self._open.values(), key=lambda s: s.entry_time, reverse=True)

    def open_session(self, session: AttendanceSession) -> None:
        if not session.is_open:
            raise ValidationError("Only open sessions can be started")
        if session.employee_id in self._open:
            raise ValidationError("Employee already has an open session")
        self._open[session.employee_id] = session

    def close_session(self, session: AttendanceSession) -> bool:
        current = self._open.get(session.employee_id)
        if current is None or current.id != session.id or session.is_open:
            return False
        del self._open[session.employee_id]
        self._history.insert(0, session)
        return True

    def get_history(self, employee_id: Optional[str] = None, limit: Optional[int] = None) -> Sequence[AttendanceSession]:
        items = [s for s in self._history if employee_id is None or s.employee_id == employee_id]
        return items if limit is None else items[:limit]

    def list_all(self) -> Sequence[AttendanceSession]:
        return [*self.list_open(), *self._history]
