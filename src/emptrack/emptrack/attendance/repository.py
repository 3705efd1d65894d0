from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AttendanceSession


class AttendanceRepository(Protocol):
    """Open sessions (at most one per employee) plus closed history."""

    def get_open(self, employee_id: str) -> Optional[AttendanceSession]:
        raise NotImplementedError

    def list_open(self) -> Sequence[AttendanceSession]:
        raise NotImplementedError

    def open_session(self, session: AttendanceSession) -> None:
        """Store ``session`` as the employee's open session.

        Must refuse when the employee already has one.
        """

        raise NotImplementedError

    def close_session(self, session: AttendanceSession) -> bool:
        """Drop the open session with ``session.id`` and prepend ``session`` to history."""

        raise NotImplementedError

    def get_history(self, employee_id: Optional[str] = None, limit: Optional[int] = None) -> Sequence[AttendanceSession]:
        raise NotImplementedError

    def list_all(self) -> Sequence[AttendanceSession]:
        raise NotImplementedError
