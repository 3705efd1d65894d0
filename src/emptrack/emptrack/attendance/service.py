from __future__ import annotations

import logging
import threading
import uuid
from datetime import datetime, timedelta
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import format_elapsed, now_local, round_minutes
from ..core.enums import DutyState, EventType
from ..core.exceptions import NetworkAccessDenied, ValidationError
from ..employees.model import Employee
from ..employees.service import EmployeeService
from ..presence.buffer import EventBuffer
from ..presence.model import PresenceEvent
from .authorizer import PresenceAuthorizer
from .model import AttendanceSession, AuthorizationDecision
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Clock-in / clock-out state machine, one independent machine per employee.

    An employee is ON_DUTY exactly while the repository holds an open session
    for them, so at most one open session exists per employee.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeService,
        events: EventBuffer,
        *,
        authorizer: Optional[PresenceAuthorizer] = None,
        clock: Callable[[], datetime] = now_local,
    ):
        self._attendance = attendance
        self._employees = employees
        self._events = events
        self._authorizer = authorizer or PresenceAuthorizer()
        self._clock = clock
        self._lock = threading.RLock()

    def _require_employee(self, employee_id: str) -> Employee:
        return self._employees.get_employee(employee_id)

    def authorize(self, employee_id: str, observed_ssid: Optional[str]) -> AuthorizationDecision:
        self._require_employee(employee_id)
        my_stores = self._employees.list_assigned_stores(employee_id)
        return self._authorizer.authorize(my_stores, observed_ssid)

    def duty_state(self, employee_id: str) -> DutyState:
        return DutyState.ON_DUTY if self._attendance.get_open(employee_id) else DutyState.OFF_DUTY

    def clock_in(
        self,
        employee_id: str,
        observed_ssid: Optional[str],
        *,
        bssid: str = "",
        rssi: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> AttendanceSession:
        with self._lock:
            self._require_employee(employee_id)
            if self._attendance.get_open(employee_id):
                raise ValidationError("You are already clocked in")

            decision = self.authorize(employee_id, observed_ssid)
            if not decision.allowed:
                logger.info("Clock-in denied for %s on %r: %s", employee_id, observed_ssid, decision.reason.value)
                raise NetworkAccessDenied(decision.reason)

            now = now or self._clock()
            session = AttendanceSession(
                id=f"sess-{uuid.uuid4().hex[:12]}",
                employee_id=employee_id,
                store_id=decision.store.id,
                entry_time=now,
                dwell_minutes=0,
            )
            self._attendance.open_session(session)
            self._record(session, EventType.ENTRY, now, ssid=observed_ssid or "", bssid=bssid, rssi=rssi)

        logger.info("%s clocked in at %s", employee_id, session.store_id)
        return session

    def clock_out(
        self,
        employee_id: str,
        *,
        ssid: str = "",
        bssid: str = "",
        rssi: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> Optional[AttendanceSession]:
        """Close the open session. Returns ``None`` when there is nothing to close."""
        with self._lock:
            current = self._attendance.get_open(employee_id)
            if current is None:
                return None

            now = now or self._clock()
            closed = AttendanceSession(
                id=current.id,
                employee_id=current.employee_id,
                store_id=current.store_id,
                entry_time=current.entry_time,
                exit_time=now,
                dwell_minutes=round_minutes(now - current.entry_time),
                last_known_location=current.last_known_location,
            )
            if not self._attendance.close_session(closed):
                raise ValidationError("Clock-out failed")
            self._record(closed, EventType.EXIT, now, ssid=ssid, bssid=bssid, rssi=rssi)

        logger.info("%s clocked out after %d min", employee_id, closed.dwell_minutes)
        return closed

    def current_session(self, employee_id: str) -> Optional[AttendanceSession]:
        return self._attendance.get_open(employee_id)

    def open_sessions(self) -> Sequence[AttendanceSession]:
        return self._attendance.list_open()

    def history(self, employee_id: Optional[str] = None, *, limit: Optional[int] = None) -> Sequence[AttendanceSession]:
        return self._attendance.get_history(employee_id, limit)

    def all_sessions(self) -> Sequence[AttendanceSession]:
        return self._attendance.list_all()

    def elapsed(self, employee_id: str, *, now: Optional[datetime] = None) -> Optional[timedelta]:
        session = self._attendance.get_open(employee_id)
        if session is None:
            return None
        return (now or self._clock()) - session.entry_time

    def elapsed_label(self, employee_id: str, *, now: Optional[datetime] = None) -> Optional[str]:
        delta = self.elapsed(employee_id, now=now)
        return format_elapsed(delta) if delta is not None else None

    def _record(
        self,
        session: AttendanceSession,
        event_type: EventType,
        now: datetime,
        *,
        ssid: str,
        bssid: str,
        rssi: Optional[int],
    ) -> None:
        self._events.push(
            PresenceEvent(
                id=f"evt-{uuid.uuid4().hex[:12]}",
                employee_id=session.employee_id,
                store_id=session.store_id,
                event_type=event_type,
                timestamp=now,
                ssid=ssid,
                bssid=bssid,
                rssi=rssi,
                location=session.last_known_location,
            )
        )
