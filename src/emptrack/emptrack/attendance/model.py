from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import DeniedReason
from ..presence.model import Location
from ..stores.model import Store


@dataclass(frozen=True)
class AttendanceSession:
    """Domain entity: one clock-in/clock-out span at a store.

    ``exit_time`` is ``None`` while the session is open.
    """

    id: str
    employee_id: str
    store_id: str
    entry_time: datetime
    exit_time: Optional[datetime] = None
    dwell_minutes: int = 0
    last_known_location: Optional[Location] = None

    @property
    def is_open(self) -> bool:
        return self.exit_time is None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "employee_id": self.employee_id,
            "store_id": self.store_id,
            "entry_time": self.entry_time.isoformat(),
            "exit_time": self.exit_time.isoformat() if self.exit_time else None,
            "dwell_minutes": self.dwell_minutes,
            "last_known_location": self.last_known_location.to_dict() if self.last_known_location else None,
        }


@dataclass(frozen=True)
class AuthorizationDecision:
    """Outcome of matching an observed network against assigned stores."""

    store: Optional[Store] = None
    reason: Optional[DeniedReason] = None

    @property
    def allowed(self) -> bool:
        return self.store is not None


@dataclass(frozen=True)
class AttendanceExportRow:
    """Read-model for reports/exports, one row per session."""

    employee_name: str
    employee_id: str
    store_name: str
    date: str
    time_in: str
    time_out: str
    duration_minutes: int
    status: str

    def to_dict(self) -> dict:
        return {
            "employee_name": self.employee_name,
            "employee_id": self.employee_id,
            "store_name": self.store_name,
            "date": self.date,
            "time_in": self.time_in,
            "time_out": self.time_out,
            "duration_minutes": self.duration_minutes,
            "status": self.status,
        }
