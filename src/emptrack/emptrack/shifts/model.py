from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time

from ..core.enums import ShiftStatus


@dataclass(frozen=True)
class Shift:
    """Domain entity: a planned work window. Not reconciled with sessions."""

    id: str
    employee_id: str
    date: date
    start_time: time
    end_time: time
    status: ShiftStatus = ShiftStatus.SCHEDULED

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "employee_id": self.employee_id,
            "date": self.date.strftime("%Y-%m-%d"),
            "start_time": self.start_time.strftime("%H:%M"),
            "end_time": self.end_time.strftime("%H:%M"),
            "status": self.status.value,
        }
