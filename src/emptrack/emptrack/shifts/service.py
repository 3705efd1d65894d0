from __future__ import annotations

import logging
import uuid
from datetime import date, datetime, time
from typing import Optional, Sequence, Union

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_non_empty
from ..core.enums import ShiftStatus
from ..core.exceptions import ValidationError
from ..employees.service import EmployeeService
from .model import Shift
from .repository import ShiftRepository

logger = logging.getLogger(__name__)


def _parse_time(value: Union[time, str, None], field_name: str) -> time:
    if isinstance(value, time):
        return value
    raw = require_non_empty(value, field_name)
    try:
        return datetime.strptime(raw, "%H:%M").time()
    except ValueError:
        raise ValidationError(f"{field_name} must look like HH:MM") from None


def _parse_date(value: Union[date, str, None]) -> date:
    if isinstance(value, date):
        return value
    raw = require_non_empty(value, "Date")
    try:
        return parse_iso_date(raw)
    except ValueError:
        raise ValidationError("Date must look like YYYY-MM-DD") from None


class ShiftService:
    """Use case: employees plan their own shifts."""

    def __init__(self, shifts: ShiftRepository, employees: EmployeeService):
        self._shifts = shifts
        self._employees = employees

    def list_for_employee(self, employee_id: str) -> Sequence[Shift]:
        return self._shifts.list_for_employee(employee_id)

    def add_shift(
        self,
        employee_id: str,
        *,
        work_date: Union[date, str, None],
        start_time: Union[time, str, None],
        end_time: Union[time, str, None],
        status: Optional[ShiftStatus] = None,
    ) -> Shift:
        self._employees.get_employee(employee_id)

        shift = Shift(
            id=f"shift-{uuid.uuid4().hex[:8]}",
            employee_id=employee_id,
            date=_parse_date(work_date),
            start_time=_parse_time(start_time, "Start time"),
            end_time=_parse_time(end_time, "End time"),
            status=status or ShiftStatus.SCHEDULED,
        )
        if shift.end_time <= shift.start_time:
            raise ValidationError("End time must be after start time")

        self._shifts.add(shift)
        logger.info("Shift %s scheduled for %s on %s", shift.id, employee_id, shift.date)
        return shift
