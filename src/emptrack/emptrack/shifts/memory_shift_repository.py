from __future__ import annotations

import threading
from typing import Iterable, Sequence

from .model import Shift
from .repository import ShiftRepository


class InMemoryShiftRepository(ShiftRepository):
    def __init__(self, shifts: Iterable[Shift] = ()):
        self._lock = threading.Lock()
        self._shifts: list[Shift] = list(shifts)

    def list_for_employee(self, employee_id: str) -> Sequence[Shift]:
        with self._lock:
            items = [s for s in self._shifts if s.employee_id == employee_id]
        items.sort(key=lambda s: (s.date, s.start_time))
        return items

    def add(self, shift: Shift) -> None:
        with self._lock:
            self._shifts.append(shift)
