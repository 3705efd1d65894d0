from __future__ import annotations

from typing import Protocol, Sequence

from .model import Shift


class ShiftRepository(Protocol):
    def list_for_employee(self, employee_id: str) -> Sequence[Shift]:
        raise NotImplementedError

    def add(self, shift: Shift) -> None:
        raise NotImplementedError
