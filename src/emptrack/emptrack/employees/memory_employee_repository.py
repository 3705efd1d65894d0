from __future__ import annotations

import threading
from typing import Iterable, Optional, Sequence

from .model import Employee
from .repository import EmployeeRepository


class InMemoryEmployeeRepository(EmployeeRepository):
    def __init__(self, employees: Iterable[Employee] = ()):
        self._lock = threading.Lock()
        self._employees: list[Employee] = list(employees)

    def list_all(self) -> Sequence[Employee]:
        with self._lock:
            return list(self._employees)

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with self._lock:
            return next((e for e in self._employees if e.id == employee_id), None)

    def get_by_email(self, email: str) -> Optional[Employee]:
        needle = email.strip().lower()
        with self._lock:
            return next((e for e in self._employees if e.email.lower() == needle), None)

    def add(self, employee: Employee) -> None:
        with self._lock:
            self._employees.append(employee)

    def replace(self, employee: Employee) -> bool:
        with self._lock:
            for i, existing in enumerate(self._employees):
                if existing.id == employee.id:
                    self._employees[i] = employee
                    return True
            return False

    def delete_by_id(self, employee_id: str) -> bool:
        with self._lock:
            before = len(self._employees)
            self._employees = [e for e in self._employees if e.id != employee_id]
            return len(self._employees) != before
