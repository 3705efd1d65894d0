from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[Employee]:
        raise NotImplementedError

    def add(self, employee: Employee) -> None:
        raise NotImplementedError

    def replace(self, employee: Employee) -> bool:
        raise NotImplementedError

    def delete_by_id(self, employee_id: str) -> bool:
        raise NotImplementedError
