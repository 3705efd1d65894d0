from __future__ import annotations

import logging
import uuid
from typing import Iterable, Optional, Sequence, Union

from ..common.validators import require_non_empty, split_identifiers
from ..core.enums import Role
from ..core.exceptions import ValidationError
from ..stores.model import Store
from ..stores.repository import StoreRepository
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

AVATAR_URL_TEMPLATE = "https://api.dicebear.com/7.x/avataaars/svg?seed={seed}"


def _parse_role(value: Union[Role, str, None]) -> Role:
    if isinstance(value, Role):
        role = value
    else:
        raw = require_non_empty(value, "Role")
        role = next((r for r in Role if raw in (r.value, r.name)), None)
        if role is None:
            raise ValidationError(f"Unknown role: {raw}")

    if role == Role.SUPER_ADMIN:
        raise ValidationError("Administrators cannot be created from the staff roster")
    return role


class EmployeeService:
    """Use case: manage the staff roster and resolve store assignments."""

    def __init__(self, employees: EmployeeRepository, stores: StoreRepository):
        self._employees = employees
        self._stores = stores

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get_employee(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise ValidationError("Employee not found")
        return employee

    def list_assigned_stores(self, employee_id: str) -> list[Store]:
        """Stores the employee may clock in at, in registry order.

        Dangling ids (stores deleted since assignment) are dropped.
        """
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            return []
        assigned = set(employee.assigned_store_ids)
        return [s for s in self._stores.list_all() if s.id in assigned]

    def suggested_network(self, employee_id: str) -> Optional[str]:
        """First SSID of the employee's stores: what a phone would auto-join."""
        for store in self.list_assigned_stores(employee_id):
            if store.ssids:
                return store.ssids[0]
        return None

    def create_employee(
        self,
        *,
        name: Optional[str],
        email: Optional[str],
        role: Union[Role, str, None],
        assigned_store_ids: Union[str, Iterable[str], None] = None,
        avatar_url: Optional[str] = None,
    ) -> Employee:
        name = require_non_empty(name, "Name")
        email = require_non_empty(email, "Email")
        if "@" not in email:
            raise ValidationError("Email is not valid")
        if self._employees.get_by_email(email):
            raise ValidationError("An employee with this email already exists")

        employee = Employee(
            id=f"emp-{uuid.uuid4().hex[:8]}",
            name=name,
            email=email,
            role=_parse_role(role),
            assigned_store_ids=split_identifiers(assigned_store_ids),
            avatar_url=avatar_url or AVATAR_URL_TEMPLATE.format(seed=name.replace(" ", "")),
        )
        self._employees.add(employee)
        logger.info("Employee %s (%s) added to roster", employee.id, employee.role.value)
        return employee

    def update_employee(
        self,
        employee_id: str,
        *,
        name: Optional[str],
        email: Optional[str],
        role: Union[Role, str, None],
        assigned_store_ids: Union[str, Iterable[str], None] = None,
        avatar_url: Optional[str] = None,
    ) -> Employee:
        existing = self.get_employee(employee_id)
        name = require_non_empty(name, "Name")
        email = require_non_empty(email, "Email")
        if "@" not in email:
            raise ValidationError("Email is not valid")
        clash = self._employees.get_by_email(email)
        if clash and clash.id != existing.id:
            raise ValidationError("An employee with this email already exists")

        employee = Employee(
            id=existing.id,
            name=name,
            email=email,
            role=_parse_role(role),
            assigned_store_ids=split_identifiers(assigned_store_ids),
            avatar_url=avatar_url or existing.avatar_url,
        )
        if not self._employees.replace(employee):
            raise ValidationError("Employee update failed")
        logger.info("Employee %s updated", employee.id)
        return employee

    def delete_employee(self, employee_id: str) -> None:
        if not self._employees.delete_by_id(employee_id):
            raise ValidationError("Employee not found")
        logger.info("Employee %s removed from roster", employee_id)
