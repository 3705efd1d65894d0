from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from ..auth.model import UserProfile
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import ValidationError


class Portal(ABC):
    """What a logged-in operator lands on. One subclass per audience."""

    name: str = ""

    @abstractmethod
    def build(self, container: Container, profile: UserProfile, *, now: Optional[datetime] = None) -> dict:
        raise NotImplementedError


class AdminPortal(Portal):
    """Tenant-wide overview: stats, registry, roster, live feed, sessions."""

    name = "admin"

    def build(self, container: Container, profile: UserProfile, *, now: Optional[datetime] = None) -> dict:
        return {
            "view": self.name,
            "profile": profile.to_dict(),
            "stats": container.report_service.dashboard_stats().to_dict(),
            "stores": [s.to_dict() for s in container.store_service.list_stores()],
            "employees": [e.to_dict() for e in container.employee_service.list_employees()],
            "events": [e.to_dict() for e in container.events.recent()],
            "sessions": [r.to_dict() for r in container.report_service.export_rows()],
        }


class EmployeePortal(Portal):
    """Self-service clock-in/out, personal history and shifts."""

    name = "employee"

    def build(self, container: Container, profile: UserProfile, *, now: Optional[datetime] = None) -> dict:
        attendance = container.attendance_service
        try:
            employee = container.employee_service.get_employee(profile.id)
        except ValidationError:
            employee = None

        current = attendance.current_session(profile.id)
        return {
            "view": self.name,
            "profile": profile.to_dict(),
            "employee": employee.to_dict() if employee else None,
            "my_stores": [s.to_dict() for s in container.employee_service.list_assigned_stores(profile.id)],
            "networks": container.store_service.available_networks(),
            "suggested_network": container.employee_service.suggested_network(profile.id),
            "duty_state": attendance.duty_state(profile.id).value,
            "current_session": current.to_dict() if current else None,
            "elapsed": attendance.elapsed_label(profile.id, now=now),
            "history": [s.to_dict() for s in attendance.history(profile.id)],
            "shifts": [s.to_dict() for s in container.shift_service.list_for_employee(profile.id)],
        }


_PORTALS: dict[Role, Portal] = {Role.SUPER_ADMIN: AdminPortal()}
_DEFAULT_PORTAL: Portal = EmployeePortal()


def portal_for(role: Role) -> Portal:
    return _PORTALS.get(role, _DEFAULT_PORTAL)
