from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Operator/employee roles. Values are the labels shown in the roster."""

    SUPER_ADMIN = "Super Administrator"
    STORE_MANAGER = "Store Manager"
    ASSISTANT_MANAGER = "Assistant Manager"
    AUDITOR = "Auditor"


class LoginChoice(str, Enum):
    """The two entry points offered on the login screen."""

    ADMIN = "ADMIN"
    EMPLOYEE = "EMPLOYEE"


class EventType(str, Enum):
    ENTRY = "ENTRY"
    HEARTBEAT = "HEARTBEAT"
    EXIT = "EXIT"


class ShiftStatus(str, Enum):
    SCHEDULED = "SCHEDULED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class DutyState(str, Enum):
    OFF_DUTY = "OFF_DUTY"
    ON_DUTY = "ON_DUTY"


class DeniedReason(str, Enum):
    """Why a presence signal was not accepted as proof of being on-site."""

    NOT_ON_AUTHORIZED_NETWORK = "NOT_ON_AUTHORIZED_NETWORK"


class SessionStatus(str, Enum):
    """Status labels used by the attendance export."""

    COMPLETED = "Completed"
    ACTIVE = "Active / On-Site"
