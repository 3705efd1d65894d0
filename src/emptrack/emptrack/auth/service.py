from __future__ import annotations

import logging
import threading
from typing import Optional, Union

from ..core.constants import DEFAULT_EMPLOYEE_LOGIN_ID
from ..core.enums import LoginChoice
from ..core.exceptions import AuthenticationError, ValidationError
from ..employees.service import EmployeeService
from ..presence.feed import LiveFeedSimulator
from .model import UserProfile

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: role-toggle login (no credentials) and logout.

    The live feed runs while at least one login is active.
    """

    def __init__(
        self,
        employees: EmployeeService,
        admin_profile: UserProfile,
        *,
        feed: Optional[LiveFeedSimulator] = None,
        default_employee_id: str = DEFAULT_EMPLOYEE_LOGIN_ID,
    ):
        self._employees = employees
        self._admin = admin_profile
        self._feed = feed
        self._default_employee_id = default_employee_id
        self._lock = threading.Lock()
        self._active_logins = 0

    @property
    def active_logins(self) -> int:
        return self._active_logins

    def login(self, choice: Union[LoginChoice, str, None], employee_id: Optional[str] = None) -> UserProfile:
        try:
            choice = LoginChoice(str(choice).upper()) if not isinstance(choice, LoginChoice) else choice
        except ValueError:
            raise AuthenticationError("Choose either the admin or the employee portal") from None

        if choice == LoginChoice.ADMIN:
            profile = self._admin
        else:
            profile = self._employee_profile(employee_id or self._default_employee_id)

        with self._lock:
            self._active_logins += 1
            if self._feed is not None:
                self._feed.start()

        logger.info("%s signed in as %s", profile.id, profile.role.value)
        return profile

    def logout(self) -> None:
        with self._lock:
            if self._active_logins == 0:
                return
            self._active_logins -= 1
            if self._active_logins == 0 and self._feed is not None:
                self._feed.stop()
        logger.info("Signed out (%d session(s) remain)", self._active_logins)

    def shutdown(self) -> None:
        """Stop background work regardless of outstanding logins."""
        with self._lock:
            self._active_logins = 0
            if self._feed is not None:
                self._feed.stop()

    def _employee_profile(self, employee_id: str) -> UserProfile:
        try:
            employee = self._employees.get_employee(employee_id)
        except ValidationError:
            raise AuthenticationError("No employee profile matches this login") from None

        return UserProfile(
            id=employee.id,
            name=employee.name,
            email=employee.email,
            role=employee.role,
            avatar_url=employee.avatar_url,
            tenant_id=self._admin.tenant_id,
            tenant_name=self._admin.tenant_name,
        )
