from __future__ import annotations

from .enums import DeniedReason


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when a login attempt cannot be resolved to a profile."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class NetworkAccessDenied(ValidationError):
    """Raised when a clock-in is attempted from a network that proves nothing."""

    MESSAGES = {
        DeniedReason.NOT_ON_AUTHORIZED_NETWORK: (
            "Access Denied: You are not connected to an assigned store Wi-Fi network."
        ),
    }

    def __init__(self, reason: DeniedReason):
        self.reason = reason
        super().__init__(self.MESSAGES.get(reason, reason.value))
