from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class UserProfile:
    """The operator behind the current login, stored into the Flask session."""

    id: str
    name: str
    email: str
    role: Role
    avatar_url: str
    tenant_id: str
    tenant_name: str

    @property
    def is_admin(self) -> bool:
        return self.role == Role.SUPER_ADMIN

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "role": self.role.value,
            "avatar_url": self.avatar_url,
            "tenant_id": self.tenant_id,
            "tenant_name": self.tenant_name,
        }
