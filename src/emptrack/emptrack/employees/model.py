from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class Employee:
    """Domain entity: a staff member and the stores they may clock in at.

    ``assigned_store_ids`` is not checked against the registry; ids of
    deleted stores simply resolve to nothing.
    """

    id: str
    name: str
    email: str
    role: Role
    assigned_store_ids: tuple[str, ...] = ()
    avatar_url: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "role": self.role.value,
            "assigned_store_ids": list(self.assigned_store_ids),
            "avatar_url": self.avatar_url,
        }
