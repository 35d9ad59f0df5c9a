"""
Role-based data scoping.

A ``farmer`` may only touch resources they own; an ``admin`` may touch
everything. Every ownership decision in the API goes through ``can_access``.
"""
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from agroflow.core.exceptions import ForbiddenError
from agroflow.models import ROLE_ADMIN, ROLE_FARMER


@dataclass(frozen=True)
class CurrentUser:
    """Caller identity decoded from the access token"""

    id: UUID
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN


def can_access(role: str, caller_id, owner_id) -> bool:
    if role == ROLE_ADMIN:
        return True
    if role != ROLE_FARMER or caller_id is None or owner_id is None:
        return False
    return str(caller_id) == str(owner_id)


def ensure_can_access(
    user: CurrentUser,
    owner_id,
    message: str = "You do not have permission to access this resource",
) -> None:
    if not can_access(user.role, user.id, owner_id):
        raise ForbiddenError(message)


def ensure_admin(user: CurrentUser, message: Optional[str] = None) -> None:
    if not user.is_admin:
        raise ForbiddenError(message or "Admin access required")
