"""Authorization - один predicate для всіх routes.

Routes викликають `enforce(principal, policy, owner_id)` ДО handler,
core сам authorization не робить. /ws перевіряє rooms через `can_join_room`.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from fastapi import HTTPException, status

from opinion_trading.domain.notifications import is_user_room, room_owner_id
from opinion_trading.domain.users import UserRole


class AccessPolicy(str, Enum):
    """Хто має доступ до resource."""

    AUTHENTICATED = "authenticated"
    OWNER_OR_ADMIN = "owner_or_admin"
    ADMIN_ONLY = "admin_only"


@dataclass(frozen=True)
class Principal:
    """Verified caller (з JWT)."""

    user_id: int
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


def authorize(
    principal: Principal,
    policy: AccessPolicy,
    owner_id: Optional[int] = None,
) -> bool:
    """Check principal against policy.

    Args:
        principal: Authenticated caller.
        policy: Required access level.
        owner_id: Owner of the resource (OWNER_OR_ADMIN only).

    Example:
        >>> authorize(Principal(5, UserRole.USER), AccessPolicy.OWNER_OR_ADMIN, owner_id=5)
        True
        >>> authorize(Principal(5, UserRole.USER), AccessPolicy.ADMIN_ONLY)
        False
    """
    if policy == AccessPolicy.AUTHENTICATED:
        return True
    if principal.is_admin:
        return True
    if policy == AccessPolicy.OWNER_OR_ADMIN:
        return owner_id is not None and owner_id == principal.user_id
    return False


def enforce(
    principal: Principal,
    policy: AccessPolicy,
    owner_id: Optional[int] = None,
) -> None:
    """authorize() або 403."""
    if not authorize(principal, policy, owner_id):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail={"error": "Forbidden", "message": "Access denied"},
        )


def can_join_room(principal: Optional[Principal], room: str) -> bool:
    """WebSocket rooms: "user-<id>" тільки власнику або admin, решта публічні.

    Example:
        >>> can_join_room(None, "event-7")
        True
        >>> can_join_room(Principal(5, UserRole.USER), "user-6")
        False
    """
    if not is_user_room(room):
        return True
    if principal is None:
        return False
    return authorize(principal, AccessPolicy.OWNER_OR_ADMIN, owner_id=room_owner_id(room))
