"""Enums для Users bounded context."""

from enum import Enum


class UserRole(str, Enum):
    """User role."""

    USER = "user"
    """Звичайний трейдер: бачить свої trades, ставить на live events."""

    ADMIN = "admin"
    """Адміністратор: керує events, settle, бачить всі trades."""
