"""Value objects для Users bounded context."""

from .enums import UserRole

__all__ = ["UserRole"]
