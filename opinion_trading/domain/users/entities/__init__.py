"""Entities для Users bounded context."""

from .user import User

__all__ = ["User"]
