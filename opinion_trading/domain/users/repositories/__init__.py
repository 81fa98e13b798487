"""Repository ports (interfaces) для Users bounded context."""

from .user_repository import UserRepository

__all__ = ["UserRepository"]
