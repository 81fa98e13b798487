"""Exceptions для Users bounded context."""

from .user_exceptions import (
    InvalidCredentialsError,
    UserAlreadyExistsError,
    UserNotFoundError,
)

__all__ = [
    "UserNotFoundError",
    "UserAlreadyExistsError",
    "InvalidCredentialsError",
]
