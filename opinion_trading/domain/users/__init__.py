"""Users Bounded Context - Domain Layer.

Exports:
    Entities: User (Aggregate Root)
    Value Objects: UserRole
    Exceptions: UserNotFoundError, UserAlreadyExistsError, InvalidCredentialsError
    Repositories: UserRepository (interface)
"""

from .entities import User
from .exceptions import InvalidCredentialsError, UserAlreadyExistsError, UserNotFoundError
from .repositories import UserRepository
from .value_objects import UserRole

__all__ = [
    "User",
    "UserRole",
    "UserNotFoundError",
    "UserAlreadyExistsError",
    "InvalidCredentialsError",
    "UserRepository",
]
