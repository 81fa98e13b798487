"""User DTOs - data transfer objects for API responses."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from opinion_trading.domain.users import User


@dataclass
class UserDTO:
    """User data transfer object (без password hash)."""

    id: int
    username: str
    email: str
    balance: Decimal
    role: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserDTO":
        return cls(
            id=user.id or 0,
            username=user.username,
            email=user.email,
            balance=user.balance,
            role=user.role.value,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


@dataclass
class AuthResultDTO:
    """Результат register/login: профіль + access token."""

    user: UserDTO
    token: str
