"""User Aggregate Root - трейдер або адміністратор з балансом."""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from opinion_trading.domain.shared import AggregateRoot, ValidationFailure

from ..value_objects import UserRole


class User(AggregateRoot):
    """User Aggregate Root.

    Правила:
    - Balance змінюється ТІЛЬКИ через Trading Engine (debit при створенні
      trade, credit при cancel/settlement), і завжди atomic increment в
      store, не read-modify-write в пам'яті
    - Store сам не перевіряє balance >= 0, overdraft блокується
      conditional debit при створенні trade
    - Users ніколи не видаляються

    Example:
        >>> user = User.register(
        ...     username="alice",
        ...     email="alice@example.com",
        ...     password_hash=hasher.hash("secret"),
        ...     starting_balance=Decimal("1000"),
        ... )
        >>> user.role
        <UserRole.USER: 'user'>
    """

    def __init__(
        self,
        username: str,
        email: str,
        password_hash: str,
        balance: Decimal,
        role: UserRole = UserRole.USER,
        id: Optional[int] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ) -> None:
        """Initialize user.

        Args:
            username: Display name (unique).
            email: Email (unique, used for login).
            password_hash: Password hash (opaque для domain).
            balance: Current balance.
            role: USER або ADMIN.
            id: User ID (None для нових).
            created_at: Creation timestamp.
            updated_at: Last update timestamp.
        """
        super().__init__(id)

        if not username or not username.strip():
            raise ValidationFailure("Username is required")
        if not email or "@" not in email:
            raise ValidationFailure("Valid email is required", email=email)

        self.username = username.strip()
        self.email = email.strip().lower()
        self.password_hash = password_hash
        self.balance = balance
        self.role = role

        now = datetime.now(timezone.utc)
        self.created_at = created_at or now
        self.updated_at = updated_at or now

    @classmethod
    def register(
        cls,
        username: str,
        email: str,
        password_hash: str,
        starting_balance: Decimal,
    ) -> "User":
        """Factory method для реєстрації нового користувача.

        Нові користувачі завжди мають role USER; адміністратори
        призначаються поза API.

        Returns:
            User без ID (ще не збережений).
        """
        return cls(
            username=username,
            email=email,
            password_hash=password_hash,
            balance=starting_balance,
            role=UserRole.USER,
        )

    def change_password_hash(self, password_hash: str) -> None:
        """Replace password hash (old password already verified by handler)."""
        self.password_hash = password_hash
        self.updated_at = datetime.now(timezone.utc)

    def can_afford(self, amount: Decimal) -> bool:
        """Check if balance covers the stake."""
        return self.balance >= amount

    @property
    def is_admin(self) -> bool:
        """Check if user є адміністратором."""
        return self.role == UserRole.ADMIN

    def __repr__(self) -> str:
        return (
            f"User(id={self.id}, username={self.username}, "
            f"role={self.role.value}, balance={self.balance})"
        )
