"""UserRepository Port - interface для persistence users і їх балансів.

Це PORT в Hexagonal Architecture (domain визначає interface).
Infrastructure layer має implement цей interface.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional

from ..entities import User


class UserRepository(ABC):
    """Abstract interface для user persistence (Ledger Store).

    Balance operations atomic на рівні store:
    - update_balance: balance = balance + delta (без read-modify-write)
    - debit_if_sufficient: balance = balance - amount WHERE balance >= amount

    Example:
        >>> debited = await uow.users.debit_if_sufficient(user_id=1, amount=Decimal("200"))
        >>> if not debited:
        ...     raise InsufficientBalanceError(...)
    """

    @abstractmethod
    async def save(self, user: User) -> None:
        """Save або update user profile.

        Note:
            Якщо user.id is None, це INSERT (ID присвоюється entity).
            UPDATE не чіпає balance - balance змінюється тільки через
            update_balance / debit_if_sufficient.
        """
        pass

    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID (fresh read, не з identity map)."""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email (case-insensitive)."""
        pass

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username."""
        pass

    @abstractmethod
    async def update_balance(self, user_id: int, delta: Decimal) -> Optional[User]:
        """Atomically add signed delta to user's balance.

        Args:
            user_id: User ID.
            delta: Signed amount (negative = debit).

        Returns:
            Updated user або None якщо user не існує.
        """
        pass

    @abstractmethod
    async def debit_if_sufficient(self, user_id: int, amount: Decimal) -> bool:
        """Atomically debit amount only if balance covers it.

        Args:
            user_id: User ID.
            amount: Positive amount to debit.

        Returns:
            True якщо debit застосовано, False якщо balance < amount
            (або user зник).
        """
        pass
