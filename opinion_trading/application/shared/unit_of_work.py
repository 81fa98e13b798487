"""Unit of Work pattern - manages transactions.

UnitOfWork забезпечує:
- Atomic operations (all or nothing)
- Transaction boundary
- Single commit per use case
"""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Optional, Type

from opinion_trading.domain.events.repositories import EventRepository
from opinion_trading.domain.trading.repositories import TradeRepository
from opinion_trading.domain.users.repositories import UserRepository


class UnitOfWork(ABC):
    """Abstract Unit of Work interface.

    Всі repositories всередині одного `async with` ділять одну транзакцію,
    тому "debit user AND persist trade" або "credit winners AND settle
    trades AND settle event" або застосовуються разом, або не застосовуються.

    Example:
        >>> async with uow:
        ...     debited = await uow.users.debit_if_sufficient(user_id, amount)
        ...     trade = Trade.place(user_id, event_id, option_id, amount)
        ...     await uow.trades.save(trade)
        ...     await uow.commit()  # Single commit for entire operation
    """

    @abstractmethod
    async def __aenter__(self) -> "UnitOfWork":
        """Enter async context manager.

        Returns:
            Self (UnitOfWork instance).
        """
        pass

    @abstractmethod
    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        """Exit async context manager.

        Note:
            Якщо exc_type не None, має викликати rollback().
            Незакомічені зміни відкидаються в будь-якому разі.
        """
        pass

    @abstractmethod
    async def commit(self) -> None:
        """Commit transaction."""
        pass

    @abstractmethod
    async def rollback(self) -> None:
        """Rollback transaction."""
        pass

    @property
    @abstractmethod
    def users(self) -> UserRepository:
        """User (Ledger) repository."""
        pass

    @property
    @abstractmethod
    def events(self) -> EventRepository:
        """Event repository."""
        pass

    @property
    @abstractmethod
    def trades(self) -> TradeRepository:
        """Trade repository."""
        pass
