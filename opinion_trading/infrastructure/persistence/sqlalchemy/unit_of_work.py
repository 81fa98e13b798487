"""SQLAlchemy Unit of Work implementation."""

import logging
from types import TracebackType
from typing import Optional, Type

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from opinion_trading.application.shared import UnitOfWork
from opinion_trading.domain.events.repositories import EventRepository
from opinion_trading.domain.trading.repositories import TradeRepository
from opinion_trading.domain.users.repositories import UserRepository
from opinion_trading.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyEventRepository,
    SQLAlchemyTradeRepository,
    SQLAlchemyUserRepository,
)

logger = logging.getLogger(__name__)

_NOT_STARTED = "Unit of Work not started (use async with)"


class SQLAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of Unit of Work pattern.

    Відповідальності:
    - Керування SQLAlchemy async session
    - Transaction management (commit/rollback)
    - Automatic rollback при exceptions
    - Lazy initialization of repositories

    Example:
        >>> uow = SQLAlchemyUnitOfWork(session_factory)
        >>> async with uow:
        ...     if not await uow.users.debit_if_sufficient(user_id, amount):
        ...         raise InsufficientBalanceError("Insufficient balance")
        ...     trade = Trade.place(user_id, event_id, option_id, amount)
        ...     await uow.trades.save(trade)
        ...     await uow.commit()  # Single commit!
    """

    def __init__(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> None:
        """Initialize Unit of Work.

        Args:
            session_factory: SQLAlchemy async session factory.
        """
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None

        # Repository instances (lazy initialized)
        self._users: Optional[UserRepository] = None
        self._events: Optional[EventRepository] = None
        self._trades: Optional[TradeRepository] = None

    async def __aenter__(self) -> "SQLAlchemyUnitOfWork":
        """Enter async context manager.

        Creates new SQLAlchemy session (transaction auto-begins).
        """
        self._session = self._session_factory()
        logger.debug("unit_of_work.started")
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        """Exit async context manager.

        Note:
            - Якщо exc_type не None → rollback
            - Завжди закриває session (незакомічене відкидається)
        """
        try:
            if exc_type is not None:
                await self.rollback()
                logger.warning(
                    "unit_of_work.rolled_back",
                    extra={"exception_type": exc_type.__name__},
                )
        finally:
            if self._session:
                await self._session.close()
                self._session = None
                self._users = None
                self._events = None
                self._trades = None

            logger.debug("unit_of_work.closed")

    async def commit(self) -> None:
        """Commit transaction.

        Raises:
            Exception: If commit failed (DB error, constraint violation, etc.).
        """
        session = self._require_session()

        try:
            await session.commit()
            logger.debug("unit_of_work.committed")
        except Exception as e:
            logger.error(
                "unit_of_work.commit_failed", extra={"error": str(e)}
            )
            await self.rollback()
            raise

    async def rollback(self) -> None:
        """Rollback transaction."""
        await self._require_session().rollback()
        logger.debug("unit_of_work.rollback")

    @property
    def users(self) -> UserRepository:
        """Get UserRepository instance (lazy)."""
        session = self._require_session()
        if self._users is None:
            self._users = SQLAlchemyUserRepository(session)
        return self._users

    @property
    def events(self) -> EventRepository:
        """Get EventRepository instance (lazy)."""
        session = self._require_session()
        if self._events is None:
            self._events = SQLAlchemyEventRepository(session)
        return self._events

    @property
    def trades(self) -> TradeRepository:
        """Get TradeRepository instance (lazy)."""
        session = self._require_session()
        if self._trades is None:
            self._trades = SQLAlchemyTradeRepository(session)
        return self._trades

    def _require_session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError(_NOT_STARTED)
        return self._session


# Factory function для dependency injection
def create_unit_of_work(
    session_factory: async_sessionmaker[AsyncSession],
) -> SQLAlchemyUnitOfWork:
    """Factory для створення Unit of Work.

    Example:
        >>> engine = build_engine(settings)
        >>> uow = create_unit_of_work(create_session_factory(engine))
    """
    return SQLAlchemyUnitOfWork(session_factory)
