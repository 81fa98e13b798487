"""Integration tests for Unit of Work."""

from decimal import Decimal

import pytest

from opinion_trading.domain.trading import Trade
from opinion_trading.infrastructure.persistence.sqlalchemy.unit_of_work import (
    SQLAlchemyUnitOfWork,
)


def _trade() -> Trade:
    return Trade.place(user_id=1, event_id=10, option_id=101, amount=Decimal("100"))


class TestUnitOfWork:
    """Integration tests для Unit of Work pattern."""

    async def test_commit_transaction(self, session_factory):
        """Test successful transaction commit."""
        # Arrange
        uow = SQLAlchemyUnitOfWork(session_factory)

        # Act
        async with uow:
            trade = _trade()
            await uow.trades.save(trade)
            await uow.commit()

        # Assert: Verify trade збережено
        async with uow:
            saved_trade = await uow.trades.get_by_id(trade.id)
            assert saved_trade is not None
            assert saved_trade.amount == Decimal("100")

    async def test_rollback_on_exception(self, session_factory):
        """Test automatic rollback при exception."""
        # Arrange
        uow = SQLAlchemyUnitOfWork(session_factory)

        # Act & Assert
        with pytest.raises(ValueError):
            async with uow:
                trade = _trade()
                await uow.trades.save(trade)
                raise ValueError("Simulated error")

        # Assert: trade не збережено
        async with uow:
            assert await uow.trades.get_by_id(trade.id) is None

    async def test_uncommitted_changes_discarded(self, session_factory, create_user):
        """Test: без commit() зміни відкидаються при виході."""
        user = await create_user(balance=Decimal("1000"))
        uow = SQLAlchemyUnitOfWork(session_factory)

        async with uow:
            await uow.users.debit_if_sufficient(user.id, Decimal("500"))

        async with uow:
            assert (await uow.users.get_by_id(user.id)).balance == Decimal("1000")

    async def test_debit_and_trade_in_one_transaction(self, session_factory, create_user):
        """Test: debit + INSERT trade commit разом."""
        user = await create_user(balance=Decimal("1000"))
        uow = SQLAlchemyUnitOfWork(session_factory)

        async with uow:
            assert await uow.users.debit_if_sufficient(user.id, Decimal("100"))
            trade = Trade.place(user_id=user.id, event_id=10, option_id=101, amount=Decimal("100"))
            await uow.trades.save(trade)
            await uow.commit()

        async with uow:
            assert (await uow.users.get_by_id(user.id)).balance == Decimal("900")
            assert [t.id for t in await uow.trades.list_by_user(user.id)] == [trade.id]

    async def test_repositories_require_context(self, session_factory):
        """Test: repositories доступні тільки всередині async with."""
        uow = SQLAlchemyUnitOfWork(session_factory)

        with pytest.raises(RuntimeError):
            uow.trades
