"""SQLAlchemy implementation of TradeRepository."""

from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from opinion_trading.domain.trading import Trade, TradeStatus
from opinion_trading.domain.trading.repositories import TradeRepository as TradeRepositoryPort
from opinion_trading.infrastructure.persistence.sqlalchemy.mappers import TradeMapper
from opinion_trading.infrastructure.persistence.sqlalchemy.models import TradeModel


class SQLAlchemyTradeRepository(TradeRepositoryPort):
    """SQLAlchemy implementation of TradeRepository port.

    Використовує:
    - AsyncSession для async DB operations
    - TradeMapper для Domain ↔ ORM conversion
    - Conditional UPDATE для status transitions (compare-and-set)

    Example:
        >>> async with AsyncSession(engine) as session:
        ...     repo = SQLAlchemyTradeRepository(session)
        ...     trade = await repo.get_by_id(123)
        ...     trade.cancel()
        ...     applied = await repo.save_transition(trade, TradeStatus.EXECUTED)
        ...     await session.commit()
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session
        self._mapper = TradeMapper()

    async def save(self, trade: Trade) -> None:
        """Save або update trade.

        Note:
            - Якщо trade.id is None → INSERT
            - Якщо trade.id exists → UPDATE (version increment)
        """
        if trade.id is None:
            model = self._mapper.to_model(trade)
            self._session.add(model)
            await self._session.flush()  # Get generated ID
            trade.id = model.id
        else:
            existing_model = await self._session.get(TradeModel, trade.id)
            if existing_model is None:
                raise ValueError(f"Trade {trade.id} not found for update")

            self._mapper.update_model_from_entity(existing_model, trade)
            await self._session.flush()

    async def save_transition(self, trade: Trade, from_status: TradeStatus) -> bool:
        """UPDATE trades SET ... WHERE id = :id AND status = :from_status."""
        if trade.id is None:
            raise ValueError("Trade must be saved before status transition")

        stmt = (
            update(TradeModel)
            .where(TradeModel.id == trade.id)
            .where(TradeModel.status == from_status.value)
            .values(
                **self._mapper.transition_values(trade),
                version=TradeModel.version + 1,
            )
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return result.rowcount == 1

    async def get_by_id(self, trade_id: int) -> Optional[Trade]:
        stmt = (
            select(TradeModel)
            .where(TradeModel.id == trade_id)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._mapper.to_entity(model) if model else None

    async def list_all(self) -> list[Trade]:
        stmt = select(TradeModel).order_by(TradeModel.created_at.desc(), TradeModel.id.desc())
        return await self._fetch(stmt)

    async def list_by_user(self, user_id: int) -> list[Trade]:
        stmt = (
            select(TradeModel)
            .where(TradeModel.user_id == user_id)
            .order_by(TradeModel.created_at.desc(), TradeModel.id.desc())
        )
        return await self._fetch(stmt)

    async def list_by_event(
        self,
        event_id: int,
        status: Optional[TradeStatus] = None,
    ) -> list[Trade]:
        """List trades event (oldest first - settlement order)."""
        stmt = select(TradeModel).where(TradeModel.event_id == event_id)
        if status is not None:
            stmt = stmt.where(TradeModel.status == status.value)
        stmt = stmt.order_by(TradeModel.created_at.asc(), TradeModel.id.asc())
        return await self._fetch(stmt)

    async def _fetch(self, stmt) -> list[Trade]:
        result = await self._session.execute(stmt.execution_options(populate_existing=True))
        return [self._mapper.to_entity(model) for model in result.scalars().all()]
