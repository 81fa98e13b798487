"""SQLAlchemy implementation of EventRepository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from opinion_trading.domain.events import Event
from opinion_trading.domain.events.repositories import EventRepository as EventRepositoryPort
from opinion_trading.infrastructure.persistence.sqlalchemy.mappers import EventMapper
from opinion_trading.infrastructure.persistence.sqlalchemy.models import EventModel


class SQLAlchemyEventRepository(EventRepositoryPort):
    """SQLAlchemy implementation of EventRepository port.

    Використовує:
    - AsyncSession для async DB operations
    - EventMapper для Domain ↔ ORM conversion (event + options)
    - SELECT ... FOR UPDATE / FOR SHARE для serialization settlement
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session
        self._mapper = EventMapper()

    async def save(self, event: Event) -> None:
        """Save або update event разом з options.

        Note:
            - Якщо event.id is None → INSERT (event + options)
            - Якщо event.id exists → UPDATE + sync options
            Після flush IDs присвоюються event та новим options.
        """
        if event.id is None:
            model = self._mapper.to_model(event)
            self._session.add(model)
            await self._session.flush()  # Get generated IDs
            event.id = model.id
            event.assign_option_ids(option.id for option in model.options)
        else:
            existing_model = await self._session.get(EventModel, event.id)
            if existing_model is None:
                raise ValueError(f"Event {event.id} not found for update")

            ordered_options = self._mapper.update_model_from_entity(existing_model, event)
            await self._session.flush()
            event.assign_option_ids(option.id for option in ordered_options)

    async def get_by_id(self, event_id: int) -> Optional[Event]:
        stmt = (
            select(EventModel)
            .where(EventModel.id == event_id)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._mapper.to_entity(model) if model else None

    async def get_for_update(self, event_id: int, read: bool = False) -> Optional[Event]:
        """Get event з row lock (no-op на SQLite)."""
        stmt = (
            select(EventModel)
            .where(EventModel.id == event_id)
            .with_for_update(read=read)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._mapper.to_entity(model) if model else None

    async def list_all(self) -> list[Event]:
        stmt = select(EventModel).order_by(EventModel.created_at.desc(), EventModel.id.desc())
        result = await self._session.execute(stmt)
        return [self._mapper.to_entity(model) for model in result.scalars().all()]

    async def list_by_category(self, category: str) -> list[Event]:
        stmt = (
            select(EventModel)
            .where(EventModel.category == category)
            .order_by(EventModel.created_at.desc(), EventModel.id.desc())
        )
        result = await self._session.execute(stmt)
        return [self._mapper.to_entity(model) for model in result.scalars().all()]

    async def find_by_title_in_category(self, title: str, category: str) -> Optional[Event]:
        stmt = (
            select(EventModel)
            .where(EventModel.category == category)
            .where(EventModel.title == title)
            .limit(1)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._mapper.to_entity(model) if model else None

    async def delete(self, event_id: int) -> bool:
        """Delete event (options каскадяться, trades ні)."""
        model = await self._session.get(EventModel, event_id)
        if model is None:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True
