"""Events query handlers (read-only)."""

from opinion_trading.application.events.dtos import EventDTO
from opinion_trading.application.events.queries import (
    GetEventQuery,
    ListEventsByCategoryQuery,
    ListEventsQuery,
)
from opinion_trading.application.shared import QueryHandler, UnitOfWork
from opinion_trading.domain.events import EventNotFoundError


class GetEventHandler(QueryHandler[GetEventQuery, EventDTO]):
    """Handler для GetEvent query."""

    def __init__(self, uow: UnitOfWork) -> None:
        self.uow = uow

    async def handle(self, query: GetEventQuery) -> EventDTO:
        """Raises EventNotFoundError якщо event не існує."""
        async with self.uow:
            event = await self.uow.events.get_by_id(query.event_id)

        if event is None:
            raise EventNotFoundError("Event not found", event_id=query.event_id)
        return EventDTO.from_entity(event)


class ListEventsHandler(QueryHandler[ListEventsQuery, list[EventDTO]]):
    def __init__(self, uow: UnitOfWork) -> None:
        self.uow = uow

    async def handle(self, query: ListEventsQuery) -> list[EventDTO]:
        async with self.uow:
            events = await self.uow.events.list_all()
        return [EventDTO.from_entity(e) for e in events]


class ListEventsByCategoryHandler(QueryHandler[ListEventsByCategoryQuery, list[EventDTO]]):
    def __init__(self, uow: UnitOfWork) -> None:
        self.uow = uow

    async def handle(self, query: ListEventsByCategoryQuery) -> list[EventDTO]:
        async with self.uow:
            events = await self.uow.events.list_by_category(query.category)
        return [EventDTO.from_entity(e) for e in events]
