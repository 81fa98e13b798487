"""Fixtures для use case tests (handlers + real UoW на SQLite)."""

import pytest

from opinion_trading.application.events.commands import CreateEventCommand, UpdateEventCommand
from opinion_trading.application.events.handlers import CreateEventHandler, UpdateEventHandler
from opinion_trading.application.shared import KeyedLocks
from opinion_trading.domain.events import (
    EventCreatedEvent,
    EventDeletedEvent,
    EventSettledEvent,
    EventStatus,
    EventTradesSettledEvent,
    EventUpdatedEvent,
)
from opinion_trading.domain.trading import TradeCancelledEvent, TradeCreatedEvent, TradeSettledEvent


@pytest.fixture
def published(event_bus):
    """Список domain events, опублікованих через event_bus."""
    events = []

    async def collect(event):
        events.append(event)

    for event_type in (
        EventCreatedEvent,
        EventUpdatedEvent,
        EventSettledEvent,
        EventDeletedEvent,
        EventTradesSettledEvent,
        TradeCreatedEvent,
        TradeCancelledEvent,
        TradeSettledEvent,
    ):
        event_bus.subscribe(event_type, collect)
    return events


@pytest.fixture
def settlement_locks():
    return KeyedLocks()


@pytest.fixture
def create_event(uow, event_bus, sample_event_data):
    """Factory: створити event (і за потреби перевести в LIVE)."""

    async def _create(status: EventStatus = EventStatus.LIVE, options=None):
        data = dict(sample_event_data)
        if options is not None:
            data["options"] = options
        event = await CreateEventHandler(uow=uow, event_bus=event_bus).handle(
            CreateEventCommand(
                title=data["title"],
                description=data["description"],
                category=data["category"],
                start_time=data["start_time"],
                end_time=data["end_time"],
                options=tuple(data["options"]),
            )
        )
        if status != EventStatus.UPCOMING:
            event = await UpdateEventHandler(uow=uow, event_bus=event_bus).handle(
                UpdateEventCommand(event_id=event.id, status=status)
            )
        return event

    return _create
