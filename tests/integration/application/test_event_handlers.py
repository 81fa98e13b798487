"""Tests для event lifecycle use cases."""

import logging
from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from opinion_trading.application.events.commands import (
    DeleteEventCommand,
    FetchExternalEventsCommand,
    SettleEventCommand,
    UpdateEventCommand,
)
from opinion_trading.application.events.handlers import (
    DeleteEventHandler,
    FetchExternalEventsHandler,
    GetEventHandler,
    ListEventsByCategoryHandler,
    ListEventsHandler,
    SettleEventHandler,
    UpdateEventHandler,
)
from opinion_trading.application.events.queries import (
    GetEventQuery,
    ListEventsByCategoryQuery,
    ListEventsQuery,
)
from opinion_trading.application.trading.commands import CreateTradeCommand
from opinion_trading.application.trading.handlers import CreateTradeHandler
from opinion_trading.domain.events import (
    EventCreatedEvent,
    EventDeletedEvent,
    EventNotFoundError,
    EventNotSettleableError,
    EventSettledEvent,
    EventStatus,
    EventUpdatedEvent,
    ExternalFeedError,
    InvalidEventStateError,
)
from opinion_trading.infrastructure.feeds import StaticEventFeed


class TestCreateAndUpdateEvent:

    async def test_create_event_upcoming(self, uow, create_event, published):
        """Test: новий event в UPCOMING, options отримали IDs."""
        event = await create_event(status=EventStatus.UPCOMING)

        assert event.status == "upcoming"
        assert [o.name for o in event.options] == ["Chiefs Win", "Ravens Win"]
        assert all(o.id > 0 for o in event.options)
        assert all(o.result is None for o in event.options)
        created = [e for e in published if isinstance(e, EventCreatedEvent)]
        assert [e.event_id for e in created] == [event.id]

    async def test_status_moves_forward(self, uow, event_bus, create_event, published):
        event = await create_event(status=EventStatus.UPCOMING)
        handler = UpdateEventHandler(uow=uow, event_bus=event_bus)

        live = await handler.handle(UpdateEventCommand(event_id=event.id, status=EventStatus.LIVE))
        closed = await handler.handle(UpdateEventCommand(event_id=event.id, status=EventStatus.CLOSED))

        assert live.status == "live"
        assert closed.status == "closed"
        updates = [e for e in published if isinstance(e, EventUpdatedEvent)]
        assert [e.status for e in updates] == ["live", "closed"]

    async def test_backward_transition_rejected(self, uow, event_bus, create_event):
        event = await create_event(status=EventStatus.LIVE)

        with pytest.raises(InvalidEventStateError):
            await UpdateEventHandler(uow=uow, event_bus=event_bus).handle(
                UpdateEventCommand(event_id=event.id, status=EventStatus.UPCOMING)
            )

    async def test_update_cannot_settle(self, uow, event_bus, create_event):
        """Test: SETTLED тільки через settlement."""
        event = await create_event(status=EventStatus.LIVE)

        with pytest.raises(InvalidEventStateError):
            await UpdateEventHandler(uow=uow, event_bus=event_bus).handle(
                UpdateEventCommand(event_id=event.id, status=EventStatus.SETTLED)
            )

    async def test_failed_update_leaves_event_unchanged(self, uow, event_bus, create_event):
        """Test: update атомарний - title не змінюється якщо status невалідний."""
        event = await create_event(status=EventStatus.LIVE)

        with pytest.raises(InvalidEventStateError):
            await UpdateEventHandler(uow=uow, event_bus=event_bus).handle(
                UpdateEventCommand(event_id=event.id, title="Renamed", status=EventStatus.UPCOMING)
            )

        stored = await GetEventHandler(uow=uow).handle(GetEventQuery(event_id=event.id))
        assert stored.title == "NFL: Chiefs vs. Ravens"
        assert stored.status == "live"

    async def test_replace_options_while_upcoming(self, uow, event_bus, create_event):
        event = await create_event(status=EventStatus.UPCOMING)

        updated = await UpdateEventHandler(uow=uow, event_bus=event_bus).handle(
            UpdateEventCommand(
                event_id=event.id,
                options=(("Chiefs Win", Decimal("1.70")), ("Draw", Decimal("9.0")), ("Ravens Win", Decimal("2.05"))),
            )
        )

        assert [o.name for o in updated.options] == ["Chiefs Win", "Draw", "Ravens Win"]
        assert all(o.id > 0 for o in updated.options)

    async def test_options_locked_after_upcoming(self, uow, event_bus, create_event):
        event = await create_event(status=EventStatus.LIVE)

        with pytest.raises(InvalidEventStateError):
            await UpdateEventHandler(uow=uow, event_bus=event_bus).handle(
                UpdateEventCommand(event_id=event.id, options=(("Only", Decimal("1.5")),))
            )

    async def test_update_unknown_event(self, uow, event_bus):
        with pytest.raises(EventNotFoundError):
            await UpdateEventHandler(uow=uow, event_bus=event_bus).handle(
                UpdateEventCommand(event_id=999, title="Ghost")
            )


class TestSettleEvent:
    """Tests для SettleEventHandler (results only, гроші не рухаються)."""

    async def test_settle_marks_results(self, uow, event_bus, settlement_locks, create_event, published):
        event = await create_event(status=EventStatus.CLOSED)
        ravens = event.options[1].id

        settled = await SettleEventHandler(uow=uow, event_bus=event_bus, settlement_locks=settlement_locks).handle(
            SettleEventCommand(event_id=event.id, winning_option_id=ravens)
        )

        assert settled.status == "settled"
        assert settled.settled_at is not None
        assert [o.result for o in settled.options] == [False, True]
        settled_events = [e for e in published if isinstance(e, EventSettledEvent)]
        assert settled_events[0].winning_option_id == ravens

    async def test_settle_does_not_pay(self, uow, event_bus, settlement_locks, create_user, create_event):
        user = await create_user()
        event = await create_event()
        chiefs = event.options[0].id
        await CreateTradeHandler(uow=uow, event_bus=event_bus).handle(
            CreateTradeCommand(user_id=user.id, event_id=event.id, option_id=chiefs, amount=Decimal("200"))
        )

        await SettleEventHandler(uow=uow, event_bus=event_bus, settlement_locks=settlement_locks).handle(
            SettleEventCommand(event_id=event.id, winning_option_id=chiefs)
        )

        async with uow:
            assert (await uow.users.get_by_id(user.id)).balance == Decimal("800")
            [trade] = await uow.trades.list_by_event(event.id)
        assert trade.is_executed

    async def test_settle_twice_rejected(self, uow, event_bus, settlement_locks, create_event):
        event = await create_event()
        handler = SettleEventHandler(uow=uow, event_bus=event_bus, settlement_locks=settlement_locks)
        command = SettleEventCommand(event_id=event.id, winning_option_id=event.options[0].id)
        await handler.handle(command)

        with pytest.raises(EventNotSettleableError):
            await handler.handle(command)

    async def test_settled_event_is_frozen(self, uow, event_bus, settlement_locks, create_event):
        event = await create_event()
        await SettleEventHandler(uow=uow, event_bus=event_bus, settlement_locks=settlement_locks).handle(
            SettleEventCommand(event_id=event.id, winning_option_id=event.options[0].id)
        )

        with pytest.raises(InvalidEventStateError):
            await UpdateEventHandler(uow=uow, event_bus=event_bus).handle(
                UpdateEventCommand(event_id=event.id, title="Rematch")
            )


class TestDeleteEvent:

    async def test_delete_keeps_trades(self, uow, event_bus, create_user, create_event, published):
        """Test: trades зберігаються після видалення event."""
        user = await create_user()
        event = await create_event()
        await CreateTradeHandler(uow=uow, event_bus=event_bus).handle(
            CreateTradeCommand(user_id=user.id, event_id=event.id, option_id=event.options[0].id, amount=Decimal("10"))
        )

        await DeleteEventHandler(uow=uow, event_bus=event_bus).handle(DeleteEventCommand(event_id=event.id))

        with pytest.raises(EventNotFoundError):
            await GetEventHandler(uow=uow).handle(GetEventQuery(event_id=event.id))
        async with uow:
            assert len(await uow.trades.list_by_user(user.id)) == 1
        assert [e.event_id for e in published if isinstance(e, EventDeletedEvent)] == [event.id]

    async def test_delete_unknown_event(self, uow, event_bus):
        with pytest.raises(EventNotFoundError):
            await DeleteEventHandler(uow=uow, event_bus=event_bus).handle(DeleteEventCommand(event_id=999))


class TestEventQueries:

    async def test_list_and_filter_by_category(self, uow, create_event):
        first = await create_event(status=EventStatus.UPCOMING)
        second = await create_event(status=EventStatus.LIVE)

        everything = await ListEventsHandler(uow=uow).handle(ListEventsQuery())
        football = await ListEventsByCategoryHandler(uow=uow).handle(ListEventsByCategoryQuery(category="Football"))
        chess = await ListEventsByCategoryHandler(uow=uow).handle(ListEventsByCategoryQuery(category="Chess"))

        assert {e.id for e in everything} == {first.id, second.id}
        assert {e.id for e in football} == {first.id, second.id}
        assert chess == []


class TestFetchExternalEvents:
    """Tests для ingestion з external feed."""

    @pytest.fixture
    def fixed_clock(self):
        return lambda: datetime(2026, 9, 1, 12, 0, tzinfo=timezone.utc)

    async def test_ingestion_creates_upcoming_events(self, uow, event_bus, fixed_clock, published):
        handler = FetchExternalEventsHandler(uow=uow, event_bus=event_bus, feed=StaticEventFeed(clock=fixed_clock))

        created = await handler.handle(FetchExternalEventsCommand())

        assert created == 4
        events = await ListEventsHandler(uow=uow).handle(ListEventsQuery())
        assert {e.category for e in events} == {"Football", "Basketball", "Politics", "Cryptocurrency"}
        assert all(e.status == "upcoming" for e in events)
        assert len([e for e in published if isinstance(e, EventCreatedEvent)]) == 4

    async def test_ingestion_skips_existing_titles(self, uow, event_bus, fixed_clock):
        """Test: повторний fetch не дублює events."""
        handler = FetchExternalEventsHandler(uow=uow, event_bus=event_bus, feed=StaticEventFeed(clock=fixed_clock))
        await handler.handle(FetchExternalEventsCommand())

        assert await handler.handle(FetchExternalEventsCommand()) == 0
        assert len(await ListEventsHandler(uow=uow).handle(ListEventsQuery())) == 4

    async def test_feed_failure_returns_zero(self, uow, event_bus):
        feed = AsyncMock()
        feed.fetch_events.side_effect = ExternalFeedError("feed down")
        handler = FetchExternalEventsHandler(uow=uow, event_bus=event_bus, feed=feed)

        assert await handler.handle(FetchExternalEventsCommand()) == 0
        assert await ListEventsHandler(uow=uow).handle(ListEventsQuery()) == []

    async def test_ingestion_with_info_logging(self, uow, event_bus, fixed_clock, caplog):
        """Test: з INFO logging completion record не ламає ingestion."""
        caplog.set_level(logging.INFO)
        handler = FetchExternalEventsHandler(uow=uow, event_bus=event_bus, feed=StaticEventFeed(clock=fixed_clock))

        created = await handler.handle(FetchExternalEventsCommand())

        assert created == 4
        [record] = [r for r in caplog.records if r.getMessage() == "fetch_external_events.completed"]
        assert record.created_count == 4
        assert record.fetched_count == 4
