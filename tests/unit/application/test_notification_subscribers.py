"""Tests для notification subscribers (domain events → notifier)."""

from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from opinion_trading.application.notifications import register_notification_handlers
from opinion_trading.domain.events import EventStatus
from opinion_trading.domain.notifications import DeliveryResult, Notifier
from opinion_trading.domain.trading import Trade
from opinion_trading.infrastructure.messaging import EventBus


@pytest.fixture
def notifier():
    mock = AsyncMock(spec=Notifier)
    mock.broadcast_to_all.return_value = DeliveryResult(delivered=1)
    mock.broadcast_to_room.return_value = DeliveryResult(delivered=1)
    return mock


@pytest.fixture
def event_bus(notifier):
    bus = EventBus()
    register_notification_handlers(bus, notifier)
    return bus


class TestEventNotifications:

    async def test_event_created_broadcast_to_all(self, event_bus, notifier, persisted_event):
        """Test: "event_created" з повним event (camelCase)."""
        persisted_event.record_created()

        await event_bus.publish_all(persisted_event.get_domain_events())

        notifier.broadcast_to_all.assert_awaited_once()
        name, payload = notifier.broadcast_to_all.await_args.args
        assert name == "event_created"
        assert payload["id"] == 10
        assert payload["status"] == "upcoming"
        assert payload["startTime"] == persisted_event.start_time.isoformat()
        assert payload["settledAt"] is None
        assert [o["id"] for o in payload["options"]] == [101, 102]

    async def test_event_settled_includes_winner(self, event_bus, notifier, persisted_event):
        """Test: "event_settled" всім, з winningOptionId."""
        persisted_event.update(status=EventStatus.LIVE)
        persisted_event.settle(102)

        await event_bus.publish_all(persisted_event.get_domain_events())

        name, payload = notifier.broadcast_to_all.await_args.args
        assert name == "event_settled"
        assert payload["winningOptionId"] == 102
        assert payload["status"] == "settled"

    async def test_trades_settled_goes_to_event_room(self, event_bus, notifier, persisted_event):
        """Test: завершення payouts → room event-<id>."""
        persisted_event.update(status=EventStatus.LIVE)
        persisted_event.complete_trade_settlement(101, settled_trades_count=2)

        await event_bus.publish_all(persisted_event.get_domain_events())

        notifier.broadcast_to_all.assert_not_awaited()
        room, name, payload = notifier.broadcast_to_room.await_args.args
        assert room == "event-10"
        assert name == "event_settled"
        assert payload["eventId"] == 10
        assert payload["winningOptionId"] == 101

    async def test_event_deleted(self, event_bus, notifier, persisted_event):
        persisted_event.mark_deleted()

        await event_bus.publish_all(persisted_event.get_domain_events())

        notifier.broadcast_to_all.assert_awaited_once_with("event_deleted", {"id": 10})


class TestTradeNotifications:

    @pytest.fixture
    def trade(self, sample_trade_data):
        trade = Trade.place(**sample_trade_data)
        trade.id = 7
        return trade

    async def test_trade_created_to_owner_and_event_rooms(self, event_bus, notifier, trade):
        """Test: owner отримує повний trade, event room - без userId."""
        trade.record_placed()

        await event_bus.publish_all(trade.get_domain_events())

        calls = notifier.broadcast_to_room.await_args_list
        assert [c.args[0] for c in calls] == ["user-1", "event-10"]
        assert all(c.args[1] == "trade_created" for c in calls)

        owner_payload = calls[0].args[2]
        assert owner_payload["userId"] == 1
        assert owner_payload["amount"] == 200.0
        assert owner_payload["status"] == "executed"

        room_payload = calls[1].args[2]
        assert "userId" not in room_payload
        assert room_payload["tradeId"] == 7

    async def test_trade_settled_to_owner_only(self, event_bus, notifier, trade):
        """Test: "trade_settled" тільки в room власника."""
        trade.settle(won=True, payout=Decimal("50"))

        await event_bus.publish_all(trade.get_domain_events())

        notifier.broadcast_to_room.assert_awaited_once()
        room, name, payload = notifier.broadcast_to_room.await_args.args
        assert room == "user-1"
        assert name == "trade_settled"
        assert payload["won"] is True
        assert payload["payout"] == 50.0
        assert payload["outcome"] == "win"

    async def test_delivery_failure_does_not_raise(self, event_bus, notifier, trade):
        """Test: failed delivery тільки логується."""
        notifier.broadcast_to_room.return_value = DeliveryResult(delivered=0, failed=2)
        trade.cancel()

        await event_bus.publish_all(trade.get_domain_events())

        assert notifier.broadcast_to_room.await_count == 2
