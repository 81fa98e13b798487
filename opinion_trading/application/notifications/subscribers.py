"""Notification subscribers - translate domain events to notifier calls.

Event names і payloads - публічний контракт для WebSocket clients:

| domain event             | name             | room                 |
|--------------------------|------------------|----------------------|
| EventCreatedEvent        | event_created    | all                  |
| EventUpdatedEvent        | event_updated    | all                  |
| EventSettledEvent        | event_settled    | all                  |
| EventDeletedEvent        | event_deleted    | all                  |
| TradeCreatedEvent        | trade_created    | user-<id>, event-<id>|
| TradeCancelledEvent      | trade_cancelled  | user-<id>, event-<id>|
| TradeSettledEvent        | trade_settled    | user-<id>            |
| EventTradesSettledEvent  | event_settled    | event-<id>           |
"""

import logging
from typing import Any

from opinion_trading.domain.events import (
    EventCreatedEvent,
    EventDeletedEvent,
    EventSettledEvent,
    EventTradesSettledEvent,
    EventUpdatedEvent,
)
from opinion_trading.domain.notifications import DeliveryResult, Notifier, event_room, user_room
from opinion_trading.domain.trading import (
    TradeCancelledEvent,
    TradeCreatedEvent,
    TradeSettledEvent,
)
from opinion_trading.infrastructure.messaging import EventBus

from .payloads import event_payload, trade_payload

logger = logging.getLogger(__name__)


class NotificationSubscribers:
    """Subscribers що пересилають domain events в Notifier.

    Notifier тримається як reference з constructor (без lookup на кожен
    виклик). DeliveryResult ігнорується окрім логування: notification
    failures ніколи не впливають на business operation.

    Example:
        >>> subscribers = NotificationSubscribers(notifier)
        >>> subscribers.register(event_bus)
    """

    def __init__(self, notifier: Notifier) -> None:
        self.notifier = notifier

    def register(self, event_bus: EventBus) -> None:
        """Subscribe всі handlers на event bus."""
        event_bus.subscribe(EventCreatedEvent, self.on_event_created)
        event_bus.subscribe(EventUpdatedEvent, self.on_event_updated)
        event_bus.subscribe(EventSettledEvent, self.on_event_settled)
        event_bus.subscribe(EventDeletedEvent, self.on_event_deleted)
        event_bus.subscribe(EventTradesSettledEvent, self.on_event_trades_settled)
        event_bus.subscribe(TradeCreatedEvent, self.on_trade_created)
        event_bus.subscribe(TradeCancelledEvent, self.on_trade_cancelled)
        event_bus.subscribe(TradeSettledEvent, self.on_trade_settled)

    # ==================== Events ====================

    async def on_event_created(self, event: EventCreatedEvent) -> None:
        await self._to_all("event_created", event_payload(event))

    async def on_event_updated(self, event: EventUpdatedEvent) -> None:
        await self._to_all("event_updated", event_payload(event))

    async def on_event_settled(self, event: EventSettledEvent) -> None:
        payload = event_payload(event)
        payload["winningOptionId"] = event.winning_option_id
        await self._to_all("event_settled", payload)

    async def on_event_deleted(self, event: EventDeletedEvent) -> None:
        await self._to_all("event_deleted", {"id": event.event_id})

    async def on_event_trades_settled(self, event: EventTradesSettledEvent) -> None:
        await self._to_room(
            event_room(event.event_id),
            "event_settled",
            {
                "eventId": event.event_id,
                "winningOptionId": event.winning_option_id,
                "settledAt": event.settled_at.isoformat(),
            },
        )

    # ==================== Trades ====================

    async def on_trade_created(self, event: TradeCreatedEvent) -> None:
        await self._to_room(user_room(event.user_id), "trade_created", trade_payload(event))
        # Room event без userId: інші traders не бачать хто скільки поставив
        await self._to_room(
            event_room(event.event_id),
            "trade_created",
            {
                "tradeId": event.trade_id,
                "eventId": event.event_id,
                "optionId": event.option_id,
                "amount": float(event.amount),
            },
        )

    async def on_trade_cancelled(self, event: TradeCancelledEvent) -> None:
        await self._to_room(user_room(event.user_id), "trade_cancelled", trade_payload(event))
        await self._to_room(
            event_room(event.event_id),
            "trade_cancelled",
            {"tradeId": event.trade_id, "eventId": event.event_id},
        )

    async def on_trade_settled(self, event: TradeSettledEvent) -> None:
        payload = trade_payload(event)
        payload["won"] = event.won
        payload["payout"] = float(event.payout)
        await self._to_room(user_room(event.user_id), "trade_settled", payload)

    # ==================== Delivery ====================

    async def _to_all(self, event_name: str, payload: dict[str, Any]) -> None:
        result = await self.notifier.broadcast_to_all(event_name, payload)
        self._log_result(event_name, "all", result)

    async def _to_room(self, room: str, event_name: str, payload: dict[str, Any]) -> None:
        result = await self.notifier.broadcast_to_room(room, event_name, payload)
        self._log_result(event_name, room, result)

    @staticmethod
    def _log_result(event_name: str, room: str, result: DeliveryResult) -> None:
        if not result.ok:
            logger.warning(
                "notifier.delivery_failed",
                extra={
                    "event_name": event_name,
                    "room": room,
                    "delivered": result.delivered,
                    "failed": result.failed,
                },
            )


def register_notification_handlers(event_bus: EventBus, notifier: Notifier) -> NotificationSubscribers:
    """Wire notifier до event bus (викликається в create_app).

    Returns:
        Зареєстровані subscribers.
    """
    subscribers = NotificationSubscribers(notifier)
    subscribers.register(event_bus)
    return subscribers
