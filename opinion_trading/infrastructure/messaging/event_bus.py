"""Event Bus - domain events infrastructure.

Event Bus enables event-driven architecture:
- Aggregates emit events (TradeCreated, EventSettled, etc.)
- Notification subscribers translate them to real-time messages
- Decoupling: domain не знає про subscribers

Bus створюється явно (create_app / Celery worker) і передається в handlers
через constructor, глобального instance немає.
"""

import logging
from collections import defaultdict
from typing import Awaitable, Callable, Iterable, Type

from opinion_trading.domain.shared import DomainEvent

logger = logging.getLogger(__name__)

# Event handler signature: async function that takes DomainEvent
EventHandler = Callable[[DomainEvent], Awaitable[None]]


class EventBus:
    """In-process Event Bus для domain events.

    Subscriber failures ізольовані: exception логується, інші subscribers
    все одно викликаються, і publish ніколи не кидає далі. Events
    публікуються ПІСЛЯ commit, тому subscriber не може відкотити
    business operation.

    Example:
        >>> event_bus = EventBus()
        >>> event_bus.subscribe(TradeCreatedEvent, notify_trade_created)

        >>> # Після uow.commit()
        >>> await event_bus.publish_all(trade.get_domain_events())
        >>> trade.clear_domain_events()
    """

    def __init__(self) -> None:
        """Initialize event bus."""
        # Map: event_type → list of handlers
        self._subscribers: dict[Type[DomainEvent], list[EventHandler]] = defaultdict(list)
        logger.debug("event_bus.initialized")

    def subscribe(self, event_type: Type[DomainEvent], handler: EventHandler) -> None:
        """Subscribe handler to event type.

        Dispatch по точному типу event (підкласи не наслідують subscriptions).

        Args:
            event_type: Type of event (e.g., TradeSettledEvent).
            handler: Async function to call when event published.
        """
        self._subscribers[event_type].append(handler)
        logger.debug(
            "event_bus.subscription_added",
            extra={
                "event_type": event_type.__name__,
                "handler": getattr(handler, "__name__", repr(handler)),
            },
        )

    def unsubscribe(self, event_type: Type[DomainEvent], handler: EventHandler) -> None:
        """Unsubscribe handler from event type."""
        if handler in self._subscribers[event_type]:
            self._subscribers[event_type].remove(handler)
            logger.debug(
                "event_bus.subscription_removed",
                extra={
                    "event_type": event_type.__name__,
                    "handler": getattr(handler, "__name__", repr(handler)),
                },
            )

    async def publish(self, event: DomainEvent) -> None:
        """Publish single domain event.

        Викликає всі handlers для цього event type.

        Args:
            event: Domain event to publish.
        """
        event_type = type(event)
        handlers = self._subscribers.get(event_type, [])

        if not handlers:
            logger.debug(
                "event_bus.no_subscribers",
                extra={"event_type": event_type.__name__},
            )
            return

        logger.debug(
            "event_bus.publishing",
            extra={
                "event_type": event_type.__name__,
                "handlers_count": len(handlers),
                "message_id": str(event.message_id),
            },
        )

        for handler in handlers:
            try:
                await handler(event)
            except Exception as e:
                # Log error but continue with other handlers
                logger.error(
                    "event_bus.handler_failed",
                    extra={
                        "event_type": event_type.__name__,
                        "handler": getattr(handler, "__name__", repr(handler)),
                        "error": str(e),
                    },
                    exc_info=True,
                )

    async def publish_all(self, events: Iterable[DomainEvent]) -> None:
        """Publish multiple domain events in order.

        Args:
            events: Domain events to publish.
        """
        for event in events:
            await self.publish(event)

    def clear_subscribers(self) -> None:
        """Clear all subscribers (useful for testing)."""
        self._subscribers.clear()

    def get_subscribers_count(self, event_type: Type[DomainEvent]) -> int:
        """Get number of subscribers for event type."""
        return len(self._subscribers.get(event_type, []))
