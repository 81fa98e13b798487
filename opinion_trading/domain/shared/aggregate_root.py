"""Base AggregateRoot class for domain model.

AggregateRoot - головний Entity в Aggregate. Всі зміни стану йдуть через
його методи, і саме він генерує domain events про ці зміни.
"""

from typing import List

from .domain_event import DomainEvent
from .entity import Entity


class AggregateRoot(Entity):
    """Base class for aggregate roots.

    Правила:
    1. Зовнішній код тримає reference тільки на root
    2. Aggregate зберігається/завантажується повністю
    3. Зміни тільки через методи root
    4. Events публікуються ПІСЛЯ successful commit (не в момент зміни)

    Example:
        >>> trade = Trade.place(user_id=1, event_id=10, option_id=3, amount=Decimal("200"))
        >>> await uow.trades.save(trade)          # id assigned
        >>> trade.record_placed()                 # TradeCreatedEvent queued
        >>> await uow.commit()
        >>> await event_bus.publish_all(trade.get_domain_events())
        >>> trade.clear_domain_events()
    """

    def __init__(self, id: int | None = None) -> None:
        super().__init__(id)
        self._domain_events: List[DomainEvent] = []

    def add_domain_event(self, event: DomainEvent) -> None:
        """Queue domain event until the surrounding transaction commits.

        Args:
            event: Domain event to add.
        """
        self._domain_events.append(event)

    def get_domain_events(self) -> List[DomainEvent]:
        """Get all pending domain events.

        Returns:
            Copy of the pending events list.
        """
        return self._domain_events.copy()

    def clear_domain_events(self) -> None:
        """Clear pending events (викликається після publish)."""
        self._domain_events.clear()

    @property
    def has_domain_events(self) -> bool:
        """Check if aggregate has unpublished events."""
        return len(self._domain_events) > 0
