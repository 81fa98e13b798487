"""Base DomainEvent class for event-driven architecture.

DomainEvent - факт що щось сталось в domain (TradeCreated, EventSettled).
Events дозволяють decoupling: trading logic не знає хто і як розсилає
real-time notifications.
"""

from abc import ABC
from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4


@dataclass(frozen=True)
class DomainEvent(ABC):
    """Base class for all domain events.

    Характеристики:
    - **Immutable**: frozen dataclass
    - **Past tense naming**: TradeSettled, not SettleTrade
    - **Self-contained**: несе всі дані потрібні subscribers
      (subscribers не ходять в DB)

    Example:
        >>> @dataclass(frozen=True)
        ... class TradeCancelledEvent(DomainEvent):
        ...     trade_id: int
        ...     user_id: int
        ...     event_id: int

        >>> event_bus.subscribe(TradeCancelledEvent, notify_trade_cancelled)
    """

    message_id: UUID = field(default_factory=uuid4, init=False)
    """Унікальний ID події (auto-generated)."""

    occurred_at: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc), init=False
    )
    """Час коли подія сталась (auto-generated, UTC)."""

    @property
    def event_name(self) -> str:
        """Event class name (e.g., "TradeCreatedEvent")."""
        return self.__class__.__name__

    def __repr__(self) -> str:
        return f"{self.event_name}(message_id={self.message_id}, occurred_at={self.occurred_at})"
