"""Domain Events для Events bounded context."""

from dataclasses import dataclass
from datetime import datetime

from opinion_trading.domain.shared import DomainEvent

from ..value_objects import EventOption


@dataclass(frozen=True)
class EventSnapshotEvent(DomainEvent):
    """Base для events що несуть повний стан event.

    Subscribers (WebSocket notifications) віддають "full event" клієнтам,
    тому snapshot береться в момент зміни, а не читається пізніше з DB.
    """

    event_id: int
    title: str
    description: str
    category: str
    start_time: datetime
    end_time: datetime
    status: str
    options: tuple[EventOption, ...]
    created_at: datetime
    updated_at: datetime
    settled_at: datetime | None


@dataclass(frozen=True)
class EventCreatedEvent(EventSnapshotEvent):
    """Event: новий event створений (адміністратором або ingestion)."""


@dataclass(frozen=True)
class EventUpdatedEvent(EventSnapshotEvent):
    """Event: поля або статус event змінились."""


@dataclass(frozen=True)
class EventSettledEvent(EventSnapshotEvent):
    """Event: адміністратор зафіксував результат (option results marked).

    Гроші тут НЕ рухаються - це робить SettleTrades.
    """

    winning_option_id: int


@dataclass(frozen=True)
class EventDeletedEvent(DomainEvent):
    """Event: event видалений (trades не каскадяться)."""

    event_id: int


@dataclass(frozen=True)
class EventTradesSettledEvent(DomainEvent):
    """Event: всі executed trades event розраховані (payouts credited).

    Subscribers:
    - Notify room event-<id> що settlement завершено
    """

    event_id: int
    winning_option_id: int
    settled_at: datetime
    settled_trades_count: int
