"""Events Bounded Context - Domain Layer.

Exports:
    Entities: Event (Aggregate Root)
    Value Objects: EventStatus, EventOption, ExternalEvent
    Events: EventCreatedEvent, EventUpdatedEvent, EventSettledEvent,
            EventDeletedEvent, EventTradesSettledEvent
    Exceptions: EventNotFoundError, OptionNotFoundError, EventNotTradableError,
                EventNotSettleableError, InvalidEventStateError
    Repositories: EventRepository (interface)
    Ports: ExternalEventFeed
"""

from .entities import Event
from .events import (
    EventCreatedEvent,
    EventDeletedEvent,
    EventSettledEvent,
    EventSnapshotEvent,
    EventTradesSettledEvent,
    EventUpdatedEvent,
)
from .exceptions import (
    EventNotFoundError,
    EventNotSettleableError,
    EventNotTradableError,
    InvalidEventStateError,
    OptionNotFoundError,
)
from .ports import ExternalEventFeed, ExternalFeedError
from .repositories import EventRepository
from .value_objects import EventOption, EventStatus, ExternalEvent

__all__ = [
    # Entities
    "Event",
    # Value Objects
    "EventStatus",
    "EventOption",
    "ExternalEvent",
    # Events
    "EventSnapshotEvent",
    "EventCreatedEvent",
    "EventUpdatedEvent",
    "EventSettledEvent",
    "EventDeletedEvent",
    "EventTradesSettledEvent",
    # Exceptions
    "EventNotFoundError",
    "OptionNotFoundError",
    "EventNotTradableError",
    "EventNotSettleableError",
    "InvalidEventStateError",
    # Repositories
    "EventRepository",
    # Ports
    "ExternalEventFeed",
    "ExternalFeedError",
]
