"""Events для Events bounded context."""

from .event_events import (
    EventCreatedEvent,
    EventDeletedEvent,
    EventSettledEvent,
    EventSnapshotEvent,
    EventTradesSettledEvent,
    EventUpdatedEvent,
)

__all__ = [
    "EventSnapshotEvent",
    "EventCreatedEvent",
    "EventUpdatedEvent",
    "EventSettledEvent",
    "EventDeletedEvent",
    "EventTradesSettledEvent",
]
