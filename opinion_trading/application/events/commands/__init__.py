"""Events commands (write operations)."""

from .create_event import CreateEventCommand
from .delete_event import DeleteEventCommand
from .fetch_external_events import FetchExternalEventsCommand
from .settle_event import SettleEventCommand
from .update_event import UpdateEventCommand

__all__ = [
    "CreateEventCommand",
    "UpdateEventCommand",
    "DeleteEventCommand",
    "SettleEventCommand",
    "FetchExternalEventsCommand",
]
