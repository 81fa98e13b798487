"""Events use case handlers."""

from .create_event_handler import CreateEventHandler
from .delete_event_handler import DeleteEventHandler
from .fetch_external_events_handler import FetchExternalEventsHandler
from .query_handlers import GetEventHandler, ListEventsByCategoryHandler, ListEventsHandler
from .settle_event_handler import SettleEventHandler
from .update_event_handler import UpdateEventHandler

__all__ = [
    "CreateEventHandler",
    "UpdateEventHandler",
    "DeleteEventHandler",
    "SettleEventHandler",
    "FetchExternalEventsHandler",
    "GetEventHandler",
    "ListEventsHandler",
    "ListEventsByCategoryHandler",
]
