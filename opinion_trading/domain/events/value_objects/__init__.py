"""Value objects для Events bounded context."""

from .enums import EventStatus
from .event_option import EventOption
from .external_event import ExternalEvent

__all__ = ["EventStatus", "EventOption", "ExternalEvent"]
