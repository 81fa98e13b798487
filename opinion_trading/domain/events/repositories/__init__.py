"""Events repository interfaces (ports)."""

from .event_repository import EventRepository

__all__ = ["EventRepository"]
