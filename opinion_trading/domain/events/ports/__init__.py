"""Events ports (interfaces для external systems)."""

from .external_event_feed import ExternalEventFeed, ExternalFeedError

__all__ = ["ExternalEventFeed", "ExternalFeedError"]
