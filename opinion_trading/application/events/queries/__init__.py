"""Events queries."""

from .event_queries import GetEventQuery, ListEventsByCategoryQuery, ListEventsQuery

__all__ = ["GetEventQuery", "ListEventsQuery", "ListEventsByCategoryQuery"]
