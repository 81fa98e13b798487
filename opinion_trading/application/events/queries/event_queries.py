"""Events queries (read operations)."""

from dataclasses import dataclass

from opinion_trading.application.shared import Query


@dataclass(frozen=True)
class GetEventQuery(Query):
    event_id: int


@dataclass(frozen=True)
class ListEventsQuery(Query):
    pass


@dataclass(frozen=True)
class ListEventsByCategoryQuery(Query):
    category: str
