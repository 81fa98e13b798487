"""Trading queries (read operations)."""

from dataclasses import dataclass

from opinion_trading.application.shared import Query


@dataclass(frozen=True)
class GetTradeQuery(Query):
    trade_id: int


@dataclass(frozen=True)
class ListTradesQuery(Query):
    """Всі trades (admin view)."""


@dataclass(frozen=True)
class ListUserTradesQuery(Query):
    user_id: int


@dataclass(frozen=True)
class ListEventTradesQuery(Query):
    """Всі trades event (admin view)."""

    event_id: int


@dataclass(frozen=True)
class GetEventTradeSummaryQuery(Query):
    """Агрегати trades event для non-admin users (без user IDs)."""

    event_id: int
