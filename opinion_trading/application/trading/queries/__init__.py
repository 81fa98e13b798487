"""Trading queries."""

from .trade_queries import (
    GetEventTradeSummaryQuery,
    GetTradeQuery,
    ListEventTradesQuery,
    ListTradesQuery,
    ListUserTradesQuery,
)

__all__ = [
    "GetTradeQuery",
    "ListTradesQuery",
    "ListUserTradesQuery",
    "ListEventTradesQuery",
    "GetEventTradeSummaryQuery",
]
