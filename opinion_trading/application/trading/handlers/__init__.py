"""Trading use case handlers."""

from .cancel_trade_handler import CancelTradeHandler
from .create_trade_handler import CreateTradeHandler
from .query_handlers import (
    GetEventTradeSummaryHandler,
    GetTradeHandler,
    ListEventTradesHandler,
    ListTradesHandler,
    ListUserTradesHandler,
)
from .settle_trades_handler import SettleTradesHandler

__all__ = [
    "CreateTradeHandler",
    "CancelTradeHandler",
    "SettleTradesHandler",
    "GetTradeHandler",
    "ListTradesHandler",
    "ListUserTradesHandler",
    "ListEventTradesHandler",
    "GetEventTradeSummaryHandler",
]
