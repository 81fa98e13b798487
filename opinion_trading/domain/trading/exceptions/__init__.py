"""Exceptions для Trading bounded context."""

from .trading_exceptions import (
    InsufficientBalanceError,
    InvalidTradeStateError,
    TradeNotFoundError,
)

__all__ = [
    "InsufficientBalanceError",
    "TradeNotFoundError",
    "InvalidTradeStateError",
]
