"""Data Transfer Objects для Trading context."""

from .trade_dto import (
    EventTradeSummaryDTO,
    OptionTradeSummaryDTO,
    SettlementResultDTO,
    TradeDTO,
)

__all__ = [
    "TradeDTO",
    "SettlementResultDTO",
    "EventTradeSummaryDTO",
    "OptionTradeSummaryDTO",
]
