"""Events для Trading bounded context."""

from .trade_events import (
    TradeCancelledEvent,
    TradeCreatedEvent,
    TradeSettledEvent,
    TradeSnapshotEvent,
)

__all__ = [
    "TradeSnapshotEvent",
    "TradeCreatedEvent",
    "TradeCancelledEvent",
    "TradeSettledEvent",
]
