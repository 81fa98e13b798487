"""Value objects для Trading bounded context."""

from .enums import TradeOutcome, TradeStatus

__all__ = ["TradeStatus", "TradeOutcome"]
