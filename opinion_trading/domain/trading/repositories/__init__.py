"""Repository ports (interfaces) для Trading bounded context."""

from .trade_repository import TradeRepository

__all__ = ["TradeRepository"]
