"""Repository implementations for SQLAlchemy."""

from .event_repository import SQLAlchemyEventRepository
from .trade_repository import SQLAlchemyTradeRepository
from .user_repository import SQLAlchemyUserRepository

__all__ = [
    "SQLAlchemyUserRepository",
    "SQLAlchemyEventRepository",
    "SQLAlchemyTradeRepository",
]
