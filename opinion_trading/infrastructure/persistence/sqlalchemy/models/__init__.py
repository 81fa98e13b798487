"""SQLAlchemy ORM models."""

from .base import Base
from .event_model import EventModel, EventOptionModel
from .trade_model import TradeModel
from .user_model import UserModel

__all__ = [
    "Base",
    "UserModel",
    "EventModel",
    "EventOptionModel",
    "TradeModel",
]
