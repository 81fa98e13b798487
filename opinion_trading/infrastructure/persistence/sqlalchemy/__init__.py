"""SQLAlchemy persistence layer."""

from .database import build_engine, create_session_factory, create_tables
from .models import Base, EventModel, EventOptionModel, TradeModel, UserModel
from .repositories import (
    SQLAlchemyEventRepository,
    SQLAlchemyTradeRepository,
    SQLAlchemyUserRepository,
)
from .unit_of_work import SQLAlchemyUnitOfWork, create_unit_of_work

__all__ = [
    # ORM Models
    "Base",
    "UserModel",
    "EventModel",
    "EventOptionModel",
    "TradeModel",
    # Repositories
    "SQLAlchemyUserRepository",
    "SQLAlchemyEventRepository",
    "SQLAlchemyTradeRepository",
    # Unit of Work
    "SQLAlchemyUnitOfWork",
    "create_unit_of_work",
    # Engine
    "build_engine",
    "create_session_factory",
    "create_tables",
]
