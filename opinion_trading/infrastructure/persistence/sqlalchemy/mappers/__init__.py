"""Mappers for Domain ↔ ORM conversion."""

from .event_mapper import EventMapper
from .trade_mapper import TradeMapper
from .user_mapper import UserMapper

__all__ = ["UserMapper", "EventMapper", "TradeMapper"]
