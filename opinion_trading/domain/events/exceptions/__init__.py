"""Exceptions для Events bounded context."""

from .event_exceptions import (
    EventNotFoundError,
    EventNotSettleableError,
    EventNotTradableError,
    InvalidEventStateError,
    OptionNotFoundError,
)

__all__ = [
    "EventNotFoundError",
    "OptionNotFoundError",
    "EventNotTradableError",
    "EventNotSettleableError",
    "InvalidEventStateError",
]
