"""Enums для Trading bounded context."""

from enum import Enum


class TradeStatus(str, Enum):
    """Trade lifecycle status.

    State machine:
        EXECUTED → CANCELLED (refund)
        EXECUTED → SETTLED (payout)

    CANCELLED і SETTLED - terminal.
    """

    PENDING = "pending"
    """Reserved; creation path створює trades одразу в EXECUTED."""

    EXECUTED = "executed"
    """Stake списаний, trade чекає settlement або cancellation."""

    SETTLED = "settled"
    """Event розрахований, outcome і settlement_amount встановлені."""

    CANCELLED = "cancelled"
    """Stake повернутий користувачу."""


class TradeOutcome(str, Enum):
    """Результат trade після settlement."""

    WIN = "win"
    """Trade на winning option."""

    LOSS = "loss"
    """Trade на будь-яку іншу option."""
