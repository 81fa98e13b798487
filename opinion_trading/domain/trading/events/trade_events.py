"""Domain Events для Trading bounded context."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from opinion_trading.domain.shared import DomainEvent


@dataclass(frozen=True)
class TradeSnapshotEvent(DomainEvent):
    """Base для trade events: несе повний стан trade на момент зміни."""

    trade_id: int
    user_id: int
    event_id: int
    option_id: int
    amount: Decimal
    status: str
    outcome: str | None
    settlement_amount: Decimal | None
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class TradeCreatedEvent(TradeSnapshotEvent):
    """Event: trade створений і stake списаний.

    Subscribers:
    - Notify owner (room user-<id>) повним trade
    - Notify room event-<id> без user_id
    """


@dataclass(frozen=True)
class TradeCancelledEvent(TradeSnapshotEvent):
    """Event: trade скасований, stake повернутий."""


@dataclass(frozen=True)
class TradeSettledEvent(TradeSnapshotEvent):
    """Event: trade розрахований.

    Це critical event - означає що payout (якщо won) вже credited.
    """

    won: bool
    payout: Decimal
