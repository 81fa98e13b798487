"""Trade DTOs - data transfer objects for API responses."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from opinion_trading.domain.trading import Trade


@dataclass
class TradeDTO:
    """Trade data transfer object.

    Використовується для API responses та між layers.
    """

    id: int
    user_id: int
    event_id: int
    option_id: int
    amount: Decimal
    status: str
    outcome: str | None
    settlement_amount: Decimal | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, trade: Trade) -> "TradeDTO":
        return cls(
            id=trade.id or 0,
            user_id=trade.user_id,
            event_id=trade.event_id,
            option_id=trade.option_id,
            amount=trade.amount,
            status=trade.status.value,
            outcome=trade.outcome.value if trade.outcome else None,
            settlement_amount=trade.settlement_amount,
            created_at=trade.created_at,
            updated_at=trade.updated_at,
        )


@dataclass
class SettlementResultDTO:
    """Результат SettleTrades."""

    event_id: int
    winning_option_id: int
    settled_at: datetime
    trades: list[TradeDTO] = field(default_factory=list)

    @property
    def settled_trades_count(self) -> int:
        return len(self.trades)


@dataclass
class OptionTradeSummaryDTO:
    count: int = 0
    amount: Decimal = Decimal("0")


@dataclass
class EventTradeSummaryDTO:
    """Агрегований огляд trades event (без user IDs)."""

    event_id: int
    total_trades: int
    total_amount: Decimal
    options: dict[int, OptionTradeSummaryDTO]
