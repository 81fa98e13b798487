"""CreateTrade Command - поставити stake на option live event."""

from dataclasses import dataclass
from decimal import Decimal

from opinion_trading.application.shared import Command


@dataclass(frozen=True)
class CreateTradeCommand(Command):
    """Command для створення trade.

    Orchestrates:
    1. Validate amount, user, balance, event, option (в цьому порядку)
    2. Atomic conditional debit
    3. Persist trade в EXECUTED (та сама транзакція)
    4. Publish TradeCreatedEvent

    Example:
        >>> command = CreateTradeCommand(
        ...     user_id=1,
        ...     event_id=10,
        ...     option_id=3,
        ...     amount=Decimal("200"),
        ... )
        >>> trade_dto = await handler.handle(command)
    """

    user_id: int
    """Власник trade (з authenticated principal)."""

    event_id: int
    option_id: int

    amount: Decimal
    """Stake (> 0)."""
