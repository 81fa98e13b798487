"""SettleTrades Command - розрахувати всі executed trades event."""

from dataclasses import dataclass

from opinion_trading.application.shared import Command


@dataclass(frozen=True)
class SettleTradesCommand(Command):
    """Command для batch settlement.

    Orchestrates:
    1. Lock event (process lock + row lock)
    2. Для кожного EXECUTED trade: outcome, payout, credit winner
    3. Event → SETTLED (якщо ще ні)
    4. Commit (одна транзакція), publish events

    Example:
        >>> result = await handler.handle(
        ...     SettleTradesCommand(event_id=10, winning_option_id=3)
        ... )
        >>> result.settled_trades_count
        2
    """

    event_id: int
    winning_option_id: int
