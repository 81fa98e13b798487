"""SettleEvent Command - зафіксувати результат event (без руху грошей)."""

from dataclasses import dataclass

from opinion_trading.application.shared import Command


@dataclass(frozen=True)
class SettleEventCommand(Command):
    """Command для marking option results.

    Payouts робить окремий SettleTradesCommand з тим самим winning option.
    """

    event_id: int
    winning_option_id: int
