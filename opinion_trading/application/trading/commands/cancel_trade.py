"""CancelTrade Command - скасувати executed trade з повним refund."""

from dataclasses import dataclass

from opinion_trading.application.shared import Command


@dataclass(frozen=True)
class CancelTradeCommand(Command):
    """Command для cancellation.

    Note:
        Ownership перевіряється в presentation layer (authorize) до handler.
    """

    trade_id: int
