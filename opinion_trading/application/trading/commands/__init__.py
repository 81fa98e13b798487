"""Trading commands (write operations)."""

from .cancel_trade import CancelTradeCommand
from .create_trade import CreateTradeCommand
from .settle_trades import SettleTradesCommand

__all__ = ["CreateTradeCommand", "CancelTradeCommand", "SettleTradesCommand"]
