"""Domain services для Trading bounded context."""

from .payout import FALLBACK_ODDS, calculate_payout

__all__ = ["calculate_payout", "FALLBACK_ODDS"]
