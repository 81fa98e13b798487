"""Payout calculation для settlement.

Odds - decimal multiplier, payout для winner = amount × (1 / odds).
"""

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

logger = logging.getLogger(__name__)

PAYOUT_PRECISION = Decimal("0.00000001")
"""Balances зберігаються як Numeric(20, 8)."""

FALLBACK_ODDS = Decimal("0.5")
"""Substitute для zero/missing odds (legacy rows)."""


def calculate_payout(amount: Decimal, odds: Optional[Decimal]) -> Decimal:
    """Calculate winner payout.

    Args:
        amount: Stake.
        odds: Odds winning option.

    Returns:
        amount × (1 / odds), quantized до 8 знаків.

    Example:
        >>> calculate_payout(Decimal("100"), Decimal("2.0"))
        Decimal('50.00000000')
        >>> calculate_payout(Decimal("200"), Decimal("1.85"))
        Decimal('108.10810811')

    Note:
        Нові options не можуть мати odds <= 0 (Event.create/update це
        відхиляє), тому fallback спрацьовує лише для старих записів.
    """
    if not odds or odds <= 0:
        logger.warning(
            "settlement.odds_fallback",
            extra={"odds": str(odds), "fallback_odds": str(FALLBACK_ODDS)},
        )
        odds = FALLBACK_ODDS

    payout = amount * (Decimal("1") / odds)
    return payout.quantize(PAYOUT_PRECISION, rounding=ROUND_HALF_UP)
