"""Pydantic schemas for Trades API requests/responses."""

from datetime import datetime
from decimal import Decimal

from pydantic import Field

from .common import CamelModel, Money


# ============================================================================
# REQUEST SCHEMAS
# ============================================================================


class CreateTradeRequest(CamelModel):
    """Request schema для створення trade.

    Example:
        {"eventId": 1, "optionId": 2, "amount": 200}

    Note:
        amount <= 0 відхиляє handler (400 "Amount must be greater than 0").
    """

    event_id: int = Field(..., gt=0)
    option_id: int = Field(..., gt=0)
    amount: Decimal


# ============================================================================
# RESPONSE SCHEMAS
# ============================================================================


class TradeResponse(CamelModel):
    """Trade response."""

    id: int
    user_id: int
    event_id: int
    option_id: int
    amount: Money
    status: str
    outcome: str | None = None
    settlement_amount: Money | None = None
    created_at: datetime
    updated_at: datetime


class OptionTradeSummaryResponse(CamelModel):
    count: int
    amount: Money


class EventTradeSummaryResponse(CamelModel):
    """Агрегований огляд trades event (non-admin view)."""

    total_trades: int
    total_amount: Money
    options: dict[int, OptionTradeSummaryResponse]


class SettleTradesResponse(CamelModel):
    """Example: {"message": "Successfully settled 3 trades", "settledTradesCount": 3}"""

    message: str
    settled_trades_count: int
