"""Pydantic schemas for Events API requests/responses."""

from datetime import datetime
from decimal import Decimal

from pydantic import Field, field_validator

from opinion_trading.domain.events import EventStatus

from .common import CamelModel, Money, ensure_utc


# ============================================================================
# REQUEST SCHEMAS
# ============================================================================


class EventOptionRequest(CamelModel):
    name: str = Field(..., min_length=1)
    odds: Decimal


class CreateEventRequest(CamelModel):
    """Request schema для створення event.

    Example:
        {
            "title": "NFL: Chiefs vs. Ravens",
            "description": "Week 1",
            "category": "Football",
            "startTime": "2026-09-10T00:20:00Z",
            "endTime": "2026-09-10T03:30:00Z",
            "options": [{"name": "Chiefs", "odds": 1.85}, {"name": "Ravens", "odds": 1.95}]
        }

    Note:
        Порожній options або odds <= 0 відхиляє domain (400), не schema.
    """

    title: str
    description: str
    category: str
    start_time: datetime
    end_time: datetime
    options: list[EventOptionRequest]

    @field_validator("start_time", "end_time")
    @classmethod
    def normalize_times(cls, v: datetime | None) -> datetime | None:
        return ensure_utc(v)


class UpdateEventRequest(CamelModel):
    """Partial update: тільки передані поля змінюються."""

    title: str | None = None
    description: str | None = None
    category: str | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None
    status: EventStatus | None = None
    options: list[EventOptionRequest] | None = None

    @field_validator("start_time", "end_time")
    @classmethod
    def normalize_times(cls, v: datetime | None) -> datetime | None:
        return ensure_utc(v)


class SettleRequest(CamelModel):
    """Example: {"winningOptionId": 7}"""

    winning_option_id: int = Field(..., gt=0)


# ============================================================================
# RESPONSE SCHEMAS
# ============================================================================


class EventOptionResponse(CamelModel):
    id: int
    name: str
    odds: Money
    result: bool | None = None


class EventResponse(CamelModel):
    """Full event з options."""

    id: int
    title: str
    description: str
    category: str
    start_time: datetime
    end_time: datetime
    status: str
    options: list[EventOptionResponse]
    created_at: datetime
    updated_at: datetime
    settled_at: datetime | None = None


class FetchExternalEventsResponse(CamelModel):
    message: str
    created_count: int
