"""Wire payloads для real-time notifications (camelCase JSON)."""

from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from opinion_trading.domain.events import EventSnapshotEvent
from opinion_trading.domain.trading import TradeSnapshotEvent


def _number(value: Optional[Decimal]) -> Optional[float]:
    return float(value) if value is not None else None


def _timestamp(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def event_payload(event: EventSnapshotEvent) -> dict[str, Any]:
    """Full event."""
    return {
        "id": event.event_id,
        "title": event.title,
        "description": event.description,
        "category": event.category,
        "startTime": _timestamp(event.start_time),
        "endTime": _timestamp(event.end_time),
        "status": event.status,
        "options": [option.to_dict() for option in event.options],
        "createdAt": _timestamp(event.created_at),
        "updatedAt": _timestamp(event.updated_at),
        "settledAt": _timestamp(event.settled_at),
    }


def trade_payload(event: TradeSnapshotEvent) -> dict[str, Any]:
    """Full trade (тільки для room власника)."""
    return {
        "id": event.trade_id,
        "userId": event.user_id,
        "eventId": event.event_id,
        "optionId": event.option_id,
        "amount": _number(event.amount),
        "status": event.status,
        "outcome": event.outcome,
        "settlementAmount": _number(event.settlement_amount),
        "createdAt": _timestamp(event.created_at),
        "updatedAt": _timestamp(event.updated_at),
    }
