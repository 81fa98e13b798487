"""Shared schema building blocks."""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

# JSON numbers (not strings) for money/odds on the wire
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


def ensure_utc(value: datetime | None) -> datetime | None:
    """Naive datetimes from clients are treated as UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(CamelModel):
    message: str


class ErrorResponse(BaseModel):
    """Error response schema.

    Example:
        {"error": "InsufficientBalanceError", "message": "Insufficient balance"}
    """

    error: str
    message: str
    details: Any | None = None
