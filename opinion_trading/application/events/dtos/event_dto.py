"""Event DTOs - data transfer objects for API responses."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from opinion_trading.domain.events import Event, EventOption


@dataclass
class EventOptionDTO:
    """Option data transfer object."""

    id: int
    name: str
    odds: Decimal
    result: bool | None

    @classmethod
    def from_value_object(cls, option: EventOption) -> "EventOptionDTO":
        return cls(
            id=option.id or 0,
            name=option.name,
            odds=option.odds,
            result=option.result,
        )


@dataclass
class EventDTO:
    """Event data transfer object.

    Використовується для API responses та між layers.
    """

    id: int
    title: str
    description: str
    category: str
    start_time: datetime
    end_time: datetime
    status: str
    options: list[EventOptionDTO]
    created_at: datetime
    updated_at: datetime
    settled_at: datetime | None

    @classmethod
    def from_entity(cls, event: Event) -> "EventDTO":
        return cls(
            id=event.id or 0,
            title=event.title,
            description=event.description,
            category=event.category,
            start_time=event.start_time,
            end_time=event.end_time,
            status=event.status.value,
            options=[EventOptionDTO.from_value_object(o) for o in event.options],
            created_at=event.created_at,
            updated_at=event.updated_at,
            settled_at=event.settled_at,
        )
