"""CreateEvent Command - новий event в UPCOMING."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from opinion_trading.application.shared import Command


@dataclass(frozen=True)
class CreateEventCommand(Command):
    """Command для створення event.

    Example:
        >>> command = CreateEventCommand(
        ...     title="NFL: Chiefs vs. Ravens",
        ...     description="Season opener",
        ...     category="Football",
        ...     start_time=start,
        ...     end_time=end,
        ...     options=(("Chiefs", Decimal("1.85")), ("Ravens", Decimal("1.95"))),
        ... )
        >>> event_dto = await handler.handle(command)
    """

    title: str
    description: str
    category: str
    start_time: datetime
    end_time: datetime
    options: tuple[tuple[str, Decimal], ...]
    """Пари (name, odds) в порядку відображення."""
