"""Commands - write side CQRS.

Кожен command описує одну зміну стану (place trade, settle event, ...)
і виконується рівно одним CommandHandler в межах однієї UnitOfWork.
"""

from abc import ABC
from dataclasses import dataclass


@dataclass(frozen=True)
class Command(ABC):
    """Marker base для immutable command payloads.

    Commands несуть тільки вже перевірені boundary дані (principal user_id,
    parsed Decimal amounts). Бізнес-правила живуть в aggregates та handlers.

    Example:
        >>> @dataclass(frozen=True)
        ... class CancelTradeCommand(Command):
        ...     trade_id: int
        >>> await cancel_handler.handle(CancelTradeCommand(trade_id=42))
    """
