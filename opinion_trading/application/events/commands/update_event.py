"""UpdateEvent Command - partial update (None = не змінювати)."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from opinion_trading.application.shared import Command
from opinion_trading.domain.events import EventStatus


@dataclass(frozen=True)
class UpdateEventCommand(Command):
    """Command для оновлення event.

    Note:
        Статус можна тільки просувати вперед (upcoming → live → closed).
        SETTLED встановлюється лише settlement операцією.
    """

    event_id: int
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    status: Optional[EventStatus] = None
    options: Optional[tuple[tuple[str, Decimal], ...]] = None
