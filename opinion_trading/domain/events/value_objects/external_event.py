"""ExternalEvent Value Object - event як його повертає external sports feed."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from opinion_trading.domain.shared import ValueObject


@dataclass(frozen=True)
class ExternalEvent(ValueObject):
    """Normalized event з external feed (ще не збережений в нашій системі)."""

    external_id: str
    title: str
    description: str
    category: str
    start_time: datetime
    end_time: datetime
    options: tuple[tuple[str, Decimal], ...] = field(default_factory=tuple)
    """Пари (name, odds)."""
