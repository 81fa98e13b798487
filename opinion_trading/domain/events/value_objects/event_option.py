"""EventOption Value Object - один можливий outcome події."""

from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Any

from opinion_trading.domain.shared import ValueObject, validate_value_object


@dataclass(frozen=True)
class EventOption(ValueObject):
    """Outcome option з odds та результатом.

    Odds - decimal multiplier. Payout для winner = amount × (1 / odds).
    Result None до settlement, потім True рівно для однієї опції.

    Note:
        Odds > 0 перевіряється в Event aggregate при create/update, а не
        тут: старі записи з odds=0 мають завантажуватись з DB, щоб
        settlement міг застосувати fallback.

    Example:
        >>> chiefs = EventOption(name="Chiefs", odds=Decimal("1.85"))
        >>> chiefs.with_result(True).result
        True
    """

    name: str
    odds: Decimal
    id: int | None = None
    result: bool | None = None

    def __post_init__(self) -> None:
        validate_value_object(bool(self.name and self.name.strip()), "Option name is required")

    def with_result(self, result: bool) -> "EventOption":
        """Return copy з встановленим result."""
        return replace(self, result=result)

    def to_dict(self) -> dict[str, Any]:
        """Serialize для notifications / API."""
        return {
            "id": self.id,
            "name": self.name,
            "odds": float(self.odds),
            "result": self.result,
        }
