"""DeliveryResult Value Object - результат best-effort broadcast."""

from dataclasses import dataclass

from opinion_trading.domain.shared import ValueObject


@dataclass(frozen=True)
class DeliveryResult(ValueObject):
    """Скільки subscribers отримали notification.

    Caller може ігнорувати результат: notification failures не впливають
    на business operation.

    Example:
        >>> result = await notifier.broadcast_to_room("event-7", "trade_created", payload)
        >>> result.ok
        True
    """

    delivered: int = 0
    """Кількість connections що отримали message."""

    failed: int = 0
    """Кількість connections де send впав (вони прибираються з hub)."""

    @property
    def ok(self) -> bool:
        """True якщо жодна доставка не впала."""
        return self.failed == 0

    def __add__(self, other: "DeliveryResult") -> "DeliveryResult":
        return DeliveryResult(
            delivered=self.delivered + other.delivered,
            failed=self.failed + other.failed,
        )
