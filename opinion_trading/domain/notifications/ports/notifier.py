"""Notifier Port - best-effort fan-out domain changes до subscribers.

Це PORT в Hexagonal Architecture. Адаптер: WebSocketNotifier
(infrastructure/notifications).
"""

from abc import ABC, abstractmethod
from typing import Any

from ..value_objects import DeliveryResult


class Notifier(ABC):
    """Abstract interface для real-time notifications.

    Контракт:
    - Методи НЕ кидають exceptions через send failures, вони повертають
      DeliveryResult з failed > 0
    - Errors here are intentionally non-fatal: caller може проігнорувати
      результат, business operation вже committed

    Example:
        >>> await notifier.broadcast_to_all("event_created", {"id": 1, ...})
        >>> await notifier.broadcast_to_room(user_room(5), "trade_created", trade_payload)
    """

    @abstractmethod
    async def broadcast_to_all(self, event_name: str, payload: dict[str, Any]) -> DeliveryResult:
        """Send notification всім connected clients."""
        pass

    @abstractmethod
    async def broadcast_to_room(
        self,
        room: str,
        event_name: str,
        payload: dict[str, Any],
    ) -> DeliveryResult:
        """Send notification clients що приєднались до room."""
        pass
