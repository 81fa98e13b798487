"""WebSocketNotifier - Notifier adapter поверх ConnectionHub."""

from typing import Any

import structlog

from opinion_trading.domain.notifications import DeliveryResult, Notifier

from .connection_hub import ConnectionHub

logger = structlog.get_logger()


class WebSocketNotifier(Notifier):
    """Sends `{"event": <name>, "data": <payload>}` frames.

    Ніколи не кидає exceptions: будь-яка помилка hub перетворюється на
    DeliveryResult(failed=1) і логується.
    """

    def __init__(self, hub: ConnectionHub) -> None:
        self._hub = hub

    async def broadcast_to_all(self, event_name: str, payload: dict[str, Any]) -> DeliveryResult:
        try:
            return await self._hub.send_to_all(self._frame(event_name, payload))
        except Exception as e:
            logger.error("notifier.broadcast_failed", event_name=event_name, error=str(e))
            return DeliveryResult(failed=1)

    async def broadcast_to_room(
        self,
        room: str,
        event_name: str,
        payload: dict[str, Any],
    ) -> DeliveryResult:
        try:
            return await self._hub.send_to_room(room, self._frame(event_name, payload))
        except Exception as e:
            logger.error(
                "notifier.broadcast_failed",
                event_name=event_name,
                room=room,
                error=str(e),
            )
            return DeliveryResult(failed=1)

    @staticmethod
    def _frame(event_name: str, payload: dict[str, Any]) -> dict[str, Any]:
        return {"event": event_name, "data": payload}
