"""ConnectionHub - registry active WebSocket connections та їх rooms."""

import asyncio
import json
from typing import Any

import structlog
from starlette.websockets import WebSocket, WebSocketState

from opinion_trading.domain.notifications import DeliveryResult

logger = structlog.get_logger()


class ConnectionHub:
    """Tracks connected sockets and room membership.

    Кожен socket завжди в "global" наборі (broadcast_to_all) і може бути
    в довільній кількості rooms ("user-5", "event-7").

    Socket, на якому send впав, прибирається з усіх rooms.
    """

    def __init__(self) -> None:
        self._connections: set[WebSocket] = set()
        self._rooms: dict[str, set[WebSocket]] = {}
        self._lock = asyncio.Lock()

    @property
    def connection_count(self) -> int:
        return len(self._connections)

    def room_size(self, room: str) -> int:
        return len(self._rooms.get(room, ()))

    async def connect(self, websocket: WebSocket) -> None:
        await websocket.accept()
        async with self._lock:
            self._connections.add(websocket)
        logger.info("ws.connected", connections=self.connection_count)

    async def disconnect(self, websocket: WebSocket) -> None:
        async with self._lock:
            self._remove(websocket)
        logger.info("ws.disconnected", connections=self.connection_count)

    async def join(self, websocket: WebSocket, room: str) -> None:
        async with self._lock:
            if websocket in self._connections:
                self._rooms.setdefault(room, set()).add(websocket)
        logger.debug("ws.room_joined", room=room)

    async def leave(self, websocket: WebSocket, room: str) -> None:
        async with self._lock:
            members = self._rooms.get(room)
            if members is not None:
                members.discard(websocket)
                if not members:
                    del self._rooms[room]
        logger.debug("ws.room_left", room=room)

    async def send_to_all(self, message: dict[str, Any]) -> DeliveryResult:
        async with self._lock:
            targets = list(self._connections)
        return await self._deliver(targets, message)

    async def send_to_room(self, room: str, message: dict[str, Any]) -> DeliveryResult:
        async with self._lock:
            targets = list(self._rooms.get(room, ()))
        return await self._deliver(targets, message)

    async def _deliver(self, targets: list[WebSocket], message: dict[str, Any]) -> DeliveryResult:
        if not targets:
            return DeliveryResult()

        text = json.dumps(message, default=str)
        delivered = 0
        dead: list[WebSocket] = []
        for websocket in targets:
            try:
                if websocket.application_state != WebSocketState.CONNECTED:
                    raise RuntimeError("socket not connected")
                await websocket.send_text(text)
                delivered += 1
            except Exception as e:
                logger.warning("ws.send_failed", error=str(e))
                dead.append(websocket)

        if dead:
            async with self._lock:
                for websocket in dead:
                    self._remove(websocket)

        return DeliveryResult(delivered=delivered, failed=len(dead))

    def _remove(self, websocket: WebSocket) -> None:
        self._connections.discard(websocket)
        for room in [r for r, members in self._rooms.items() if websocket in members]:
            self._rooms[room].discard(websocket)
            if not self._rooms[room]:
                del self._rooms[room]
