"""WebSocket endpoint - real-time notifications via rooms.

Client protocol:
    /ws?token=<jwt>   (token потрібен тільки для "user-<id>" rooms)
    → {"action": "join_room", "room": "event-7"}
    ← {"event": "room_joined", "data": {"room": "event-7"}}
    → {"action": "join_room", "room": "user-6"}
    ← {"event": "room_join_denied", "data": {"room": "user-6"}}
    → {"action": "leave_room", "room": "event-7"}
    ← {"event": "trade_created", "data": {...}}
"""

import json
from typing import Optional

import structlog
from fastapi import APIRouter, WebSocket, WebSocketDisconnect, status

from opinion_trading.infrastructure.auth import InvalidTokenError
from opinion_trading.presentation.api.authorization import Principal, can_join_room
from opinion_trading.presentation.api.dependencies import principal_from_token

logger = structlog.get_logger()

router = APIRouter(tags=["WebSocket"])


@router.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket) -> None:
    container = websocket.app.state.container

    principal: Optional[Principal] = None
    token = websocket.query_params.get("token")
    if token:
        try:
            principal = principal_from_token(container, token)
        except (InvalidTokenError, ValueError):
            logger.info("ws.rejected_invalid_token")
            await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
            return

    hub = container.hub
    await hub.connect(websocket)
    try:
        while True:
            raw = await websocket.receive_text()
            try:
                message = json.loads(raw)
            except ValueError:
                logger.info("ws.invalid_message")
                continue
            if not isinstance(message, dict):
                continue

            action = message.get("action")
            room = message.get("room")
            if not isinstance(room, str) or not room:
                continue

            if action == "join_room":
                if not can_join_room(principal, room):
                    logger.info(
                        "ws.join_denied",
                        room=room,
                        user_id=principal.user_id if principal else None,
                    )
                    await websocket.send_json({"event": "room_join_denied", "data": {"room": room}})
                    continue
                await hub.join(websocket, room)
                await websocket.send_json({"event": "room_joined", "data": {"room": room}})
            elif action == "leave_room":
                await hub.leave(websocket, room)
    except WebSocketDisconnect:
        pass
    finally:
        await hub.disconnect(websocket)
