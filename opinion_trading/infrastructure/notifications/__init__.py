"""Real-time notification adapters (WebSocket rooms)."""

from .connection_hub import ConnectionHub
from .websocket_notifier import WebSocketNotifier

__all__ = ["ConnectionHub", "WebSocketNotifier"]
