"""API v1 routes."""

from .auth import router as auth_router
from .events import router as events_router
from .trades import router as trades_router
from .ws import router as ws_router

__all__ = [
    "auth_router",
    "events_router",
    "trades_router",
    "ws_router",
]
