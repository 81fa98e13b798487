"""API v1 schemas."""

from .auth_schemas import (
    AuthResponse,
    ChangePasswordRequest,
    LoginRequest,
    RegisterRequest,
    UserResponse,
)
from .common import ErrorResponse, MessageResponse
from .event_schemas import (
    CreateEventRequest,
    EventOptionRequest,
    EventResponse,
    FetchExternalEventsResponse,
    SettleRequest,
    UpdateEventRequest,
)
from .trade_schemas import (
    CreateTradeRequest,
    EventTradeSummaryResponse,
    OptionTradeSummaryResponse,
    SettleTradesResponse,
    TradeResponse,
)

__all__ = [
    "ErrorResponse",
    "MessageResponse",
    "RegisterRequest",
    "LoginRequest",
    "ChangePasswordRequest",
    "UserResponse",
    "AuthResponse",
    "EventOptionRequest",
    "CreateEventRequest",
    "UpdateEventRequest",
    "SettleRequest",
    "EventResponse",
    "FetchExternalEventsResponse",
    "CreateTradeRequest",
    "TradeResponse",
    "OptionTradeSummaryResponse",
    "EventTradeSummaryResponse",
    "SettleTradesResponse",
]
