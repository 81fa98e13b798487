"""Trading Bounded Context - Domain Layer.

Exports:
    Entities: Trade (Aggregate Root)
    Value Objects: TradeStatus, TradeOutcome
    Exceptions: InsufficientBalanceError, TradeNotFoundError, InvalidTradeStateError
    Events: TradeCreatedEvent, TradeCancelledEvent, TradeSettledEvent
    Repositories: TradeRepository (interface)
    Services: calculate_payout
"""

# Entities (Aggregate Roots)
from .entities import Trade

# Value Objects
from .value_objects import TradeOutcome, TradeStatus

# Exceptions
from .exceptions import (
    InsufficientBalanceError,
    InvalidTradeStateError,
    TradeNotFoundError,
)

# Events
from .events import (
    TradeCancelledEvent,
    TradeCreatedEvent,
    TradeSettledEvent,
    TradeSnapshotEvent,
)

# Repository interfaces
from .repositories import TradeRepository

# Domain services
from .services import calculate_payout

__all__ = [
    # Entities
    "Trade",
    # Value Objects
    "TradeStatus",
    "TradeOutcome",
    # Exceptions
    "InsufficientBalanceError",
    "TradeNotFoundError",
    "InvalidTradeStateError",
    # Events
    "TradeSnapshotEvent",
    "TradeCreatedEvent",
    "TradeCancelledEvent",
    "TradeSettledEvent",
    # Repositories
    "TradeRepository",
    # Services
    "calculate_payout",
]
