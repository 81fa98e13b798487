"""External event feed adapters."""

from .circuit_breaker import CircuitBreaker, CircuitBreakerOpenError, CircuitState
from .factory import create_event_feed
from .http_event_feed import HttpEventFeed
from .retry import RetryableError, retry_with_backoff
from .static_event_feed import StaticEventFeed

__all__ = [
    "HttpEventFeed",
    "StaticEventFeed",
    "create_event_feed",
    "CircuitBreaker",
    "CircuitBreakerOpenError",
    "CircuitState",
    "RetryableError",
    "retry_with_backoff",
]
