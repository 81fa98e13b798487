"""Factory для ExternalEventFeed за settings."""

from opinion_trading.config import Settings
from opinion_trading.domain.events import ExternalEventFeed

from .circuit_breaker import CircuitBreaker
from .http_event_feed import HttpEventFeed
from .static_event_feed import StaticEventFeed


def create_event_feed(settings: Settings) -> ExternalEventFeed:
    """HttpEventFeed якщо external_feed_url задано, інакше StaticEventFeed."""
    if not settings.external_feed_url:
        return StaticEventFeed()

    return HttpEventFeed(
        base_url=settings.external_feed_url,
        timeout=settings.external_feed_timeout,
        max_retries=settings.external_feed_max_retries,
        retry_base_delay=settings.external_feed_retry_base_delay,
        retry_max_delay=settings.external_feed_retry_max_delay,
        circuit_breaker=CircuitBreaker(
            name="external_event_feed",
            failure_threshold=settings.circuit_breaker_failure_threshold,
            timeout_seconds=settings.circuit_breaker_recovery_timeout,
        ),
    )
