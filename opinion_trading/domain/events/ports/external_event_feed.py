"""ExternalEventFeed Port - interface до external sports data provider.

Це PORT в Hexagonal Architecture. Адаптери:
- HttpEventFeed: реальний HTTP feed (httpx + retry + circuit breaker)
- StaticEventFeed: вбудовані sample events (dev/tests)
"""

from abc import ABC, abstractmethod
from typing import Optional

from opinion_trading.domain.shared import DomainException

from ..value_objects import ExternalEvent


class ExternalFeedError(DomainException):
    """Raised коли external feed недоступний або повернув некоректні дані."""

    pass


class ExternalEventFeed(ABC):
    """Abstract interface для external event source.

    Example:
        >>> feed = create_event_feed(settings)
        >>> for external in await feed.fetch_events():
        ...     print(external.title, external.category)
    """

    @abstractmethod
    async def fetch_events(self) -> list[ExternalEvent]:
        """Fetch all upcoming events.

        Raises:
            ExternalFeedError: Feed недоступний після retries.
        """
        pass

    @abstractmethod
    async def fetch_event_by_id(self, external_id: str) -> Optional[ExternalEvent]:
        """Fetch single event (None якщо feed його не знає)."""
        pass

    @abstractmethod
    async def fetch_events_by_category(self, category: str) -> list[ExternalEvent]:
        """Fetch events в категорії."""
        pass

    async def close(self) -> None:
        """Release underlying resources (HTTP client)."""
        return None
