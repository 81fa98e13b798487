"""StaticEventFeed - вбудовані sample events (dev, tests, no feed configured)."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Callable, Optional

from opinion_trading.domain.events import ExternalEvent, ExternalEventFeed

# (external_id, title, description, category, start offset, duration, options)
_SAMPLES = (
    (
        "1",
        "NFL: Chiefs vs. Ravens",
        "NFL Week 1 matchup between Kansas City Chiefs and Baltimore Ravens",
        "Football",
        timedelta(hours=24),
        timedelta(hours=4),
        (("Chiefs Win", "1.85"), ("Ravens Win", "1.95")),
    ),
    (
        "2",
        "NBA: Lakers vs. Celtics",
        "NBA Regular Season game between Los Angeles Lakers and Boston Celtics",
        "Basketball",
        timedelta(hours=48),
        timedelta(hours=4),
        (("Lakers Win", "2.10"), ("Celtics Win", "1.75")),
    ),
    (
        "3",
        "Presidential Election 2024",
        "United States Presidential Election 2024",
        "Politics",
        timedelta(days=90),
        timedelta(days=1),
        (("Democratic Party", "1.90"), ("Republican Party", "1.90"), ("Other", "15.0")),
    ),
    (
        "4",
        "Bitcoin Price Movement",
        "Bitcoin price at end of month",
        "Cryptocurrency",
        timedelta(0),
        timedelta(days=30),
        (("Above $50,000", "2.20"), ("Below $50,000", "1.70")),
    ),
)


class StaticEventFeed(ExternalEventFeed):
    """Feed з чотирма sample events; часи рахуються від "now" при кожному fetch.

    Example:
        >>> feed = StaticEventFeed()
        >>> [e.category for e in await feed.fetch_events()]
        ['Football', 'Basketball', 'Politics', 'Cryptocurrency']
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None) -> None:
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    async def fetch_events(self) -> list[ExternalEvent]:
        now = self._clock()
        return [
            ExternalEvent(
                external_id=external_id,
                title=title,
                description=description,
                category=category,
                start_time=now + offset,
                end_time=now + offset + duration,
                options=tuple((name, Decimal(odds)) for name, odds in options),
            )
            for external_id, title, description, category, offset, duration, options in _SAMPLES
        ]

    async def fetch_event_by_id(self, external_id: str) -> Optional[ExternalEvent]:
        for event in await self.fetch_events():
            if event.external_id == external_id:
                return event
        return None

    async def fetch_events_by_category(self, category: str) -> list[ExternalEvent]:
        return [e for e in await self.fetch_events() if e.category == category]
