"""Pytest configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest


@pytest.fixture
def event_window():
    """(start_time, end_time) для events в tests."""
    start = datetime(2026, 9, 7, 18, 0, tzinfo=timezone.utc)
    return start, start + timedelta(hours=4)


@pytest.fixture
def sample_event_data(event_window):
    """Sample data для створення events в tests."""
    start, end = event_window
    return {
        "title": "NFL: Chiefs vs. Ravens",
        "description": "NFL Week 1 matchup between Kansas City Chiefs and Baltimore Ravens",
        "category": "Football",
        "start_time": start,
        "end_time": end,
        "options": [("Chiefs Win", Decimal("1.85")), ("Ravens Win", Decimal("1.95"))],
    }


@pytest.fixture
def persisted_event(sample_event_data):
    """Event з присвоєними IDs (як після INSERT): event 10, options 101/102."""
    from opinion_trading.domain.events import Event

    event = Event.create(**sample_event_data)
    event.id = 10
    event.assign_option_ids([101, 102])
    return event


@pytest.fixture
def sample_trade_data():
    """Sample data для створення trades в tests."""
    return {
        "user_id": 1,
        "event_id": 10,
        "option_id": 101,
        "amount": Decimal("200"),
    }
