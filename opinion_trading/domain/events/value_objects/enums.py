"""Enums для Events bounded context."""

from enum import Enum


class EventStatus(str, Enum):
    """Event lifecycle status.

    State machine:
        UPCOMING → LIVE → CLOSED → SETTLED
        UPCOMING → CLOSED
        LIVE → SETTLED, CLOSED → SETTLED (тільки через settlement)
    """

    UPCOMING = "upcoming"
    """Event створений, trading ще не відкритий."""

    LIVE = "live"
    """Trading відкритий - єдиний статус де приймаються нові trades."""

    CLOSED = "closed"
    """Trading закритий, результат ще невідомий."""

    SETTLED = "settled"
    """Результат зафіксований (terminal, irreversible)."""
