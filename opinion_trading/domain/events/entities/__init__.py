"""Events domain entities."""

from .event import Event

__all__ = ["Event"]
