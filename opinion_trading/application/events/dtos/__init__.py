"""Data Transfer Objects для Events context."""

from .event_dto import EventDTO, EventOptionDTO

__all__ = ["EventDTO", "EventOptionDTO"]
