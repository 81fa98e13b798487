"""Entities для Trading bounded context."""

from .trade import Trade

__all__ = ["Trade"]
