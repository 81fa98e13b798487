"""Queries - read side CQRS (без side effects, без domain events)."""

from abc import ABC
from dataclasses import dataclass


@dataclass(frozen=True)
class Query(ABC):
    """Marker base для read requests.

    Query handlers повертають DTOs, не aggregates.

    Example:
        >>> @dataclass(frozen=True)
        ... class ListUserTradesQuery(Query):
        ...     user_id: int
        >>> trades = await list_handler.handle(ListUserTradesQuery(user_id=5))
    """
