"""EventRepository Port - interface для persistence events з їх options.

Це PORT в Hexagonal Architecture (domain визначає interface).
Infrastructure layer має implement цей interface.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities import Event


class EventRepository(ABC):
    """Abstract interface для event persistence (Event Store).

    Event зберігається і завантажується повністю разом з options
    (aggregate boundary).

    Example:
        >>> event = await uow.events.get_for_update(event_id)
        >>> event.settle(winning_option_id=7)
        >>> await uow.events.save(event)
        >>> await uow.commit()
    """

    @abstractmethod
    async def save(self, event: Event) -> None:
        """Save або update event разом з options.

        Note:
            Якщо event.id is None, це INSERT (event і option IDs присвоюються).
            Інакше UPDATE: options з id оновлюються, нові вставляються,
            відсутні видаляються.
        """
        pass

    @abstractmethod
    async def get_by_id(self, event_id: int) -> Optional[Event]:
        """Get event by ID.

        Returns:
            Event entity або None якщо не знайдено.
        """
        pass

    @abstractmethod
    async def get_for_update(self, event_id: int, read: bool = False) -> Optional[Event]:
        """Get event by ID з row lock (SELECT ... FOR UPDATE).

        Args:
            event_id: Event ID.
            read: Shared lock (FOR SHARE) замість exclusive. CreateTrade
                бере shared lock, settlement - exclusive, тому trade не
                може з'явитись посеред settlement.

        Note:
            На SQLite lock ігнорується (single writer anyway).
        """
        pass

    @abstractmethod
    async def list_all(self) -> list[Event]:
        """List all events (newest first)."""
        pass

    @abstractmethod
    async def list_by_category(self, category: str) -> list[Event]:
        """List events в категорії (exact match)."""
        pass

    @abstractmethod
    async def find_by_title_in_category(self, title: str, category: str) -> Optional[Event]:
        """Find event з таким title в категорії.

        Note:
            Використовується ingestion для dedupe external events.
        """
        pass

    @abstractmethod
    async def delete(self, event_id: int) -> bool:
        """Delete event та його options (trades залишаються).

        Returns:
            True якщо event існував.
        """
        pass
