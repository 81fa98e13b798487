"""TradeRepository Port - interface для persistence trade entities.

Це PORT в Hexagonal Architecture (domain визначає interface).
Infrastructure layer має implement цей interface.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities import Trade
from ..value_objects import TradeStatus


class TradeRepository(ABC):
    """Abstract interface для trade persistence (Trade Store).

    Example (Domain uses):
        >>> trade = await uow.trades.get_by_id(123)
        >>> trade.cancel()
        >>> if not await uow.trades.save_transition(trade, from_status=TradeStatus.EXECUTED):
        ...     raise InvalidTradeStateError(...)  # хтось встиг раніше
    """

    @abstractmethod
    async def save(self, trade: Trade) -> None:
        """Save або update trade.

        Note:
            Якщо trade.id is None, це INSERT (ID присвоюється entity).
            Якщо trade.id exists, це UPDATE.
        """
        pass

    @abstractmethod
    async def save_transition(self, trade: Trade, from_status: TradeStatus) -> bool:
        """Persist status change тільки якщо row досі в from_status.

        Atomic compare-and-set: UPDATE ... WHERE id = :id AND status = :from_status.

        Returns:
            True якщо transition застосовано, False якщо trade вже змінився
            (concurrent cancel/settle).
        """
        pass

    @abstractmethod
    async def get_by_id(self, trade_id: int) -> Optional[Trade]:
        """Get trade by ID.

        Returns:
            Trade entity або None якщо не знайдено.
        """
        pass

    @abstractmethod
    async def list_all(self) -> list[Trade]:
        """List all trades (newest first)."""
        pass

    @abstractmethod
    async def list_by_user(self, user_id: int) -> list[Trade]:
        """List trades користувача (newest first)."""
        pass

    @abstractmethod
    async def list_by_event(
        self,
        event_id: int,
        status: Optional[TradeStatus] = None,
    ) -> list[Trade]:
        """List trades event, опціонально тільки в певному status.

        Note:
            SettleTrades використовує status=EXECUTED.
        """
        pass
