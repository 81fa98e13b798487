"""Base Handler classes для Commands та Queries.

Handler - orchestrates domain logic для виконання use case.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from .command import Command
from .query import Query

TCommand = TypeVar("TCommand", bound=Command)
TQuery = TypeVar("TQuery", bound=Query)
TResult = TypeVar("TResult")


class CommandHandler(ABC, Generic[TCommand, TResult]):
    """Base class для command handlers.

    Command Handler відповідає за:
    - Load aggregates з repository
    - Execute domain logic (aggregate methods)
    - Save changes через Unit of Work (одна транзакція)
    - Publish domain events ПІСЛЯ commit

    Example:
        >>> class CancelTradeHandler(CommandHandler[CancelTradeCommand, TradeDTO]):
        ...     def __init__(self, uow: UnitOfWork, event_bus: EventBus):
        ...         self.uow = uow
        ...         self.event_bus = event_bus
        ...
        ...     async def handle(self, command: CancelTradeCommand) -> TradeDTO:
        ...         async with self.uow:
        ...             trade = await self.uow.trades.get_by_id(command.trade_id)
        ...             trade.cancel()
        ...             await self.uow.trades.save_transition(trade, TradeStatus.EXECUTED)
        ...             await self.uow.users.update_balance(trade.user_id, trade.amount)
        ...             await self.uow.commit()
        ...
        ...         await self.event_bus.publish_all(trade.get_domain_events())
        ...         return TradeDTO.from_entity(trade)
    """

    @abstractmethod
    async def handle(self, command: TCommand) -> TResult:
        """Handle command and return result.

        Args:
            command: Command to handle.

        Returns:
            Result of command execution.

        Raises:
            DomainException: If business rule violated.
        """
        pass


class QueryHandler(ABC, Generic[TQuery, TResult]):
    """Base class для query handlers.

    Query Handler відповідає за:
    - Fetch data з repository
    - Transform to DTOs
    - NO side effects (read-only)
    """

    @abstractmethod
    async def handle(self, query: TQuery) -> TResult:
        """Handle query and return result.

        Note:
            Queries MUST NOT have side effects.
        """
        pass
