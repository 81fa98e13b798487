"""CancelTrade Handler - refund stake executed trade."""

import logging

from opinion_trading.application.shared import CommandHandler, UnitOfWork
from opinion_trading.application.trading.commands import CancelTradeCommand
from opinion_trading.application.trading.dtos import TradeDTO
from opinion_trading.domain.trading import InvalidTradeStateError, TradeNotFoundError, TradeStatus
from opinion_trading.infrastructure.messaging import EventBus

logger = logging.getLogger(__name__)


class CancelTradeHandler(CommandHandler[CancelTradeCommand, TradeDTO]):
    """Handler для CancelTrade command.

    Status transition (compare-and-set EXECUTED → CANCELLED) і refund
    виконуються в одній транзакції: конкурентний cancel або settlement
    програє CAS і нічого не змінює.
    """

    def __init__(self, uow: UnitOfWork, event_bus: EventBus) -> None:
        self.uow = uow
        self.event_bus = event_bus

    async def handle(self, command: CancelTradeCommand) -> TradeDTO:
        """Cancel trade.

        Raises:
            TradeNotFoundError: Trade не існує.
            InvalidTradeStateError: Trade не EXECUTED.
        """
        async with self.uow:
            trade = await self.uow.trades.get_by_id(command.trade_id)
            if trade is None:
                raise TradeNotFoundError("Trade not found", trade_id=command.trade_id)

            trade.cancel()

            if not await self.uow.trades.save_transition(trade, from_status=TradeStatus.EXECUTED):
                raise InvalidTradeStateError(
                    "Only executed trades can be cancelled",
                    trade_id=trade.id,
                )

            await self.uow.users.update_balance(trade.user_id, trade.amount)
            await self.uow.commit()

        logger.info(
            "cancel_trade.completed",
            extra={
                "trade_id": trade.id,
                "user_id": trade.user_id,
                "refund": str(trade.amount),
            },
        )

        await self.event_bus.publish_all(trade.get_domain_events())
        trade.clear_domain_events()

        return TradeDTO.from_entity(trade)
