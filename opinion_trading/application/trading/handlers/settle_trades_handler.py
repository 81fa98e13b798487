"""SettleTrades Handler - batch settlement торгового engine.

Це CORE use case: рух грошей при settlement.
"""

import logging
from datetime import datetime, timezone
from decimal import Decimal

from opinion_trading.application.shared import CommandHandler, KeyedLocks, UnitOfWork
from opinion_trading.application.trading.commands import SettleTradesCommand
from opinion_trading.application.trading.dtos import SettlementResultDTO, TradeDTO
from opinion_trading.domain.events import EventNotFoundError
from opinion_trading.domain.trading import Trade, TradeStatus, calculate_payout
from opinion_trading.infrastructure.messaging import EventBus

logger = logging.getLogger(__name__)


class SettleTradesHandler(CommandHandler[SettleTradesCommand, SettlementResultDTO]):
    """Handler для SettleTrades command.

    Orchestrates entire settlement:
    1. **Serialize**: per-event asyncio lock + SELECT ... FOR UPDATE на event
    2. **Validate**: event LIVE/CLOSED (або вже SETTLED з тим самим winner),
       option exists
    3. **Settle**: кожен EXECUTED trade → SETTLED через compare-and-set,
       winner credited тільки якщо CAS виграний
    4. **Close event**: SETTLED (якщо ще ні) + EventTradesSettledEvent
    5. **Commit** одна транзакція, потім publish

    Idempotency: повторний виклик бачить тільки EXECUTED trades, тому вже
    розраховані trades не оплачуються вдруге.

    Example:
        >>> handler = SettleTradesHandler(
        ...     uow=uow,
        ...     event_bus=event_bus,
        ...     settlement_locks=locks,
        ... )
        >>> result = await handler.handle(SettleTradesCommand(event_id=10, winning_option_id=3))
        >>> result.settled_trades_count
        2
    """

    def __init__(
        self,
        uow: UnitOfWork,
        event_bus: EventBus,
        settlement_locks: KeyedLocks,
    ) -> None:
        """Initialize handler.

        Args:
            uow: Unit of Work для transaction management.
            event_bus: Event bus для publishing domain events.
            settlement_locks: Shared per-event lock registry.
        """
        self.uow = uow
        self.event_bus = event_bus
        self.settlement_locks = settlement_locks

    async def handle(self, command: SettleTradesCommand) -> SettlementResultDTO:
        """Settle all executed trades of event.

        Returns:
            SettlementResultDTO з розрахованими trades.

        Raises:
            EventNotFoundError: Event не існує.
            EventNotSettleableError: Event не LIVE/CLOSED, або вже SETTLED
                з іншим winning option.
            OptionNotFoundError: Option не належить event.
        """
        logger.info(
            "settle_trades.started",
            extra={
                "event_id": command.event_id,
                "winning_option_id": command.winning_option_id,
            },
        )

        async with self.settlement_locks.hold(command.event_id):
            async with self.uow:
                event = await self.uow.events.get_for_update(command.event_id)
                if event is None:
                    raise EventNotFoundError("Event not found", event_id=command.event_id)

                winning_option = event.prepare_trade_settlement(command.winning_option_id)

                executed = await self.uow.trades.list_by_event(
                    event.id, status=TradeStatus.EXECUTED
                )

                settled: list[Trade] = []
                total_payout = Decimal("0")
                for trade in executed:
                    won = trade.option_id == winning_option.id
                    payout = (
                        calculate_payout(trade.amount, winning_option.odds)
                        if won
                        else Decimal("0")
                    )
                    trade.settle(won=won, payout=payout)

                    if not await self.uow.trades.save_transition(
                        trade, from_status=TradeStatus.EXECUTED
                    ):
                        # Trade змінився після read (конкурентний cancel)
                        logger.warning(
                            "settle_trades.trade_skipped",
                            extra={"trade_id": trade.id, "event_id": event.id},
                        )
                        trade.clear_domain_events()
                        continue

                    if won and payout > 0:
                        credited = await self.uow.users.update_balance(trade.user_id, payout)
                        if credited is None:
                            logger.warning(
                                "settle_trades.user_missing",
                                extra={"trade_id": trade.id, "user_id": trade.user_id},
                            )
                        total_payout += payout

                    settled.append(trade)

                event.complete_trade_settlement(winning_option.id, len(settled))
                await self.uow.events.save(event)
                await self.uow.commit()

        logger.info(
            "settle_trades.completed",
            extra={
                "event_id": event.id,
                "winning_option_id": winning_option.id,
                "settled_trades_count": len(settled),
                "total_payout": str(total_payout),
            },
        )

        for trade in settled:
            await self.event_bus.publish_all(trade.get_domain_events())
            trade.clear_domain_events()
        await self.event_bus.publish_all(event.get_domain_events())
        event.clear_domain_events()

        return SettlementResultDTO(
            event_id=event.id,
            winning_option_id=winning_option.id,
            settled_at=event.settled_at or datetime.now(timezone.utc),
            trades=[TradeDTO.from_entity(t) for t in settled],
        )
