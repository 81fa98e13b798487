"""SettleEvent Handler - administrator marks winning option."""

import logging

from opinion_trading.application.events.commands import SettleEventCommand
from opinion_trading.application.events.dtos import EventDTO
from opinion_trading.application.shared import CommandHandler, KeyedLocks, UnitOfWork
from opinion_trading.domain.events import EventNotFoundError
from opinion_trading.infrastructure.messaging import EventBus

logger = logging.getLogger(__name__)


class SettleEventHandler(CommandHandler[SettleEventCommand, EventDTO]):
    """Handler для SettleEvent command.

    Flow:
    1. Lock event (process lock + row lock)
    2. Validate status LIVE/CLOSED та option
    3. Mark results, status → SETTLED
    4. Commit, publish EventSettledEvent → broadcast "event_settled"

    Balances тут НЕ змінюються: payouts робить SettleTradesHandler.
    Повторний виклик на SETTLED event відхиляється (EventNotSettleableError).
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
            settlement_locks: Shared per-event lock registry (той самий, що
                в SettleTradesHandler).
        """
        self.uow = uow
        self.event_bus = event_bus
        self.settlement_locks = settlement_locks

    async def handle(self, command: SettleEventCommand) -> EventDTO:
        """Settle event.

        Raises:
            EventNotFoundError: Event не існує.
            EventNotSettleableError: Event не LIVE/CLOSED.
            OptionNotFoundError: Winning option не належить event.
        """
        logger.info(
            "settle_event.started",
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

                event.settle(command.winning_option_id)
                await self.uow.events.save(event)
                await self.uow.commit()

        logger.info(
            "settle_event.completed",
            extra={
                "event_id": event.id,
                "winning_option_id": command.winning_option_id,
            },
        )

        await self.event_bus.publish_all(event.get_domain_events())
        event.clear_domain_events()

        return EventDTO.from_entity(event)
