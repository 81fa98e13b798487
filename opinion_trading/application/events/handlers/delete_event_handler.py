"""DeleteEvent Handler."""

import logging

from opinion_trading.application.events.commands import DeleteEventCommand
from opinion_trading.application.shared import CommandHandler, UnitOfWork
from opinion_trading.domain.events import EventNotFoundError
from opinion_trading.infrastructure.messaging import EventBus

logger = logging.getLogger(__name__)


class DeleteEventHandler(CommandHandler[DeleteEventCommand, None]):
    """Handler для DeleteEvent command.

    Note:
        Trades на цей event НЕ видаляються і зберігають event_id/option_id.
    """

    def __init__(self, uow: UnitOfWork, event_bus: EventBus) -> None:
        self.uow = uow
        self.event_bus = event_bus

    async def handle(self, command: DeleteEventCommand) -> None:
        """Delete event.

        Raises:
            EventNotFoundError: Event не існує.
        """
        async with self.uow:
            event = await self.uow.events.get_by_id(command.event_id)
            if event is None:
                raise EventNotFoundError("Event not found", event_id=command.event_id)

            await self.uow.events.delete(event.id)
            event.mark_deleted()
            await self.uow.commit()

        logger.info("delete_event.completed", extra={"event_id": event.id})

        await self.event_bus.publish_all(event.get_domain_events())
        event.clear_domain_events()
