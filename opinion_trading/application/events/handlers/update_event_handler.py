"""UpdateEvent Handler."""

import logging

from opinion_trading.application.events.commands import UpdateEventCommand
from opinion_trading.application.events.dtos import EventDTO
from opinion_trading.application.shared import CommandHandler, UnitOfWork
from opinion_trading.domain.events import EventNotFoundError
from opinion_trading.infrastructure.messaging import EventBus

logger = logging.getLogger(__name__)


class UpdateEventHandler(CommandHandler[UpdateEventCommand, EventDTO]):
    """Handler для UpdateEvent command.

    Event row блокується (get_for_update), щоб update не перетер
    конкурентний settlement.
    """

    def __init__(self, uow: UnitOfWork, event_bus: EventBus) -> None:
        self.uow = uow
        self.event_bus = event_bus

    async def handle(self, command: UpdateEventCommand) -> EventDTO:
        """Update event.

        Raises:
            EventNotFoundError: Event не існує.
            InvalidEventStateError: Settled event / backward transition /
                options change поза UPCOMING.
            ValidationFailure: Невалідні нові значення.
        """
        async with self.uow:
            event = await self.uow.events.get_for_update(command.event_id)
            if event is None:
                raise EventNotFoundError("Event not found", event_id=command.event_id)

            previous_status = event.status
            event.update(
                title=command.title,
                description=command.description,
                category=command.category,
                start_time=command.start_time,
                end_time=command.end_time,
                status=command.status,
                options=command.options,
            )

            await self.uow.events.save(event)
            event.record_updated()
            await self.uow.commit()

        logger.info(
            "update_event.completed",
            extra={
                "event_id": event.id,
                "from_status": previous_status.value,
                "to_status": event.status.value,
            },
        )

        await self.event_bus.publish_all(event.get_domain_events())
        event.clear_domain_events()

        return EventDTO.from_entity(event)
