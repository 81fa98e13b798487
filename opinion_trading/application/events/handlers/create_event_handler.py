"""CreateEvent Handler."""

import logging

from opinion_trading.application.events.commands import CreateEventCommand
from opinion_trading.application.events.dtos import EventDTO
from opinion_trading.application.shared import CommandHandler, UnitOfWork
from opinion_trading.domain.events import Event
from opinion_trading.infrastructure.messaging import EventBus

logger = logging.getLogger(__name__)


class CreateEventHandler(CommandHandler[CreateEventCommand, EventDTO]):
    """Handler для CreateEvent command.

    Flow:
    1. Event.create (validation: ≥1 option, odds > 0, end >= start)
    2. Save (IDs event та options присвоюються)
    3. Commit
    4. Publish EventCreatedEvent → broadcast "event_created"
    """

    def __init__(self, uow: UnitOfWork, event_bus: EventBus) -> None:
        """Initialize handler.

        Args:
            uow: Unit of Work для transaction management.
            event_bus: Event bus для publishing domain events.
        """
        self.uow = uow
        self.event_bus = event_bus

    async def handle(self, command: CreateEventCommand) -> EventDTO:
        """Create event.

        Raises:
            ValidationFailure: Невалідні поля або options.
        """
        event = Event.create(
            title=command.title,
            description=command.description,
            category=command.category,
            start_time=command.start_time,
            end_time=command.end_time,
            options=command.options,
        )

        async with self.uow:
            await self.uow.events.save(event)
            event.record_created()
            await self.uow.commit()

        logger.info(
            "create_event.completed",
            extra={"event_id": event.id, "category": event.category},
        )

        await self.event_bus.publish_all(event.get_domain_events())
        event.clear_domain_events()

        return EventDTO.from_entity(event)
