"""FetchExternalEvents Handler - best-effort ingestion з external feed."""

import logging

from opinion_trading.application.events.commands import FetchExternalEventsCommand
from opinion_trading.application.shared import CommandHandler, UnitOfWork
from opinion_trading.domain.events import Event, ExternalEvent, ExternalEventFeed
from opinion_trading.domain.shared import DomainException
from opinion_trading.infrastructure.messaging import EventBus

logger = logging.getLogger(__name__)


class FetchExternalEventsHandler(CommandHandler[FetchExternalEventsCommand, int]):
    """Handler для FetchExternalEvents command.

    Flow:
    1. Fetch events з feed
    2. Для кожного: skip якщо title вже є в category
    3. Create в UPCOMING (окрема транзакція на event)
    4. Publish EventCreatedEvent

    Feed та per-event помилки логуються і не піднімаються: ingestion
    best-effort, caller завжди отримує кількість створених events.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        event_bus: EventBus,
        feed: ExternalEventFeed,
    ) -> None:
        self.uow = uow
        self.event_bus = event_bus
        self.feed = feed

    async def handle(self, command: FetchExternalEventsCommand) -> int:
        """Run ingestion.

        Returns:
            Кількість створених events (0 якщо feed недоступний).
        """
        try:
            external_events = await self.feed.fetch_events()
        except Exception as e:
            logger.warning(
                "fetch_external_events.feed_failed",
                extra={"error": str(e), "error_type": type(e).__name__},
            )
            return 0

        created = 0
        for external in external_events:
            try:
                if await self._ingest(external):
                    created += 1
            except DomainException as e:
                logger.warning(
                    "fetch_external_events.event_rejected",
                    extra={"external_id": external.external_id, "error": str(e)},
                )
            except Exception as e:
                logger.error(
                    "fetch_external_events.event_failed",
                    extra={"external_id": external.external_id, "error": str(e)},
                    exc_info=True,
                )

        logger.info(
            "fetch_external_events.completed",
            extra={"fetched_count": len(external_events), "created_count": created},
        )
        return created

    async def _ingest(self, external: ExternalEvent) -> bool:
        async with self.uow:
            existing = await self.uow.events.find_by_title_in_category(
                external.title, external.category
            )
            if existing is not None:
                return False

            event = Event.create(
                title=external.title,
                description=external.description,
                category=external.category,
                start_time=external.start_time,
                end_time=external.end_time,
                options=external.options,
            )
            await self.uow.events.save(event)
            event.record_created()
            await self.uow.commit()

        await self.event_bus.publish_all(event.get_domain_events())
        event.clear_domain_events()
        return True
