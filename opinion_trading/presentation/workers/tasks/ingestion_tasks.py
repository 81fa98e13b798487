"""External feed ingestion Celery tasks.

Тонка обгортка навколо FetchExternalEventsHandler.

Architecture:
    Celery Beat → fetch_external_events → FetchExternalEventsHandler
                                        → ExternalEventFeed → EventRepository

Note:
    Domain events публікуються на bus воркера (логуються); WebSocket
    clients підключені до API процесу, тому broadcast з воркера не йде.
"""

import asyncio
import logging
from functools import wraps
from typing import Any

from celery import shared_task

from opinion_trading.application.events.commands import FetchExternalEventsCommand
from opinion_trading.application.events.handlers import FetchExternalEventsHandler
from opinion_trading.config import Settings, get_settings
from opinion_trading.infrastructure.feeds import create_event_feed
from opinion_trading.infrastructure.messaging import EventBus
from opinion_trading.infrastructure.persistence.sqlalchemy import (
    build_engine,
    create_session_factory,
    create_unit_of_work,
)

logger = logging.getLogger(__name__)


def async_task(f):
    """Decorator to run async function in Celery task (fresh event loop)."""
    @wraps(f)
    def wrapper(*args, **kwargs):
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        try:
            return loop.run_until_complete(f(*args, **kwargs))
        finally:
            loop.close()
    return wrapper


async def run_ingestion(settings: Settings) -> int:
    """One ingestion run з власними engine та feed client."""
    engine = build_engine(settings)
    feed = create_event_feed(settings)
    try:
        handler = FetchExternalEventsHandler(
            uow=create_unit_of_work(create_session_factory(engine)),
            event_bus=EventBus(),
            feed=feed,
        )
        return await handler.handle(FetchExternalEventsCommand())
    finally:
        await feed.close()
        await engine.dispose()


@shared_task(bind=True)
@async_task
async def fetch_external_events(self) -> dict[str, Any]:
    """Poll external feed and create new upcoming events.

    Returns:
        {"created": N}. Feed failures дають created=0, task не падає.

    Example:
        >>> fetch_external_events.delay()
    """
    created = await run_ingestion(get_settings())
    logger.info("task.fetch_external_events.completed", extra={"created_count": created})
    return {"created": created}
