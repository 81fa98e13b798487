"""Application container - всі long-lived collaborators одного процесу.

Створюється явно (main.create_app / Celery task) і передається далі,
ніяких module-level singletons.
"""

from dataclasses import dataclass, field

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from opinion_trading.application.notifications import register_notification_handlers
from opinion_trading.application.shared import KeyedLocks
from opinion_trading.config import Settings
from opinion_trading.domain.events import ExternalEventFeed
from opinion_trading.infrastructure.auth import JWTManager, PasslibPasswordHasher
from opinion_trading.infrastructure.feeds import create_event_feed
from opinion_trading.infrastructure.messaging import EventBus
from opinion_trading.infrastructure.notifications import ConnectionHub, WebSocketNotifier
from opinion_trading.infrastructure.persistence.sqlalchemy import (
    SQLAlchemyUnitOfWork,
    build_engine,
    create_session_factory,
    create_unit_of_work,
)


@dataclass
class AppContainer:
    """Wiring graph: engine → UoW factory, event bus → notifier, locks."""

    settings: Settings
    engine: AsyncEngine
    session_factory: async_sessionmaker[AsyncSession]
    event_bus: EventBus
    hub: ConnectionHub
    notifier: WebSocketNotifier
    feed: ExternalEventFeed
    jwt_manager: JWTManager
    password_hasher: PasslibPasswordHasher
    settlement_locks: KeyedLocks = field(default_factory=KeyedLocks)

    def unit_of_work(self) -> SQLAlchemyUnitOfWork:
        """New UoW (одна на request/use case, не shared)."""
        return create_unit_of_work(self.session_factory)

    async def aclose(self) -> None:
        await self.feed.close()
        await self.engine.dispose()


def build_container(settings: Settings) -> AppContainer:
    """Construct container and subscribe notifications на event bus."""
    engine = build_engine(settings)
    event_bus = EventBus()
    hub = ConnectionHub()
    notifier = WebSocketNotifier(hub)
    register_notification_handlers(event_bus, notifier)

    return AppContainer(
        settings=settings,
        engine=engine,
        session_factory=create_session_factory(engine),
        event_bus=event_bus,
        hub=hub,
        notifier=notifier,
        feed=create_event_feed(settings),
        jwt_manager=JWTManager(
            secret_key=settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
            expire_days=settings.jwt_access_token_expire_days,
        ),
        password_hasher=PasslibPasswordHasher(),
    )
