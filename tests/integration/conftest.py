"""Fixtures для integration tests (in-memory SQLite)."""

from decimal import Decimal

import pytest

from opinion_trading.config import Settings
from opinion_trading.domain.users import User, UserRole
from opinion_trading.infrastructure.messaging import EventBus
from opinion_trading.infrastructure.persistence.sqlalchemy import (
    SQLAlchemyUnitOfWork,
    build_engine,
    create_session_factory,
    create_tables,
)


@pytest.fixture
def settings():
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        environment="development",
        starting_balance=Decimal("1000"),
    )


@pytest.fixture
async def engine(settings):
    """Async SQLite engine з усіма таблицями.

    Note:
        StaticPool: всі sessions ділять один in-memory connection.
    """
    engine = build_engine(settings)
    await create_tables(engine)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
def uow(session_factory):
    return SQLAlchemyUnitOfWork(session_factory)


@pytest.fixture
def event_bus():
    return EventBus()


@pytest.fixture
def create_user(session_factory):
    """Factory: persist user і повернути його (з ID)."""

    async def _create(
        username: str = "alice",
        balance: Decimal = Decimal("1000"),
        role: UserRole = UserRole.USER,
    ) -> User:
        user = User(
            username=username,
            email=f"{username}@example.com",
            password_hash="not-a-real-hash",
            balance=balance,
            role=role,
        )
        async with SQLAlchemyUnitOfWork(session_factory) as uow:
            await uow.users.save(user)
            await uow.commit()
        return user

    return _create
