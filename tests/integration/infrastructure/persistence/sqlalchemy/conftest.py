"""Fixtures для repository tests: сирий AsyncSession без UnitOfWork."""

import pytest


@pytest.fixture
async def session(session_factory):
    """Session, яку тест комітить сам; незакомічене відкочується в teardown."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def read_committed(session_factory):
    """Прочитати через окрему session (свіжий identity map), після commit.

    Usage:
        user = await read_committed(lambda s: SQLAlchemyUserRepository(s).get_by_id(1))
    """

    async def _read(query):
        async with session_factory() as other:
            return await query(other)

    return _read
