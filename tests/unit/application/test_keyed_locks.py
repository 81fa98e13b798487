"""Tests для KeyedLocks (per-event settlement serialization)."""

import asyncio

from opinion_trading.application.shared import KeyedLocks


class TestKeyedLocks:

    async def test_same_key_is_serialized(self):
        """Test: другий holder чекає поки перший не відпустить lock."""
        locks = KeyedLocks()
        order: list[str] = []
        first_entered = asyncio.Event()

        async def first():
            async with locks.hold(10):
                order.append("first:start")
                first_entered.set()
                await asyncio.sleep(0.01)
                order.append("first:end")

        async def second():
            await first_entered.wait()
            async with locks.hold(10):
                order.append("second")

        await asyncio.gather(first(), second())

        assert order == ["first:start", "first:end", "second"]

    async def test_different_keys_do_not_block(self):
        """Test: різні events settle паралельно."""
        locks = KeyedLocks()

        async with locks.hold(1):
            assert locks.is_locked(1)
            assert not locks.is_locked(2)
            async with locks.hold(2):
                assert locks.is_locked(2)

    async def test_registry_cleaned_up(self):
        """Test: lock прибирається з registry після release."""
        locks = KeyedLocks()

        async with locks.hold("event-1"):
            assert len(locks) == 1

        assert len(locks) == 0
        assert not locks.is_locked("event-1")

    async def test_released_on_exception(self):
        """Test: exception всередині не лишає lock захопленим."""
        locks = KeyedLocks()

        try:
            async with locks.hold(5):
                raise RuntimeError("boom")
        except RuntimeError:
            pass

        assert not locks.is_locked(5)
        assert len(locks) == 0
