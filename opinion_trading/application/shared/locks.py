"""Per-key asyncio locks (serialize settlement одного event в процесі)."""

import asyncio
from collections import defaultdict
from contextlib import asynccontextmanager
from typing import AsyncIterator, Hashable


class KeyedLocks:
    """Registry asyncio.Lock per key.

    Process-local: між процесами/воркерами settlement серіалізується
    row lock на event (SELECT ... FOR UPDATE) та compare-and-set на trades.

    Example:
        >>> locks = KeyedLocks()
        >>> async with locks.hold(event_id):
        ...     await settle(event_id)
    """

    def __init__(self) -> None:
        self._locks: dict[Hashable, asyncio.Lock] = defaultdict(asyncio.Lock)
        self._waiters: dict[Hashable, int] = defaultdict(int)

    @asynccontextmanager
    async def hold(self, key: Hashable) -> AsyncIterator[None]:
        """Acquire lock for key, release (і прибрати з registry) на виході."""
        self._waiters[key] += 1
        lock = self._locks[key]
        try:
            async with lock:
                yield
        finally:
            self._waiters[key] -= 1
            if self._waiters[key] == 0:
                del self._waiters[key]
                del self._locks[key]

    def is_locked(self, key: Hashable) -> bool:
        """Check if хтось зараз тримає lock для key."""
        lock = self._locks.get(key)
        return lock is not None and lock.locked()

    def __len__(self) -> int:
        return len(self._locks)
