"""Circuit Breaker для external feed.

Коли feed down:
- Без circuit breaker: кожен ingestion run чекає timeouts × retries
- З circuit breaker: після N failures → OPEN → fast fail

State Machine:
CLOSED (normal) → OPEN (failing) → HALF_OPEN (testing) → CLOSED/OPEN
"""

import asyncio
import logging
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Awaitable, Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CircuitState(Enum):
    """Circuit breaker states."""

    CLOSED = "CLOSED"  # пропускаємо requests
    OPEN = "OPEN"  # fast fail
    HALF_OPEN = "HALF_OPEN"  # пробний request


class CircuitBreakerOpenError(Exception):
    """Circuit OPEN, call rejected без спроби."""

    pass


class CircuitBreaker:
    """Circuit Breaker implementation.

    Example:
        >>> circuit = CircuitBreaker(name="sports_feed", failure_threshold=5, timeout_seconds=60)
        >>> events = await circuit.call(client.fetch_all)
    """

    def __init__(
        self,
        name: str = "default",
        failure_threshold: int = 5,
        timeout_seconds: int = 60,
        success_threshold: int = 1,
    ) -> None:
        """Initialize circuit breaker.

        Args:
            name: Ім'я для логів.
            failure_threshold: Кількість consecutive failures для OPEN.
            timeout_seconds: Скільки секунд тримати circuit OPEN.
            success_threshold: Кількість successes в HALF_OPEN для CLOSED.
        """
        self.name = name
        self.failure_threshold = failure_threshold
        self.timeout_seconds = timeout_seconds
        self.success_threshold = success_threshold

        self._state = CircuitState.CLOSED
        self._failure_count = 0
        self._success_count = 0
        self._last_failure_time: datetime | None = None

        self._lock = asyncio.Lock()

    @property
    def state(self) -> CircuitState:
        """Get current circuit state."""
        return self._state

    async def call(self, func: Callable[..., Awaitable[T]], *args: Any, **kwargs: Any) -> T:
        """Execute async function через circuit breaker.

        Raises:
            CircuitBreakerOpenError: Якщо circuit OPEN.
            Exception: Будь-яка exception від func.
        """
        async with self._lock:
            if self._state == CircuitState.OPEN:
                if not self._should_attempt_reset():
                    logger.warning(
                        "circuit_breaker.rejected",
                        extra={"circuit": self.name, "failure_count": self._failure_count},
                    )
                    raise CircuitBreakerOpenError(
                        f"Circuit breaker OPEN for {self.name}, retry later"
                    )

                logger.info("circuit_breaker.half_open", extra={"circuit": self.name})
                self._state = CircuitState.HALF_OPEN
                self._success_count = 0

        try:
            result = await func(*args, **kwargs)
        except Exception:
            async with self._lock:
                self._on_failure()
            raise

        async with self._lock:
            self._on_success()
        return result

    def _on_success(self) -> None:
        if self._state == CircuitState.HALF_OPEN:
            self._success_count += 1
            if self._success_count >= self.success_threshold:
                logger.info("circuit_breaker.closed", extra={"circuit": self.name})
                self._state = CircuitState.CLOSED
                self._failure_count = 0
                self._success_count = 0
        else:
            self._failure_count = 0

    def _on_failure(self) -> None:
        self._failure_count += 1
        self._last_failure_time = datetime.now(timezone.utc)

        if self._state == CircuitState.HALF_OPEN:
            logger.warning("circuit_breaker.reopened", extra={"circuit": self.name})
            self._state = CircuitState.OPEN
        elif self._failure_count >= self.failure_threshold:
            logger.error(
                "circuit_breaker.opened",
                extra={
                    "circuit": self.name,
                    "failure_count": self._failure_count,
                    "threshold": self.failure_threshold,
                },
            )
            self._state = CircuitState.OPEN

    def _should_attempt_reset(self) -> bool:
        if self._last_failure_time is None:
            return True
        elapsed = datetime.now(timezone.utc) - self._last_failure_time
        return elapsed >= timedelta(seconds=self.timeout_seconds)

    def reset(self) -> None:
        """Manually reset circuit breaker (tests/admin)."""
        self._state = CircuitState.CLOSED
        self._failure_count = 0
        self._success_count = 0
        self._last_failure_time = None
        logger.info("circuit_breaker.manual_reset", extra={"circuit": self.name})
