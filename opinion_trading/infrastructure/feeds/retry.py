"""Exponential backoff retry logic for external feed calls.

Sports data feeds часто віддають transient errors (timeouts, 502/503,
rate limits). Retry з exponential backoff не перевантажує provider.
"""

import asyncio
import inspect
import logging
from functools import wraps
from typing import Any, Callable, Type, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RetryableError(Exception):
    """Base exception для errors які можна retry.

    Example:
        >>> raise RetryableError("Feed returned 503, retry later")
    """

    pass


def retry_with_backoff(
    max_retries: int = 3,
    base_delay: float = 1.0,
    max_delay: float = 60.0,
    exponential_base: float = 2.0,
    retryable_exceptions: tuple[Type[Exception], ...] = (RetryableError,),
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Decorator для async retry з exponential backoff.

    Args:
        max_retries: Кількість повторів після першої спроби.
        base_delay: Базова затримка в секундах.
        max_delay: Максимальна затримка в секундах.
        exponential_base: База для exponential backoff.
        retryable_exceptions: Tuple exceptions які можна retry.

    Example:
        >>> @retry_with_backoff(max_retries=3, base_delay=1.0)
        ... async def fetch():
        ...     return await client.get("/events")

        >>> # fail → wait 1s → fail → wait 2s → fail → wait 4s → fail → raise
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        if not inspect.iscoroutinefunction(func):
            raise TypeError("retry_with_backoff supports async functions only")

        @wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            for attempt in range(max_retries + 1):
                try:
                    result = await func(*args, **kwargs)
                except retryable_exceptions as e:
                    if attempt >= max_retries:
                        logger.error(
                            "retry.exhausted",
                            extra={
                                "function": func.__name__,
                                "total_attempts": max_retries + 1,
                                "error": str(e),
                            },
                        )
                        raise

                    delay = min(base_delay * (exponential_base**attempt), max_delay)
                    logger.warning(
                        "retry.attempt",
                        extra={
                            "function": func.__name__,
                            "attempt": attempt + 1,
                            "max_retries": max_retries,
                            "delay_seconds": delay,
                            "error": str(e),
                        },
                    )
                    await asyncio.sleep(delay)
                else:
                    if attempt > 0:
                        logger.info(
                            "retry.success",
                            extra={"function": func.__name__, "attempt": attempt + 1},
                        )
                    return result

            # Unreachable: loop either returns or raises
            raise RuntimeError("Retry logic error: no result")

        return wrapper  # type: ignore

    return decorator
