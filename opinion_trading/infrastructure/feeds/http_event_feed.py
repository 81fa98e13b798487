"""HttpEventFeed - external sports data feed over HTTP (httpx).

Expected wire format (JSON):
    GET {base}/events                    → [event, ...]
    GET {base}/events?category=Football  → [event, ...]
    GET {base}/events/{id}               → event (404 = unknown)

    event = {
        "id": "1", "title": "...", "description": "...", "category": "...",
        "startTime": "2026-01-01T18:00:00Z", "endTime": "...",
        "options": [{"name": "Chiefs Win", "odds": 1.85}, ...]
    }
"""

from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

import httpx
import structlog

from opinion_trading.domain.events import ExternalEvent, ExternalEventFeed, ExternalFeedError

from .circuit_breaker import CircuitBreaker, CircuitBreakerOpenError
from .retry import RetryableError, retry_with_backoff

logger = structlog.get_logger()


class HttpEventFeed(ExternalEventFeed):
    """httpx-based feed з retry + circuit breaker.

    Transient failures (network errors, 5xx, 429) retry з exponential backoff.
    Після failure_threshold невдалих fetch circuit відкривається і наступні
    виклики fast-fail з ExternalFeedError.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        max_retries: int = 3,
        retry_base_delay: float = 1.0,
        retry_max_delay: float = 30.0,
        circuit_breaker: Optional[CircuitBreaker] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._client = client or httpx.AsyncClient(base_url=base_url.rstrip("/"), timeout=timeout)
        self._circuit = circuit_breaker or CircuitBreaker(name="external_event_feed")
        self._get_json = retry_with_backoff(
            max_retries=max_retries,
            base_delay=retry_base_delay,
            max_delay=retry_max_delay,
        )(self._request_json)

    async def fetch_events(self) -> list[ExternalEvent]:
        data = await self._call("/events")
        return self._parse_list(data)

    async def fetch_event_by_id(self, external_id: str) -> Optional[ExternalEvent]:
        data = await self._call(f"/events/{external_id}")
        if data is None:
            return None
        return self._parse_event(data)

    async def fetch_events_by_category(self, category: str) -> list[ExternalEvent]:
        data = await self._call("/events", params={"category": category})
        return self._parse_list(data)

    async def close(self) -> None:
        await self._client.aclose()

    async def _call(self, path: str, params: Optional[dict[str, str]] = None) -> Any:
        try:
            return await self._circuit.call(self._get_json, path, params)
        except CircuitBreakerOpenError as e:
            raise ExternalFeedError("External feed temporarily unavailable") from e
        except (RetryableError, httpx.HTTPError) as e:
            logger.warning("external_feed.request_failed", path=path, error=str(e))
            raise ExternalFeedError("Failed to fetch events from external feed", path=path) from e

    async def _request_json(self, path: str, params: Optional[dict[str, str]] = None) -> Any:
        try:
            response = await self._client.get(path, params=params)
        except httpx.TransportError as e:
            raise RetryableError(f"Transport error: {e}") from e

        if response.status_code == 404:
            return None
        if response.status_code == 429 or response.status_code >= 500:
            raise RetryableError(f"Feed returned {response.status_code}")
        response.raise_for_status()
        return response.json()

    def _parse_list(self, data: Any) -> list[ExternalEvent]:
        if not isinstance(data, list):
            raise ExternalFeedError("Unexpected feed payload", payload_type=type(data).__name__)

        events = []
        for item in data:
            try:
                events.append(self._parse_event(item))
            except ExternalFeedError as e:
                logger.warning("external_feed.item_skipped", error=e.message)
        return events

    @staticmethod
    def _parse_event(item: Any) -> ExternalEvent:
        try:
            return ExternalEvent(
                external_id=str(item["id"]),
                title=item["title"],
                description=item.get("description", ""),
                category=item["category"],
                start_time=_parse_time(item["startTime"]),
                end_time=_parse_time(item["endTime"]),
                options=tuple(
                    (option["name"], Decimal(str(option["odds"])))
                    for option in item.get("options", [])
                ),
            )
        except (KeyError, TypeError, ValueError, InvalidOperation) as e:
            raise ExternalFeedError("Malformed feed event", error=str(e)) from e


def _parse_time(value: str) -> datetime:
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
