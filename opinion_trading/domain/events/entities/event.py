"""Event Aggregate Root - подія з outcome options, на які ставлять trades.

Lifecycle:
1. Створюється в UPCOMING (адміністратор або external feed ingestion)
2. UPCOMING → LIVE: відкривається trading
3. LIVE → CLOSED: trading закритий, чекаємо результат
4. LIVE/CLOSED → SETTLED: результат зафіксований, irreversible
"""

from dataclasses import replace
from datetime import datetime, timezone
from decimal import Decimal
from typing import Iterable, Optional

from opinion_trading.domain.shared import AggregateRoot, ValidationFailure

from ..exceptions.event_exceptions import (
    EventNotSettleableError,
    EventNotTradableError,
    InvalidEventStateError,
    OptionNotFoundError,
)
from ..value_objects import EventOption, EventStatus

# Forward-only transitions reachable through update(); SETTLED тільки через settle()
_ALLOWED_TRANSITIONS: dict[EventStatus, frozenset[EventStatus]] = {
    EventStatus.UPCOMING: frozenset({EventStatus.LIVE, EventStatus.CLOSED}),
    EventStatus.LIVE: frozenset({EventStatus.CLOSED}),
    EventStatus.CLOSED: frozenset(),
    EventStatus.SETTLED: frozenset(),
}

_SETTLEABLE_STATUSES = frozenset({EventStatus.LIVE, EventStatus.CLOSED})


class Event(AggregateRoot):
    """Event Aggregate Root.

    Invariants:
    - Event має ≥1 option
    - Нові/оновлені options мають odds > 0
    - Після SETTLED кожна option має result, і рівно одна - True
    - SETTLED встановлюється один раз

    Example:
        >>> event = Event.create(
        ...     title="NFL: Chiefs vs. Ravens",
        ...     description="Week 1",
        ...     category="Football",
        ...     start_time=start,
        ...     end_time=end,
        ...     options=[("Chiefs", Decimal("1.85")), ("Ravens", Decimal("1.95"))],
        ... )
        >>> event.status
        <EventStatus.UPCOMING: 'upcoming'>
        >>> event.update(status=EventStatus.LIVE)
        >>> event.is_tradable
        True
    """

    def __init__(
        self,
        title: str,
        description: str,
        category: str,
        start_time: datetime,
        end_time: datetime,
        options: Iterable[EventOption],
        status: EventStatus = EventStatus.UPCOMING,
        id: Optional[int] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
        settled_at: Optional[datetime] = None,
    ) -> None:
        """Initialize event (reconstruction з DB або через create()).

        Args:
            title: Короткий заголовок.
            description: Опис події.
            category: Категорія (Football, Politics, ...).
            start_time: Початок події.
            end_time: Кінець події.
            options: Outcome options (впорядковані).
            status: Поточний статус.
            id: Event ID (None для нових).
            created_at: Creation timestamp.
            updated_at: Last update timestamp.
            settled_at: Коли результат зафіксовано.
        """
        super().__init__(id)

        self.title = title
        self.description = description
        self.category = category
        self.start_time = start_time
        self.end_time = end_time
        self.options: tuple[EventOption, ...] = tuple(options)
        self.status = status

        now = datetime.now(timezone.utc)
        self.created_at = created_at or now
        self.updated_at = updated_at or now
        self.settled_at = settled_at

        if not self.options:
            raise ValidationFailure("Event must have at least one option", event_id=id)

    @classmethod
    def create(
        cls,
        title: str,
        description: str,
        category: str,
        start_time: datetime,
        end_time: datetime,
        options: Iterable[tuple[str, Decimal]],
    ) -> "Event":
        """Factory method для нового event в UPCOMING.

        Args:
            options: Пари (name, odds).

        Returns:
            Event без ID.

        Raises:
            ValidationFailure: Порожні поля, пустий список опцій, odds <= 0,
                end_time раніше за start_time.
        """
        cls._validate_fields(title, description, category, start_time, end_time)
        built_options = cls._build_options(options)

        return cls(
            title=title.strip(),
            description=description.strip(),
            category=category.strip(),
            start_time=start_time,
            end_time=end_time,
            options=built_options,
            status=EventStatus.UPCOMING,
        )

    # ==================== Lifecycle ====================

    def record_created(self) -> None:
        """Emit EventCreatedEvent (викликається після INSERT, коли є IDs)."""
        from ..events.event_events import EventCreatedEvent

        self._require_persisted()
        self.add_domain_event(EventCreatedEvent(**self._snapshot()))

    def update(
        self,
        title: Optional[str] = None,
        description: Optional[str] = None,
        category: Optional[str] = None,
        start_time: Optional[datetime] = None,
        end_time: Optional[datetime] = None,
        status: Optional[EventStatus] = None,
        options: Optional[Iterable[tuple[str, Decimal]]] = None,
    ) -> None:
        """Apply partial update.

        Raises:
            InvalidEventStateError: Event SETTLED, backward status transition,
                спроба встановити SETTLED, або зміна options поза UPCOMING.
            ValidationFailure: Невалідні нові значення.
        """
        if self.status == EventStatus.SETTLED:
            raise InvalidEventStateError(
                "Settled events cannot be modified",
                event_id=self.id,
            )

        new_title = title if title is not None else self.title
        new_description = description if description is not None else self.description
        new_category = category if category is not None else self.category
        new_start = start_time if start_time is not None else self.start_time
        new_end = end_time if end_time is not None else self.end_time
        self._validate_fields(new_title, new_description, new_category, new_start, new_end)

        new_options = self.options
        if options is not None:
            if self.status != EventStatus.UPCOMING:
                raise InvalidEventStateError(
                    "Options can only be changed while the event is upcoming",
                    event_id=self.id,
                    current_status=self.status.value,
                )
            new_options = self._build_options(options)

        if status is not None and status != self.status:
            self._check_transition(status)

        self.title = new_title.strip()
        self.description = new_description.strip()
        self.category = new_category.strip()
        self.start_time = new_start
        self.end_time = new_end
        self.options = new_options
        if status is not None:
            self.status = status
        self.updated_at = datetime.now(timezone.utc)

    def record_updated(self) -> None:
        """Emit EventUpdatedEvent (після save, коли нові options мають IDs)."""
        from ..events.event_events import EventUpdatedEvent

        self._require_persisted()
        self.add_domain_event(EventUpdatedEvent(**self._snapshot()))

    def mark_deleted(self) -> None:
        """Emit EventDeletedEvent."""
        from ..events.event_events import EventDeletedEvent

        self._require_persisted()
        self.add_domain_event(EventDeletedEvent(event_id=self.id))

    # ==================== Trading ====================

    @property
    def is_tradable(self) -> bool:
        """Only LIVE events accept new trades."""
        return self.status == EventStatus.LIVE

    def ensure_tradable(self) -> None:
        """Raises EventNotTradableError якщо event не LIVE."""
        if not self.is_tradable:
            raise EventNotTradableError(
                "Event is not live for trading",
                event_id=self.id,
                current_status=self.status.value,
            )

    def find_option(self, option_id: int) -> Optional[EventOption]:
        """Find option by ID."""
        for option in self.options:
            if option.id == option_id:
                return option
        return None

    def get_option(self, option_id: int) -> EventOption:
        """Get option by ID.

        Raises:
            OptionNotFoundError: Якщо option не належить цьому event.
        """
        option = self.find_option(option_id)
        if option is None:
            raise OptionNotFoundError(
                "Option not found",
                event_id=self.id,
                option_id=option_id,
            )
        return option

    # ==================== Settlement ====================

    @property
    def is_settled(self) -> bool:
        """Check if результат вже зафіксовано."""
        return self.status == EventStatus.SETTLED

    @property
    def winning_option(self) -> Optional[EventOption]:
        """Winning option (тільки для SETTLED events)."""
        for option in self.options:
            if option.result is True:
                return option
        return None

    def settle(self, winning_option_id: int) -> None:
        """Mark option results та перевести event в SETTLED.

        Це administrator-facing settlement: гроші не рухаються.

        Args:
            winning_option_id: ID опції що виграла.

        Raises:
            EventNotSettleableError: Event не LIVE/CLOSED.
            OptionNotFoundError: Option не належить event.
        """
        from ..events.event_events import EventSettledEvent

        if self.status not in _SETTLEABLE_STATUSES:
            raise EventNotSettleableError(
                "Event is not available for settlement",
                event_id=self.id,
                current_status=self.status.value,
            )
        self.get_option(winning_option_id)

        self._apply_result(winning_option_id)
        self.add_domain_event(
            EventSettledEvent(**self._snapshot(), winning_option_id=winning_option_id)
        )

    def prepare_trade_settlement(self, winning_option_id: int) -> EventOption:
        """Validate що trades цього event можна розрахувати.

        Дозволено для LIVE/CLOSED, а також для SETTLED якщо зафіксований
        winner той самий (result marking і payout - два незалежні кроки).

        Returns:
            Winning option (з odds для payout).

        Raises:
            EventNotSettleableError: Невідповідний статус або інший winner.
            OptionNotFoundError: Option не належить event.
        """
        if self.status == EventStatus.SETTLED:
            option = self.get_option(winning_option_id)
            if option.result is not True:
                recorded = self.winning_option
                raise EventNotSettleableError(
                    "Event already settled with a different winning option",
                    event_id=self.id,
                    winning_option_id=recorded.id if recorded else None,
                    requested_option_id=winning_option_id,
                )
            return option

        if self.status not in _SETTLEABLE_STATUSES:
            raise EventNotSettleableError(
                "Event is not available for settlement",
                event_id=self.id,
                current_status=self.status.value,
            )
        return self.get_option(winning_option_id)

    def complete_trade_settlement(self, winning_option_id: int, settled_trades_count: int) -> None:
        """Перевести event в SETTLED (якщо ще ні) та emit EventTradesSettledEvent."""
        from ..events.event_events import EventTradesSettledEvent

        if not self.is_settled:
            self._apply_result(winning_option_id)

        self.add_domain_event(
            EventTradesSettledEvent(
                event_id=self.id,
                winning_option_id=winning_option_id,
                settled_at=self.settled_at or datetime.now(timezone.utc),
                settled_trades_count=settled_trades_count,
            )
        )

    # ==================== Internals ====================

    def _apply_result(self, winning_option_id: int) -> None:
        now = datetime.now(timezone.utc)
        self.options = tuple(
            option.with_result(option.id == winning_option_id) for option in self.options
        )
        self.status = EventStatus.SETTLED
        self.settled_at = now
        self.updated_at = now

    def _check_transition(self, new_status: EventStatus) -> None:
        if new_status == EventStatus.SETTLED:
            raise InvalidEventStateError(
                "Events are settled through the settlement operation",
                event_id=self.id,
            )
        if new_status not in _ALLOWED_TRANSITIONS[self.status]:
            raise InvalidEventStateError(
                "Invalid event status transition",
                event_id=self.id,
                from_status=self.status.value,
                to_status=new_status.value,
            )

    def _require_persisted(self) -> None:
        if self.id is None:
            raise RuntimeError("Event must be saved before recording events")

    def _snapshot(self) -> dict:
        return {
            "event_id": self.id,
            "title": self.title,
            "description": self.description,
            "category": self.category,
            "start_time": self.start_time,
            "end_time": self.end_time,
            "status": self.status.value,
            "options": self.options,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
            "settled_at": self.settled_at,
        }

    @staticmethod
    def _validate_fields(
        title: str,
        description: str,
        category: str,
        start_time: datetime,
        end_time: datetime,
    ) -> None:
        for name, value in (("title", title), ("description", description), ("category", category)):
            if not value or not value.strip():
                raise ValidationFailure(f"Event {name} is required")
        if end_time < start_time:
            raise ValidationFailure(
                "Event end time must not be before start time",
                start_time=start_time.isoformat(),
                end_time=end_time.isoformat(),
            )

    @staticmethod
    def _build_options(options: Iterable[tuple[str, Decimal]]) -> tuple[EventOption, ...]:
        built = []
        for name, odds in options:
            odds = Decimal(str(odds))
            if odds <= 0:
                raise ValidationFailure(
                    "Option odds must be positive",
                    option=name,
                    odds=str(odds),
                )
            try:
                built.append(EventOption(name=name.strip(), odds=odds))
            except ValueError as e:
                raise ValidationFailure(str(e)) from e

        if not built:
            raise ValidationFailure("Event must have at least one option")
        return tuple(built)

    def assign_option_ids(self, option_ids: Iterable[int]) -> None:
        """Assign persisted IDs to options (в порядку списку) після INSERT."""
        self.options = tuple(
            replace(option, id=option_id) for option, option_id in zip(self.options, option_ids)
        )

    def __repr__(self) -> str:
        return (
            f"Event(id={self.id}, title={self.title!r}, category={self.category}, "
            f"status={self.status.value}, options={len(self.options)})"
        )
