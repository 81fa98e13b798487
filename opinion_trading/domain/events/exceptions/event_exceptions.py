"""Exceptions для Events bounded context."""

from opinion_trading.domain.shared import AggregateNotFound, InvalidStateTransition


class EventNotFoundError(AggregateNotFound):
    """Raised коли event не знайдений."""

    pass


class OptionNotFoundError(AggregateNotFound):
    """Raised коли option id відсутній в списку опцій event."""

    pass


class EventNotTradableError(InvalidStateTransition):
    """Raised при спробі trade на event що не LIVE."""

    pass


class EventNotSettleableError(InvalidStateTransition):
    """Raised при settlement event в статусі, що не дозволяє settlement."""

    pass


class InvalidEventStateError(InvalidStateTransition):
    """Raised при недозволеній зміні event (settled event, backward transition)."""

    pass
