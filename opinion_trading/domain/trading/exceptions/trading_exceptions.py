"""Exceptions для Trading bounded context."""

from opinion_trading.domain.shared import (
    AggregateNotFound,
    BusinessRuleViolation,
    InvalidStateTransition,
)


class InsufficientBalanceError(BusinessRuleViolation):
    """Raised коли у користувача недостатньо балансу для trade."""

    pass


class TradeNotFoundError(AggregateNotFound):
    """Raised коли trade не знайдений."""

    pass


class InvalidTradeStateError(InvalidStateTransition):
    """Raised при спробі виконати операцію в невалідному стані trade."""

    pass
