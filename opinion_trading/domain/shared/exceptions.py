"""Base domain exceptions.

Domain exceptions представляють порушення бізнес-правил.
Boundary layer (FastAPI exception handler) мапить їх на HTTP responses
за типом, тому кожен kind помилки - окремий клас.
"""

from typing import Any


class DomainException(Exception):
    """Base exception for all domain errors.

    Example:
        >>> raise DomainException("Insufficient balance", user_id=1, amount="200")
    """

    def __init__(self, message: str, **context: Any) -> None:
        """Initialize domain exception.

        Args:
            message: Human-readable error message.
            **context: Additional context (user_id, trade_id, etc).
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class BusinessRuleViolation(DomainException):
    """Business rule is violated (e.g. not enough balance)."""

    pass


class AggregateNotFound(DomainException):
    """Aggregate (user, event, trade) or a part of it (option) is not found.

    Example:
        >>> trade = await uow.trades.get_by_id(123)
        >>> if trade is None:
        ...     raise TradeNotFoundError("Trade not found", trade_id=123)
    """

    pass


class InvalidStateTransition(DomainException):
    """Operation is not allowed in the aggregate's current state.

    Example:
        >>> raise InvalidTradeStateError(
        ...     "Only executed trades can be cancelled",
        ...     trade_id=trade.id,
        ...     current_status="settled",
        ... )
    """

    pass


class ValidationFailure(DomainException):
    """Input is missing or malformed (non-positive amount, empty option list)."""

    pass
