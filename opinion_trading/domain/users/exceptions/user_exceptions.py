"""Exceptions для Users bounded context."""

from opinion_trading.domain.shared import AggregateNotFound, BusinessRuleViolation, DomainException


class UserNotFoundError(AggregateNotFound):
    """Raised коли користувач не знайдений."""

    pass


class UserAlreadyExistsError(BusinessRuleViolation):
    """Raised при реєстрації з email або username що вже зайняті."""

    pass


class InvalidCredentialsError(DomainException):
    """Raised коли email/password не співпадають."""

    pass
