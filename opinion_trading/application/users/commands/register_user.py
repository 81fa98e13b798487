"""RegisterUser Command - створити нового користувача зі стартовим балансом."""

from dataclasses import dataclass, field

from opinion_trading.application.shared import Command


@dataclass(frozen=True)
class RegisterUserCommand(Command):
    """Command для реєстрації.

    Example:
        >>> command = RegisterUserCommand(
        ...     username="alice",
        ...     email="alice@example.com",
        ...     password="s3cret-pass",
        ... )
        >>> auth = await handler.handle(command)
        >>> auth.user.balance
        Decimal('1000')
    """

    username: str
    email: str
    password: str = field(repr=False)
