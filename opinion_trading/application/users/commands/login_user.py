"""LoginUser Command - обміняти email + password на access token."""

from dataclasses import dataclass, field

from opinion_trading.application.shared import Command


@dataclass(frozen=True)
class LoginUserCommand(Command):
    """Command для login."""

    email: str
    password: str = field(repr=False)
