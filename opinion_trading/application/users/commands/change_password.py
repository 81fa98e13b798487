"""ChangePassword Command."""

from dataclasses import dataclass, field

from opinion_trading.application.shared import Command


@dataclass(frozen=True)
class ChangePasswordCommand(Command):
    """Command для зміни пароля (потрібен поточний пароль)."""

    user_id: int
    old_password: str = field(repr=False)
    new_password: str = field(repr=False)
