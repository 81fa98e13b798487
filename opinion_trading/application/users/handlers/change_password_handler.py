"""ChangePassword Handler."""

import logging

from opinion_trading.application.shared import CommandHandler, UnitOfWork
from opinion_trading.application.users.commands import ChangePasswordCommand
from opinion_trading.application.users.handlers.register_user_handler import MIN_PASSWORD_LENGTH
from opinion_trading.application.users.ports import PasswordHasher
from opinion_trading.domain.shared import ValidationFailure
from opinion_trading.domain.users import InvalidCredentialsError, UserNotFoundError

logger = logging.getLogger(__name__)


class ChangePasswordHandler(CommandHandler[ChangePasswordCommand, None]):
    """Handler для ChangePassword command."""

    def __init__(self, uow: UnitOfWork, password_hasher: PasswordHasher) -> None:
        self.uow = uow
        self.password_hasher = password_hasher

    async def handle(self, command: ChangePasswordCommand) -> None:
        """Change password.

        Raises:
            ValidationFailure: Новий пароль закороткий.
            UserNotFoundError: User не існує.
            InvalidCredentialsError: Поточний пароль неправильний.
        """
        if not command.new_password or len(command.new_password) < MIN_PASSWORD_LENGTH:
            raise ValidationFailure(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )

        async with self.uow:
            user = await self.uow.users.get_by_id(command.user_id)
            if user is None:
                raise UserNotFoundError("User not found", user_id=command.user_id)

            if not self.password_hasher.verify(command.old_password, user.password_hash):
                raise InvalidCredentialsError("Current password is incorrect")

            user.change_password_hash(self.password_hasher.hash(command.new_password))
            await self.uow.users.save(user)
            await self.uow.commit()

        logger.info("change_password.completed", extra={"user_id": user.id})
