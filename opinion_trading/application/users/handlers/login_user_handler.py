"""LoginUser Handler."""

import logging

from opinion_trading.application.shared import CommandHandler, UnitOfWork
from opinion_trading.application.users.commands import LoginUserCommand
from opinion_trading.application.users.dtos import AuthResultDTO, UserDTO
from opinion_trading.application.users.ports import PasswordHasher, TokenIssuer
from opinion_trading.domain.users import InvalidCredentialsError

logger = logging.getLogger(__name__)


class LoginUserHandler(CommandHandler[LoginUserCommand, AuthResultDTO]):
    """Handler для LoginUser command.

    Unknown email і wrong password дають однакову помилку
    (не розкриваємо, які emails зареєстровані).
    """

    def __init__(
        self,
        uow: UnitOfWork,
        password_hasher: PasswordHasher,
        token_issuer: TokenIssuer,
    ) -> None:
        self.uow = uow
        self.password_hasher = password_hasher
        self.token_issuer = token_issuer

    async def handle(self, command: LoginUserCommand) -> AuthResultDTO:
        """Login.

        Raises:
            InvalidCredentialsError: Unknown email або wrong password.
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(command.email)

        if user is None or not self.password_hasher.verify(command.password, user.password_hash):
            logger.info("login_user.rejected", extra={"email": command.email})
            raise InvalidCredentialsError("Invalid credentials")

        logger.info("login_user.completed", extra={"user_id": user.id})

        return AuthResultDTO(
            user=UserDTO.from_entity(user),
            token=self.token_issuer.issue(user.id, user.role.value),
        )
