"""RegisterUser Handler."""

import logging
from decimal import Decimal

from opinion_trading.application.shared import CommandHandler, UnitOfWork
from opinion_trading.application.users.commands import RegisterUserCommand
from opinion_trading.application.users.dtos import AuthResultDTO, UserDTO
from opinion_trading.application.users.ports import PasswordHasher, TokenIssuer
from opinion_trading.domain.shared import ValidationFailure
from opinion_trading.domain.users import User, UserAlreadyExistsError

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


class RegisterUserHandler(CommandHandler[RegisterUserCommand, AuthResultDTO]):
    """Handler для RegisterUser command.

    Flow:
    1. Validate password
    2. Check email / username unique
    3. Create user зі starting balance, role USER
    4. Issue access token
    """

    def __init__(
        self,
        uow: UnitOfWork,
        password_hasher: PasswordHasher,
        token_issuer: TokenIssuer,
        starting_balance: Decimal,
    ) -> None:
        """Initialize handler.

        Args:
            uow: Unit of Work для transaction management.
            password_hasher: Hashes the plain password.
            token_issuer: Issues access token для нового user.
            starting_balance: Баланс нового користувача (Settings.starting_balance).
        """
        self.uow = uow
        self.password_hasher = password_hasher
        self.token_issuer = token_issuer
        self.starting_balance = starting_balance

    async def handle(self, command: RegisterUserCommand) -> AuthResultDTO:
        """Register user.

        Raises:
            ValidationFailure: Порожні поля / короткий пароль / невалідний email.
            UserAlreadyExistsError: Email або username вже зайняті.
        """
        if not command.password or len(command.password) < MIN_PASSWORD_LENGTH:
            raise ValidationFailure(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )

        async with self.uow:
            if await self.uow.users.get_by_email(command.email) is not None:
                raise UserAlreadyExistsError(
                    "User with this email already exists",
                    email=command.email,
                )
            if await self.uow.users.get_by_username(command.username) is not None:
                raise UserAlreadyExistsError(
                    "User with this username already exists",
                    username=command.username,
                )

            user = User.register(
                username=command.username,
                email=command.email,
                password_hash=self.password_hasher.hash(command.password),
                starting_balance=self.starting_balance,
            )
            await self.uow.users.save(user)
            await self.uow.commit()

        logger.info(
            "register_user.completed",
            extra={"user_id": user.id, "username": user.username},
        )

        return AuthResultDTO(
            user=UserDTO.from_entity(user),
            token=self.token_issuer.issue(user.id, user.role.value),
        )
