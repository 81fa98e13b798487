"""SQLAlchemy implementation of UserRepository (Ledger Store)."""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from opinion_trading.domain.users import User, UserAlreadyExistsError
from opinion_trading.domain.users.repositories import UserRepository as UserRepositoryPort
from opinion_trading.infrastructure.persistence.sqlalchemy.mappers import UserMapper
from opinion_trading.infrastructure.persistence.sqlalchemy.models import UserModel


class SQLAlchemyUserRepository(UserRepositoryPort):
    """SQLAlchemy implementation of UserRepository port.

    Balance змінюється тільки UPDATE statements з арифметикою в SQL
    (balance = balance + :delta), тому конкурентні credits/debits
    одного користувача не губляться.

    Example:
        >>> repo = SQLAlchemyUserRepository(session)
        >>> await repo.update_balance(user_id=1, delta=Decimal("-200"))
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session
        self._mapper = UserMapper()

    async def save(self, user: User) -> None:
        """Save або update user profile.

        Raises:
            UserAlreadyExistsError: Unique constraint (email/username) порушено
                конкурентною реєстрацією.
        """
        if user.id is None:
            model = self._mapper.to_model(user)
            self._session.add(model)
            try:
                await self._session.flush()  # Get generated ID
            except IntegrityError as e:
                raise UserAlreadyExistsError(
                    "User with this email already exists",
                    email=user.email,
                ) from e
            user.id = model.id
        else:
            existing_model = await self._session.get(UserModel, user.id)
            if existing_model is None:
                raise ValueError(f"User {user.id} not found for update")

            self._mapper.update_model_from_entity(existing_model, user)
            await self._session.flush()

    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID.

        Note:
            populate_existing: balance міг змінитись UPDATE statement в цій
            же session, identity map не має повертати старе значення.
        """
        stmt = (
            select(UserModel)
            .where(UserModel.id == user_id)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        if model is None:
            return None
        return self._mapper.to_entity(model)

    async def get_by_email(self, email: str) -> Optional[User]:
        stmt = select(UserModel).where(func.lower(UserModel.email) == email.strip().lower())
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._mapper.to_entity(model) if model else None

    async def get_by_username(self, username: str) -> Optional[User]:
        stmt = select(UserModel).where(UserModel.username == username.strip())
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._mapper.to_entity(model) if model else None

    async def update_balance(self, user_id: int, delta: Decimal) -> Optional[User]:
        """Atomic increment: UPDATE users SET balance = balance + :delta."""
        stmt = (
            update(UserModel)
            .where(UserModel.id == user_id)
            .values(
                balance=UserModel.balance + delta,
                updated_at=datetime.now(timezone.utc),
                version=UserModel.version + 1,
            )
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        if result.rowcount != 1:
            return None
        return await self.get_by_id(user_id)

    async def debit_if_sufficient(self, user_id: int, amount: Decimal) -> bool:
        """Conditional debit: ... WHERE id = :id AND balance >= :amount."""
        stmt = (
            update(UserModel)
            .where(UserModel.id == user_id)
            .where(UserModel.balance >= amount)
            .values(
                balance=UserModel.balance - amount,
                updated_at=datetime.now(timezone.utc),
                version=UserModel.version + 1,
            )
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return result.rowcount == 1
