"""User Mapper - converts between User entity and UserModel ORM."""

from opinion_trading.domain.users import User, UserRole
from opinion_trading.infrastructure.persistence.sqlalchemy.models import UserModel

from ._time import as_utc


class UserMapper:
    """Mapper для User entity ↔ UserModel ORM."""

    def to_entity(self, model: UserModel) -> User:
        user = User(
            id=model.id,
            username=model.username,
            email=model.email,
            password_hash=model.password_hash,
            balance=model.balance,
            role=UserRole(model.role),
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )
        user.clear_domain_events()
        return user

    def to_model(self, entity: User) -> UserModel:
        return UserModel(
            id=entity.id,
            username=entity.username,
            email=entity.email,
            password_hash=entity.password_hash,
            balance=entity.balance,
            role=entity.role.value,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    def update_model_from_entity(self, model: UserModel, entity: User) -> UserModel:
        """Update profile fields.

        Note:
            balance НЕ копіюється: тільки atomic update_balance /
            debit_if_sufficient змінюють його.
        """
        model.username = entity.username
        model.email = entity.email
        model.password_hash = entity.password_hash
        model.role = entity.role.value
        model.updated_at = entity.updated_at
        model.version += 1
        return model
