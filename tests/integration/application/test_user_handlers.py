"""Tests для auth use cases (register / login / change password / profile)."""

from decimal import Decimal

import pytest

from opinion_trading.application.users.commands import (
    ChangePasswordCommand,
    LoginUserCommand,
    RegisterUserCommand,
)
from opinion_trading.application.users.handlers import (
    ChangePasswordHandler,
    GetUserHandler,
    LoginUserHandler,
    RegisterUserHandler,
)
from opinion_trading.application.users.queries import GetUserQuery
from opinion_trading.domain.shared import ValidationFailure
from opinion_trading.domain.users import (
    InvalidCredentialsError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from opinion_trading.infrastructure.auth import JWTManager, PasslibPasswordHasher

SECRET = "test-secret-key-with-at-least-32-characters"


@pytest.fixture
def password_hasher():
    return PasslibPasswordHasher()


@pytest.fixture
def jwt_manager():
    return JWTManager(secret_key=SECRET)


@pytest.fixture
def register(uow, password_hasher, jwt_manager, settings):
    handler = RegisterUserHandler(
        uow=uow,
        password_hasher=password_hasher,
        token_issuer=jwt_manager,
        starting_balance=settings.starting_balance,
    )

    async def _register(username="alice", email="alice@example.com", password="s3cret-pass"):
        return await handler.handle(
            RegisterUserCommand(username=username, email=email, password=password)
        )

    return _register


class TestRegisterUser:

    async def test_register_with_starting_balance(self, register, jwt_manager):
        """Test: новий user - role USER, balance 1000, token на його ID."""
        result = await register()

        assert result.user.id > 0
        assert result.user.balance == Decimal("1000")
        assert result.user.role == "user"
        payload = jwt_manager.decode(result.token)
        assert payload["sub"] == str(result.user.id)
        assert payload["role"] == "user"

    async def test_password_is_hashed(self, uow, register):
        result = await register()

        async with uow:
            user = await uow.users.get_by_id(result.user.id)
        assert user.password_hash != "s3cret-pass"

    async def test_duplicate_email(self, register):
        await register()

        with pytest.raises(UserAlreadyExistsError) as exc_info:
            await register(username="alice2")

        assert exc_info.value.message == "User with this email already exists"

    async def test_duplicate_username(self, register):
        await register()

        with pytest.raises(UserAlreadyExistsError) as exc_info:
            await register(email="other@example.com")

        assert exc_info.value.message == "User with this username already exists"

    async def test_short_password(self, register):
        with pytest.raises(ValidationFailure):
            await register(password="12345")


class TestLoginUser:

    @pytest.fixture
    def login(self, uow, password_hasher, jwt_manager):
        handler = LoginUserHandler(uow=uow, password_hasher=password_hasher, token_issuer=jwt_manager)

        async def _login(email, password):
            return await handler.handle(LoginUserCommand(email=email, password=password))

        return _login

    async def test_login_returns_token(self, register, login):
        registered = await register()

        result = await login("alice@example.com", "s3cret-pass")

        assert result.user.id == registered.user.id
        assert result.token

    @pytest.mark.parametrize(
        "email,password",
        [("alice@example.com", "wrong-pass"), ("nobody@example.com", "s3cret-pass")],
    )
    async def test_invalid_credentials(self, register, login, email, password):
        """Test: wrong password і unknown email - однакова помилка."""
        await register()

        with pytest.raises(InvalidCredentialsError) as exc_info:
            await login(email, password)

        assert exc_info.value.message == "Invalid credentials"


class TestChangePassword:

    async def test_change_password(self, uow, register, password_hasher, jwt_manager):
        registered = await register()

        await ChangePasswordHandler(uow=uow, password_hasher=password_hasher).handle(
            ChangePasswordCommand(user_id=registered.user.id, old_password="s3cret-pass", new_password="n3w-pass")
        )

        login = LoginUserHandler(uow=uow, password_hasher=password_hasher, token_issuer=jwt_manager)
        assert await login.handle(LoginUserCommand(email="alice@example.com", password="n3w-pass"))
        with pytest.raises(InvalidCredentialsError):
            await login.handle(LoginUserCommand(email="alice@example.com", password="s3cret-pass"))

    async def test_wrong_current_password(self, uow, register, password_hasher):
        registered = await register()

        with pytest.raises(InvalidCredentialsError) as exc_info:
            await ChangePasswordHandler(uow=uow, password_hasher=password_hasher).handle(
                ChangePasswordCommand(user_id=registered.user.id, old_password="nope-nope", new_password="n3w-pass")
            )

        assert exc_info.value.message == "Current password is incorrect"

    async def test_new_password_too_short(self, uow, register, password_hasher):
        registered = await register()

        with pytest.raises(ValidationFailure):
            await ChangePasswordHandler(uow=uow, password_hasher=password_hasher).handle(
                ChangePasswordCommand(user_id=registered.user.id, old_password="s3cret-pass", new_password="abc")
            )


class TestGetUser:

    async def test_get_profile(self, uow, register):
        registered = await register()

        profile = await GetUserHandler(uow=uow).handle(GetUserQuery(user_id=registered.user.id))

        assert profile.username == "alice"
        assert profile.email == "alice@example.com"

    async def test_unknown_user(self, uow):
        with pytest.raises(UserNotFoundError):
            await GetUserHandler(uow=uow).handle(GetUserQuery(user_id=999))
