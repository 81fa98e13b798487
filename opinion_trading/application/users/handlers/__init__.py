"""Users use case handlers."""

from .change_password_handler import ChangePasswordHandler
from .get_user_handler import GetUserHandler
from .login_user_handler import LoginUserHandler
from .register_user_handler import RegisterUserHandler

__all__ = [
    "RegisterUserHandler",
    "LoginUserHandler",
    "ChangePasswordHandler",
    "GetUserHandler",
]
