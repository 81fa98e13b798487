"""Users commands (write operations)."""

from .change_password import ChangePasswordCommand
from .login_user import LoginUserCommand
from .register_user import RegisterUserCommand

__all__ = ["RegisterUserCommand", "LoginUserCommand", "ChangePasswordCommand"]
