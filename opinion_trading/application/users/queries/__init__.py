"""Users queries (read operations)."""

from .get_user import GetUserQuery

__all__ = ["GetUserQuery"]
