"""Password hashing (passlib)."""

from passlib.context import CryptContext

from opinion_trading.application.users.ports import PasswordHasher


class PasslibPasswordHasher(PasswordHasher):
    """PasswordHasher на passlib CryptContext.

    pbkdf2_sha256 - pure-python backend, без native bcrypt dependency.
    """

    def __init__(self, schemes: tuple[str, ...] = ("pbkdf2_sha256",)) -> None:
        self._context = CryptContext(schemes=list(schemes), deprecated="auto")

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return self._context.verify(password, password_hash)
        except ValueError:
            # Unknown / corrupted hash format
            return False
