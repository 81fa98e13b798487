"""Application ports для Users context (credentials, tokens)."""

from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    """Hash / verify passwords (implementation: passlib CryptContext)."""

    @abstractmethod
    def hash(self, password: str) -> str:
        pass

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        pass


class TokenIssuer(ABC):
    """Issue access tokens (implementation: JWT via python-jose)."""

    @abstractmethod
    def issue(self, user_id: int, role: str) -> str:
        pass
