"""JWT Token Management (python-jose)."""

from datetime import datetime, timedelta, timezone
from typing import Any

import structlog
from jose import JWTError, jwt

from opinion_trading.application.users.ports import TokenIssuer
from opinion_trading.domain.shared import DomainException

logger = structlog.get_logger()


class InvalidTokenError(DomainException):
    """Token missing, malformed, expired або з неправильним підписом."""


class JWTManager(TokenIssuer):
    """Handles JWT token creation and verification.

    Payload: {"sub": "<user_id>", "role": "<role>", "exp": ..., "type": "access"}

    Example:
        >>> manager = JWTManager(secret_key="x" * 32, expire_days=7)
        >>> token = manager.issue(user_id=1, role="user")
        >>> manager.decode(token)["sub"]
        '1'
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expire_days: int = 7,
    ) -> None:
        """Initialize JWT manager.

        Args:
            secret_key: Secret key for signing tokens.
            algorithm: Signing algorithm.
            expire_days: Access token lifetime.
        """
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expire_days = expire_days

    def issue(self, user_id: int, role: str) -> str:
        """Create access token for user."""
        return self.create_access_token({"sub": str(user_id), "role": role})

    def create_access_token(
        self,
        data: dict[str, Any],
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a JWT access token.

        Args:
            data: Data to encode in the token
            expires_delta: Optional custom expiration time

        Returns:
            Encoded JWT token
        """
        to_encode = data.copy()
        expire = datetime.now(timezone.utc) + (
            expires_delta if expires_delta else timedelta(days=self.expire_days)
        )
        to_encode.update({"exp": expire, "type": "access"})
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def decode(self, token: str) -> dict[str, Any]:
        """Verify and decode an access token.

        Raises:
            InvalidTokenError: Invalid signature, expired або не access token.
        """
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as e:
            logger.info("jwt.decode_failed", error=str(e))
            raise InvalidTokenError("Invalid or expired token") from e

        if payload.get("type") != "access" or "sub" not in payload:
            raise InvalidTokenError("Invalid or expired token")
        return payload
