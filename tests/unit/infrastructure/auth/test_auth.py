"""Tests для JWTManager та PasslibPasswordHasher."""

from datetime import timedelta

import pytest
from jose import jwt

from opinion_trading.infrastructure.auth import (
    InvalidTokenError,
    JWTManager,
    PasslibPasswordHasher,
)

SECRET = "test-secret-key-with-at-least-32-characters"


class TestJWTManager:

    def test_issue_and_decode(self):
        """Test: token несе user id (sub) та role."""
        manager = JWTManager(secret_key=SECRET)

        payload = manager.decode(manager.issue(5, "admin"))

        assert payload["sub"] == "5"
        assert payload["role"] == "admin"
        assert payload["type"] == "access"
        assert "exp" in payload

    def test_expired_token_rejected(self):
        manager = JWTManager(secret_key=SECRET)
        token = manager.create_access_token({"sub": "5"}, expires_delta=timedelta(seconds=-1))

        with pytest.raises(InvalidTokenError):
            manager.decode(token)

    def test_wrong_secret_rejected(self):
        token = JWTManager(secret_key=SECRET).issue(5, "user")

        with pytest.raises(InvalidTokenError):
            JWTManager(secret_key="another-secret-key-with-32-characters!").decode(token)

    def test_non_access_token_rejected(self):
        """Test: token без type=access не приймається."""
        token = jwt.encode({"sub": "5", "type": "refresh"}, SECRET, algorithm="HS256")

        with pytest.raises(InvalidTokenError):
            JWTManager(secret_key=SECRET).decode(token)

    def test_garbage_token_rejected(self):
        with pytest.raises(InvalidTokenError) as exc_info:
            JWTManager(secret_key=SECRET).decode("not-a-jwt")

        assert exc_info.value.message == "Invalid or expired token"


class TestPasswordHasher:

    def test_hash_and_verify(self):
        hasher = PasslibPasswordHasher()

        password_hash = hasher.hash("s3cret-pass")

        assert password_hash != "s3cret-pass"
        assert hasher.verify("s3cret-pass", password_hash)
        assert not hasher.verify("wrong-pass", password_hash)

    def test_verify_unknown_hash_format(self):
        """Test: невідомий формат hash → False, без exception."""
        assert PasslibPasswordHasher().verify("s3cret-pass", "plain-text") is False
