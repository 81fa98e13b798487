"""Pydantic schemas for Auth API requests/responses."""

from datetime import datetime

from pydantic import Field

from .common import CamelModel, Money


# ============================================================================
# REQUEST SCHEMAS
# ============================================================================


class RegisterRequest(CamelModel):
    """Request schema для реєстрації.

    Example:
        {"username": "alice", "email": "alice@example.com", "password": "secret1"}
    """

    username: str = Field(..., min_length=1, max_length=50)
    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=1)


class LoginRequest(CamelModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class ChangePasswordRequest(CamelModel):
    """Example: {"oldPassword": "secret1", "newPassword": "secret2"}"""

    old_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=1)


# ============================================================================
# RESPONSE SCHEMAS
# ============================================================================


class UserResponse(CamelModel):
    """User profile (без password hash)."""

    id: int
    username: str
    email: str
    balance: Money
    role: str
    created_at: datetime
    updated_at: datetime


class AuthResponse(CamelModel):
    """Register/login result."""

    user: UserResponse
    token: str
