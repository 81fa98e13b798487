"""Authentication infrastructure.

JWT token management and password hashing.
"""

from .jwt_manager import InvalidTokenError, JWTManager
from .password_hasher import PasslibPasswordHasher

__all__ = ["JWTManager", "InvalidTokenError", "PasslibPasswordHasher"]
