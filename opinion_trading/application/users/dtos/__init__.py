"""Data Transfer Objects для Users context."""

from .user_dto import AuthResultDTO, UserDTO

__all__ = ["UserDTO", "AuthResultDTO"]
