"""Users application layer: registration, login, password change, profile."""
