"""API v1 (routes + schemas)."""
