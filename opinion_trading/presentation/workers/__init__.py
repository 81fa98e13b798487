"""Celery workers for background processing.

Usage:
    # Start worker
    celery -A opinion_trading.presentation.workers worker --loglevel=info

    # Start beat scheduler
    celery -A opinion_trading.presentation.workers beat --loglevel=info
"""

from .celery_app import celery_app

__all__ = ["celery_app"]
