"""Celery Application Configuration.

Celery setup with:
- Redis broker and result backend
- Beat scheduler for periodic external feed ingestion

Usage:
    # Start worker
    celery -A opinion_trading.presentation.workers worker --loglevel=info

    # Start beat scheduler
    celery -A opinion_trading.presentation.workers beat --loglevel=info
"""

from celery import Celery

from opinion_trading.config import get_settings

settings = get_settings()

celery_app = Celery(
    "opinion_trading_workers",
    broker=settings.celery_broker_url,
    backend=settings.celery_result_backend,
    include=[
        "opinion_trading.presentation.workers.tasks.ingestion_tasks",
    ],
)

celery_app.conf.update(
    # ==================== Task Settings ====================
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,

    # Task execution
    task_acks_late=settings.celery_task_acks_late,
    task_time_limit=300,
    task_soft_time_limit=240,

    result_expires=3600,

    # ==================== Worker Settings ====================
    worker_prefetch_multiplier=1,
    worker_concurrency=settings.celery_worker_concurrency,
    worker_max_tasks_per_child=1000,

    # ==================== Broker Settings ====================
    broker_connection_retry_on_startup=True,

    # ==================== Beat Scheduler ====================
    beat_schedule={
        "fetch-external-events": {
            "task": "opinion_trading.presentation.workers.tasks.ingestion_tasks.fetch_external_events",
            "schedule": settings.external_feed_poll_interval,
        },
    },

    task_routes={
        "opinion_trading.presentation.workers.tasks.ingestion_tasks.*": {"queue": "ingestion"},
    },
    task_default_queue="default",
)
