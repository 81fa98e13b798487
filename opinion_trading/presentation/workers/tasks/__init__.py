"""Celery tasks."""

from .ingestion_tasks import fetch_external_events, run_ingestion

__all__ = ["fetch_external_events", "run_ingestion"]
