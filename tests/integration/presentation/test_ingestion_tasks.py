"""Tests для Celery ingestion task (file-based SQLite, built-in feed)."""

import asyncio
import logging

import pytest

from opinion_trading.config import Settings
from opinion_trading.infrastructure.persistence.sqlalchemy import build_engine, create_tables
from opinion_trading.presentation.workers.tasks import ingestion_tasks


@pytest.fixture
def file_settings(tmp_path):
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'ingestion.db'}",
        environment="development",
        external_feed_url=None,
    )


async def _init_schema(settings: Settings) -> None:
    engine = build_engine(settings)
    await create_tables(engine)
    await engine.dispose()


class TestIngestionTasks:

    async def test_run_ingestion_is_repeatable(self, file_settings):
        """Test: перший run створює 4 sample events, другий - нічого."""
        await _init_schema(file_settings)

        assert await ingestion_tasks.run_ingestion(file_settings) == 4
        assert await ingestion_tasks.run_ingestion(file_settings) == 0

    def test_task_reports_created_count(self, file_settings, monkeypatch):
        asyncio.run(_init_schema(file_settings))
        monkeypatch.setattr(ingestion_tasks, "get_settings", lambda: file_settings)

        assert ingestion_tasks.fetch_external_events.run() == {"created": 4}

    def test_task_with_info_logging(self, file_settings, monkeypatch, caplog):
        caplog.set_level(logging.INFO)
        asyncio.run(_init_schema(file_settings))
        monkeypatch.setattr(ingestion_tasks, "get_settings", lambda: file_settings)

        assert ingestion_tasks.fetch_external_events.run() == {"created": 4}
        [record] = [r for r in caplog.records if r.getMessage() == "task.fetch_external_events.completed"]
        assert record.created_count == 4
