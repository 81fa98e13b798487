"""FetchExternalEvents Command - імпорт нових events з external feed."""

from dataclasses import dataclass

from opinion_trading.application.shared import Command


@dataclass(frozen=True)
class FetchExternalEventsCommand(Command):
    """Command для ingestion (Celery beat або admin endpoint).

    Events з таким самим title в тій самій category пропускаються.
    """
