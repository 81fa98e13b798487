"""Logging для opinion-trading API.

structlog поверх stdlib logging: один root handler, через який проходять
і structlog loggers (infra: feeds, ws, auth), і звичайні
``logging.getLogger(__name__)`` з ``extra={}`` (handlers, routes, workers).

- ``log_format=json`` - один JSON object на рядок (staging / production)
- ``log_format=console`` - кольоровий вивід для локальної розробки
- request_id / method / path прив'язуються middleware через contextvars
- паролі, JWT та Authorization header ніколи не потрапляють у вивід
"""

import logging
import sys
from typing import Any

import structlog
from structlog.typing import EventDict, Processor

from .settings import Settings, get_settings

SERVICE_NAME = "opinion-trading"
REDACTED = "[REDACTED]"

# Поля auth flow (register / login / change-password) та JWT config.
SENSITIVE_KEYS = frozenset({
    "password",
    "old_password",
    "new_password",
    "password_hash",
    "token",
    "access_token",
    "authorization",
    "jwt_secret_key",
})

# Third-party loggers, яким достатньо WARNING.
_QUIET_LOGGERS = ("uvicorn.access", "httpx", "httpcore", "aiosqlite")

_HANDLER_NAME = "opinion_trading.root"


def _redact(value: Any) -> Any:
    if isinstance(value, dict):
        return {
            key: REDACTED if str(key).lower() in SENSITIVE_KEYS else _redact(item)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return type(value)(_redact(item) for item in value)
    return value


def filter_sensitive_data(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Processor: маскує секрети, включно з вкладеними dict / list (напр. request body)."""
    for key, value in event_dict.items():
        event_dict[key] = REDACTED if key.lower() in SENSITIVE_KEYS else _redact(value)
    return event_dict


def _service_stamp(settings: Settings) -> Processor:
    context = {
        "service": SERVICE_NAME,
        "environment": settings.environment,
        "version": settings.app_version,
    }

    def stamp(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        for key, value in context.items():
            event_dict.setdefault(key, value)
        return event_dict

    return stamp


def _renderer(settings: Settings) -> Processor:
    if settings.log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=not settings.is_production)


def setup_logging(settings: Settings | None = None) -> None:
    """Налаштувати structlog та root logger.

    Викликається з ``create_app``. Повторний виклик (кожен TestClient у тестах)
    замінює лише власний handler, чужі handlers на root (pytest caplog) лишаються.

    Args:
        settings: Settings (default: get_settings()).
    """
    settings = settings or get_settings()

    shared: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        _service_stamp(settings),
        filter_sensitive_data,
        structlog.processors.StackInfoRenderer(),
    ]
    if settings.log_format == "json":
        shared.append(structlog.processors.format_exc_info)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            # stdlib records: extra={} стає частиною event dict
            foreign_pre_chain=[structlog.stdlib.ExtraAdder(), *shared],
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(settings),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers = [h for h in root.handlers if h.get_name() != _HANDLER_NAME] + [handler]
    root.setLevel(settings.log_level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if settings.db_echo else logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def bind_request_context(request_id: str, **context: Any) -> None:
    """Прив'язати request_id (+ method, path, user_id...) до всіх логів поточного request."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(request_id=request_id, **context)


def clear_request_context() -> None:
    structlog.contextvars.clear_contextvars()
