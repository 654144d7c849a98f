"""
Structlog configuration and helpers.

Application code logs through ``get_logger(name)`` with dotted event names
(``deck.created``, ``slide.updated``) and keyword fields; request-scoped
fields such as ``request_id`` come from contextvars.
"""

from __future__ import annotations

import logging
from typing import Optional

import structlog

# Libraries that are chatty at INFO; kept at WARNING unless SQL echo is on.
_NOISY_LOGGERS = ("sqlalchemy.engine", "aiosqlite", "httpx", "httpcore")


def setup_logging(
    log_level: Optional[str] = None, log_format: Optional[str] = None
) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        log_level: Level name such as "DEBUG". Defaults to ``LOG_LEVEL``.
        log_format: "json" or "console". Defaults to ``LOG_FORMAT``.
    """
    from app.infra.config.settings import get_settings

    settings = get_settings()
    level_name = (log_level or settings.log_level or "INFO").upper()
    fmt = (log_format or settings.log_format or "json").lower()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(level=level, format="%(message)s")
    noisy_level = logging.INFO if settings.debug_sql else logging.WARNING
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, noisy_level))

    if fmt == "json":
        renderer = structlog.processors.JSONRenderer(sort_keys=True)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:  # type: ignore[name-defined]
    return structlog.get_logger(name) if name else structlog.get_logger()


def bind_context(**kwargs) -> None:
    """Bind correlation fields (request_id, deck_id, slide_id) for this task."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
