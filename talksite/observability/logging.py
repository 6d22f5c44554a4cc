from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog

from talksite.config import Settings

# Server loggers that would otherwise install their own plain-text handlers.
_SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

_CONFIGURED = False


def _shared_processors() -> list[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
    ]


def json_handler(stream: TextIO | None = None) -> logging.Handler:
    """Stream handler rendering both structlog events and stdlib records as JSON.

    Fields passed to stdlib loggers through ``extra=`` (e.g. by the content
    loader) end up as top-level keys.
    """

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=structlog.processors.JSONRenderer(sort_keys=True),
        foreign_pre_chain=[structlog.stdlib.ExtraAdder(), *_shared_processors()],
    )
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(formatter)
    return handler


def configure_logging(settings: Settings) -> None:
    """Route structlog and stdlib logging through one JSON handler.

    Only the first call takes effect.
    """

    global _CONFIGURED
    if _CONFIGURED:
        return

    level = logging.getLevelName(settings.log_level)

    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = json_handler()
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)

    for name in _SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers = []
        server_logger.propagate = True

    structlog.get_logger(__name__).debug("logging.configured", level=settings.log_level)
    _CONFIGURED = True
