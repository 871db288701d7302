"""Structured logging for flowsmith.

Engine modules log snake_case events with keyword context through structlog.
Every event, including those of stdlib loggers such as jinja2's, is rendered
once by a single stderr handler: a colored console renderer by default, or
one JSON object per line when ``FLOWSMITH_LOG_FORMAT=json``.

The generator binds ``workflow`` and ``application`` for the duration of each
build, so resolver and handler events carry them without passing them around.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog
from structlog.types import Processor

__all__ = [
    "get_logger",
    "configure_logging",
    "bind_context",
    "clear_context",
    "unbind_context",
]

LOG_FORMAT_ENV_VAR = "FLOWSMITH_LOG_FORMAT"
LOG_LEVEL_ENV_VAR = "FLOWSMITH_LOG_LEVEL"

# Applied to structlog events and to records from plain stdlib loggers
_PRE_CHAIN: list[Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
]


def _level_from_env() -> int:
    name = os.environ.get(LOG_LEVEL_ENV_VAR, "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def _render_processors(use_json: bool) -> list[Processor]:
    if use_json:
        return [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]
    return [
        structlog.dev.ConsoleRenderer(
            colors=sys.stderr.isatty(),
            exception_formatter=structlog.dev.plain_traceback,
        ),
    ]


def configure_logging(
    *,
    force_json: bool = False,
    level: int | None = None,
) -> None:
    """Route structlog and stdlib logging to one stderr handler.

    Safe to call more than once; the CLI reconfigures after parsing its
    verbosity flags. Loggers created earlier pick up the new renderer and
    level because both live on the root handler.

    Args:
        force_json: Emit JSON lines regardless of FLOWSMITH_LOG_FORMAT.
        level: Root log level. If None, reads FLOWSMITH_LOG_LEVEL (INFO).
    """
    use_json = force_json or (
        os.environ.get(LOG_FORMAT_ENV_VAR, "").lower() == "json"
    )
    log_level = level if level is not None else _level_from_env()

    structlog.configure(
        processors=[
            *_PRE_CHAIN,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_PRE_CHAIN,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *_render_processors(use_json),
            ],
        )
    )

    root_logger = logging.getLogger()
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger, usually ``get_logger(__name__)``."""
    log: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return log


def bind_context(**context: Any) -> None:
    """Add ``context`` to every event logged from this context."""
    structlog.contextvars.bind_contextvars(**context)


def unbind_context(*keys: str) -> None:
    structlog.contextvars.unbind_contextvars(*keys)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
