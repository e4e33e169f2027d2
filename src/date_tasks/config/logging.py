"""Log rendering for date-tasks.

The parsers log through plain ``logging`` loggers under ``date_tasks``;
the functions here route those records through structlog so they come
out on stderr either as console lines or as one JSON object per line.

Importing date_tasks leaves logging untouched. Call `configure_logging`
(or `configure_logging_from_config` to honour ``DATE_TASKS_LOG_LEVEL`` and
``DATE_TASKS_LOG_JSON``) from the application that wants the output.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import structlog

from .env import AppConfig, load_config

PACKAGE_LOGGER = "date_tasks"

# Applied both to structlog events and to records from stdlib loggers.
_PRE_CHAIN: tuple[structlog.types.Processor, ...] = (
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
)


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    *,
    level: int = logging.WARNING,
    log_json: bool = False,
) -> None:
    """Install a stderr handler that renders ``date_tasks`` records via structlog.

    The root logger stays at WARNING so third-party chatter is filtered;
    only the ``date_tasks`` logger is opened up to ``level``. Calling this
    again replaces the previous handler.

    Args:
        level: Level for the ``date_tasks`` logger, e.g. ``logging.DEBUG`` to
            see which RFC 2822 layout and zone each parse resolved.
        log_json: Emit JSON lines (event, level, logger, timestamp) instead
            of console text.
    """
    structlog.configure(
        processors=[
            *_PRE_CHAIN,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=list(_PRE_CHAIN),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(level)


def configure_logging_from_config(config: Optional[AppConfig] = None) -> None:
    """Apply ``log_level`` and ``log_json`` from ``config`` (or the environment)."""
    config = config if config is not None else load_config()
    configure_logging(level=config.log_level_number, log_json=config.log_json)
