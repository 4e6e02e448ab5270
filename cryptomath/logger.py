"""Structured logging using structlog.

Library modules obtain loggers through get_logger(), which wraps a standard
library logger with cryptomath's own processor chain. Global structlog
configuration is left alone, so importing cryptomath never changes how the
host application's structlog loggers behave. Applications (and the
cryptomath CLI) call configure_logging() to route output to stdout.
"""

import logging
import sys
from typing import List

import structlog
from structlog.types import EventDict, Processor

from . import config

_json_logs = config.LOG_JSON
_json_renderer = structlog.processors.JSONRenderer()
_console_renderer = structlog.dev.ConsoleRenderer(colors=False)


def _render(logger: logging.Logger, method_name: str, event_dict: EventDict) -> str:
    """Render with the format selected by the last configure_logging() call."""
    renderer = _json_renderer if _json_logs else _console_renderer
    return renderer(logger, method_name, event_dict)


def _processors() -> List[Processor]:
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        _render,
    ]


def configure_logging(log_level: str = config.LOG_LEVEL, json_logs: bool = config.LOG_JSON) -> None:
    """Configure structured logging for an application.

    Args:
        log_level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Whether to output logs in JSON format
    """
    global _json_logs
    _json_logs = json_logs

    structlog.configure(
        processors=_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper(), logging.WARNING),
        force=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        structlog logger wrapping the standard library logger `name`
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


__all__ = ["configure_logging", "get_logger"]
