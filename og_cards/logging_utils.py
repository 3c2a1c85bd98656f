"""Structured logging for the card service, built on structlog."""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.typing import Processor

from . import config


def add_service_context(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Tag every event with the service name and deployment environment."""
    event_dict.setdefault("service.name", config.SERVICE_NAME)
    event_dict.setdefault("deployment.environment", config.ENVIRONMENT)
    return event_dict


def configure_logging(log_level: str | None = None, log_format: str | None = None) -> None:
    """
    Configure stdlib logging and structlog for the process.

    Args:
        log_level: Level name, defaults to LOG_LEVEL.
        log_format: "json" for one JSON object per line, "console" for
            human-readable output. Defaults to LOG_FORMAT.
    """
    log_level = (log_level or config.LOG_LEVEL).upper()
    log_format = (log_format or config.LOG_FORMAT).lower()

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        add_service_context,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
    ]
    if log_format == "json":
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors += [structlog.dev.set_exc_info, structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())]

    logging.basicConfig(
        format="%(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
        level=getattr(logging, log_level, logging.INFO),
        force=True,
    )
    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def create_logger(name: str | None = None) -> Any:
    logger = structlog.get_logger()
    if name:
        logger = logger.bind(logger_name=name)
    return logger
