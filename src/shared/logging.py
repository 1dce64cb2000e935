"""
Logging Configuration - Shared Layer

Structured logging for the service and for test hosts. Log records from
both structlog and the standard library go through the same processor
chain, rendered for the console in development and as JSON in production.
"""

import logging
import os
import sys
from typing import Any, List, Optional

import structlog
from structlog.types import Processor

from src.shared.consts import EnumEnvironment

DEFAULT_LOG_LEVEL = "INFO"


def _env_default(name: str, fallback: Optional[str] = None) -> Optional[str]:
    value = os.environ.get(name)
    return value if value else fallback


def _shared_processors() -> List[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def _build_handlers(log_file: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    return handlers


def configure_logging(
    level: Optional[str] = None,
    format_string: Optional[str] = None,
    file_path: Optional[str] = None,
    environment: str = EnumEnvironment.DEVELOPMENT.value,
) -> None:
    """
    Configure structlog and the standard logging root logger.

    Called once with environment defaults at import time of the app module
    and again once settings are loaded.

    Args:
        level: Log level name, falls back to ``LOG_LEVEL``.
        format_string: Accepted for settings compatibility; rendering is
            handled by structlog processors.
        file_path: Optional log file, falls back to ``LOG_FILE_PATH``.
        environment: Deployment environment name.
    """
    log_level = (level or _env_default("LOG_LEVEL", DEFAULT_LOG_LEVEL)).upper()
    log_file = file_path or _env_default("LOG_FILE_PATH")
    numeric_level = getattr(logging, log_level, logging.INFO)

    renderer: Processor
    if environment.lower() == EnumEnvironment.PRODUCTION.value:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
        foreign_pre_chain=_shared_processors(),
    )

    handlers = _build_handlers(log_file)
    for handler in handlers:
        handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.handlers = handlers
    root_logger.setLevel(numeric_level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.getLogger(__name__).debug(
        "Logging configured with level %s (file=%s)", log_level, log_file
    )


def update_logging_from_settings(settings: Any) -> None:
    """
    Reconfigure logging from loaded application settings.

    Args:
        settings: Object exposing ``logging`` (level, format, file_path)
            and ``environment``.
    """
    try:
        log_settings = settings.logging
        level = getattr(log_settings.level, "value", log_settings.level)
        environment = getattr(settings.environment, "value", settings.environment)

        configure_logging(
            level=level,
            format_string=log_settings.format,
            file_path=log_settings.file_path,
            environment=environment,
        )
    except (AttributeError, OSError, ValueError) as exc:
        logging.error(f"Failed to update logging from settings: {exc}")


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger configured for the project."""
    return structlog.get_logger(name)
