"""
Logging configuration and utilities for the memory calculator.
"""

import sys
import logging
import structlog
from typing import Optional
from rich.logging import RichHandler
from rich.console import Console

from ..config import LOG_LEVELS, settings
from ..exceptions import ConfigurationError


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    log_file: Optional[str] = None
) -> None:
    """
    Setup structured logging configuration.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Log format (json, text)
        log_file: Optional log file path

    Raises:
        ConfigurationError: If the log level is not a known level name
    """
    # Use settings if not provided
    log_level = log_level or settings.monitoring.log_level
    log_format = log_format or settings.monitoring.log_format
    log_file = log_file or settings.monitoring.log_file
    if log_level.upper() not in LOG_LEVELS:
        raise ConfigurationError(
            f"Unknown log level '{log_level}'",
            details={"log_level": log_level, "supported": list(LOG_LEVELS)},
        )
    level = getattr(logging, log_level.upper())

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root = logging.getLogger()
    root.setLevel(level)

    # The report owns stdout, log lines go to stderr
    if settings.monitoring.environment == "development":
        console = Console(stderr=True)
        handler: logging.Handler = RichHandler(console=console, rich_tracebacks=True, show_path=False)
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(message)s"))
    handler.setLevel(level)
    root.addHandler(handler)

    # Add file handler if specified
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        root.addHandler(file_handler)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name

    Returns:
        Structured logger instance
    """
    return structlog.get_logger(name)


class LoggerMixin:
    """Mixin class to add logging capabilities to any class."""

    @property
    def logger(self) -> structlog.stdlib.BoundLogger:
        """Get logger instance for this class."""
        return get_logger(self.__class__.__name__)
