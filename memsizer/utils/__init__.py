"""
Utility modules for the memory calculator.
"""

from .logging import setup_logging, get_logger, LoggerMixin
from .metrics import MetricsCollector, metrics_collector
from .validation import parse_export, ensure_valid_cost

__all__ = [
    "setup_logging",
    "get_logger",
    "LoggerMixin",
    "MetricsCollector",
    "metrics_collector",
    "parse_export",
    "ensure_valid_cost",
]
