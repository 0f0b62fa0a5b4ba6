"""Shared utilities package."""

from moonc.shared.logging import setup_logger, get_logger, LoggerAdapter
from moonc.shared.metrics import MetricsCollector

__all__ = [
    "setup_logger",
    "get_logger",
    "LoggerAdapter",
    "MetricsCollector",
]
