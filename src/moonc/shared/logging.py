"""Centralized logging utilities."""

import logging
import sys
from typing import Optional, TextIO


def setup_logger(
    name: str,
    level: int = logging.WARNING,
    stream: Optional[TextIO] = None
) -> logging.Logger:
    """
    Set up a logger writing to a console stream.

    Console output goes to stderr unless another stream is given; stdout
    belongs to compiler output.

    Args:
        name: Logger name
        level: Logging level
        stream: Stream for the console handler

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    formatter = logging.Formatter(
        '[%(asctime)s] [%(name)s] [%(levelname)s] [%(threadName)s] %(message)s',
        datefmt='%H:%M:%S')

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the package hierarchy.

    Names outside ``moonc`` are nested under it so that one
    ``setup_logger('moonc')`` call configures every module.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    if name != 'moonc' and not name.startswith('moonc.'):
        name = f'moonc.{name}'
    return logging.getLogger(name)


class LoggerAdapter:
    """Adapter to make standard logger compatible with ILogger protocol."""

    def __init__(self, logger: logging.Logger):
        self._logger = logger

    def debug(self, message: str, **kwargs) -> None:
        """Log debug message."""
        self._logger.debug(message, extra=kwargs)

    def info(self, message: str, **kwargs) -> None:
        """Log info message."""
        self._logger.info(message, extra=kwargs)

    def warning(self, message: str, **kwargs) -> None:
        """Log warning message."""
        self._logger.warning(message, extra=kwargs)

    def error(self, message: str, **kwargs) -> None:
        """Log error message."""
        self._logger.error(message, extra=kwargs)

    def exception(self, message: str, **kwargs) -> None:
        """Log exception with traceback."""
        self._logger.exception(message, extra=kwargs)
