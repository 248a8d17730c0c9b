"""Diagnostic logging for color-printer.

Diagnostics always go to stderr so they never interleave with the colored
lines and dot indicators written to stdout.
"""
import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = 'color_printer'


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name for terminal output."""

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[34m',       # Blue
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m'
    }

    def format(self, record):
        """Format log record with colors."""
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.COLORS['RESET']}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


def setup_logger(
    name: str = LOGGER_NAME,
    level: int = logging.INFO,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Setup logger with a colored console handler.

    Args:
        name: Logger name
        level: Logging level
        stream: Destination stream (default: sys.stderr)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers.clear()

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(ColoredFormatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    ))
    logger.addHandler(console_handler)

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Get logger instance, nested under the package logger."""
    if name != LOGGER_NAME and not name.startswith(LOGGER_NAME + '.'):
        name = f'{LOGGER_NAME}.{name}'
    return logging.getLogger(name)
