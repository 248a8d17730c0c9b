"""Utility modules for color-printer."""

from color_printer.utils.exceptions import (
    ColorPrinterError,
    InvalidColorError,
    ConfigError,
)
from color_printer.utils.logging import (
    ColoredFormatter,
    setup_logger,
    get_logger,
)

__all__ = [
    # Exceptions
    'ColorPrinterError',
    'InvalidColorError',
    'ConfigError',
    # Diagnostic logging
    'ColoredFormatter',
    'setup_logger',
    'get_logger',
]
