"""
color-printer - tagged, colored console lines and a silent status indicator.

Version: 1.0.0
"""

__version__ = '1.0.0'

from color_printer.core.colors import RESET, PrintColor
from color_printer.core.formatting import render_message
from color_printer.core.indicator import MAX_DOTS, SilentStatusIndicator, tick
from color_printer.core.printer import debug, emit, error, format_line, info, ok, warning

__all__ = [
    'PrintColor',
    'RESET',
    'render_message',
    'emit',
    'format_line',
    'info',
    'ok',
    'warning',
    'error',
    'debug',
    'tick',
    'SilentStatusIndicator',
    'MAX_DOTS',
]
