"""Tagged, colored line output.

Every line has the shape ``<color>[<TAG>] <message><reset>`` and is flushed
as soon as it is written.
"""
import sys
from typing import Any, Optional, TextIO

from color_printer.core.colors import RESET, PrintColor
from color_printer.core.formatting import render_message


def format_line(color: PrintColor, tag: str, payload: Any, *args: Any) -> str:
    """Build the colored line for ``payload`` without the trailing newline."""
    message = render_message(payload, *args)
    return f"{color.code}[{tag}] {message}{RESET}"


def emit(color: PrintColor, tag: str, payload: Any, *args: Any,
         stream: Optional[TextIO] = None) -> None:
    """
    Print a tagged message in ``color``.

    ``payload`` is either any printable value, or a printf-style template
    when ``args`` are given:

        emit(PrintColor.GREEN, "INFO", "hello")
        emit(PrintColor.RED, "ERROR", True)
        emit(PrintColor.YELLOW, "WARN", "%d items, %.2f%% done", 5, 33.333)
    """
    out = stream if stream is not None else sys.stdout
    print(format_line(color, tag, payload, *args), file=out, flush=True)


def info(payload: Any, *args: Any, stream: Optional[TextIO] = None) -> None:
    """Print an info message in blue."""
    emit(PrintColor.BLUE, "INFO", payload, *args, stream=stream)


def ok(payload: Any, *args: Any, stream: Optional[TextIO] = None) -> None:
    """Print a success message in green."""
    emit(PrintColor.GREEN, "OK", payload, *args, stream=stream)


def warning(payload: Any, *args: Any, stream: Optional[TextIO] = None) -> None:
    """Print a warning message in yellow."""
    emit(PrintColor.YELLOW, "WARNING", payload, *args, stream=stream)


def error(payload: Any, *args: Any, stream: Optional[TextIO] = None) -> None:
    """Print an error message in red."""
    emit(PrintColor.RED, "ERROR", payload, *args, stream=stream)


def debug(payload: Any, *args: Any, stream: Optional[TextIO] = None) -> None:
    """Print a debug message in cyan."""
    emit(PrintColor.CYAN, "DEBUG", payload, *args, stream=stream)
