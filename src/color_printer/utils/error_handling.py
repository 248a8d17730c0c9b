"""Error handling utilities for the colorprint command line.

Provides context managers and decorators for consistent error handling.
"""
import sys
from contextlib import contextmanager
from functools import wraps
from typing import Callable, Generator, TypeVar

from color_printer.core.printer import error
from color_printer.utils.exceptions import ColorPrinterError

F = TypeVar('F', bound=Callable)


@contextmanager
def cli_error_handler() -> Generator[None, None, None]:
    """Context manager for CLI error handling.

    Catches ColorPrinterError exceptions and converts them to sys.exit()
    calls with a red ``[ERROR]`` line on stderr.

    Usage:
        def main():
            with cli_error_handler():
                color = PrintColor.parse(args.color)
                # ... rest of command logic
    """
    try:
        yield
    except ColorPrinterError as e:
        error(str(e), stream=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nAborted.")
        sys.exit(130)


def handle_cli_errors(func: F) -> F:
    """Decorator for CLI main functions.

    Same behavior as cli_error_handler, applied to a whole function.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        with cli_error_handler():
            return func(*args, **kwargs)
    return wrapper  # type: ignore
