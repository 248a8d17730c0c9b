"""Silent status indicator.

Draws an accumulating run of dots on one terminal line so a long quiet
phase still shows signs of life. The dot count belongs to the caller:
``tick`` takes the current count and returns the new one.

    counter = 0
    while waiting:
        counter = tick(PrintColor.GREEN, is_silent, counter)
"""
import sys
from dataclasses import dataclass
from typing import Optional, TextIO

from color_printer.core.colors import RESET, PrintColor

INDICATOR_TAG = "[INFO] "
MAX_DOTS = 100
CLEAR_WIDTH = len(INDICATOR_TAG) + MAX_DOTS


def tick(color: PrintColor, active: bool, counter: int,
         stream: Optional[TextIO] = None) -> int:
    """
    Advance and redraw the indicator when ``active`` is true.

    Returns the updated counter, always in ``[1, MAX_DOTS]`` after an
    active tick. An inactive tick writes nothing and returns ``counter``
    untouched, so a paused run can resume later.
    """
    if not active:
        return counter

    out = stream if stream is not None else sys.stdout
    counter += 1

    if counter > MAX_DOTS:
        out.write("\r" + " " * CLEAR_WIDTH + "\r")
        out.flush()
        counter = 1

    out.write(f"\r{color.code}{INDICATOR_TAG}{'.' * counter}{RESET}")
    out.flush()
    return counter


@dataclass
class SilentStatusIndicator:
    """A dot indicator bound to one call site, keeping its own count."""
    color: PrintColor = PrintColor.GREEN
    count: int = 0

    def tick(self, active: bool = True, stream: Optional[TextIO] = None) -> int:
        self.count = tick(self.color, active, self.count, stream=stream)
        return self.count
