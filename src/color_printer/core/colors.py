"""ANSI color table for color-printer."""
from enum import Enum

from color_printer.utils.exceptions import InvalidColorError

RESET = '\033[0m'


class PrintColor(str, Enum):
    """Foreground colors, valued by their SGR parameter."""
    RED = '31'
    GREEN = '32'
    YELLOW = '33'
    BLUE = '34'
    MAGENTA = '35'
    CYAN = '36'
    WHITE = '37'

    @property
    def code(self) -> str:
        """ANSI escape sequence that switches the terminal to this color."""
        return f'\033[{self.value}m'

    @classmethod
    def parse(cls, name: str) -> 'PrintColor':
        """Resolve a case-insensitive color name like ``"green"``."""
        if isinstance(name, cls):
            return name
        try:
            return cls[str(name).strip().upper()]
        except KeyError:
            choices = ', '.join(c.name.lower() for c in cls)
            raise InvalidColorError(f"Unknown color '{name}' (choose from: {choices})") from None
