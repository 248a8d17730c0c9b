"""Custom exceptions for color-printer.

Only the command line and configuration layers raise these. The line
emitter and the dot indicator never raise for bad input.
"""


class ColorPrinterError(Exception):
    """Base exception for color-printer.

    All custom exceptions should inherit from this class.
    """
    pass


class InvalidColorError(ColorPrinterError):
    """Unknown color name.

    Raised when a color name from the command line or the configuration
    file does not match any PrintColor member.
    """
    pass


class ConfigError(ColorPrinterError):
    """Error in configuration.

    Raised when a configuration key is missing or its value is unusable.
    """
    pass
