"""Message rendering shared by every emitter entry point.

A payload is either a plain value printed in its natural text form, or a
printf-style template combined with positional arguments. Both paths end in
a plain string; rendering never raises.
"""
import re
from typing import Any, Sequence, Tuple

from color_printer.utils.logging import get_logger

logger = get_logger(__name__)

# %[flags][width][.precision][length]conversion
_SPECIFIER = re.compile(
    r'%(?P<head>[-+ #0]*(?P<width>\*|\d+)?(?:\.(?P<precision>\*|\d*))?)'
    r'(?P<length>hh|ll|[hljztLq])?'
    r'(?P<conv>.)',
    re.DOTALL,
)


def render_value(value: Any) -> str:
    """Render a single value in its natural text form."""
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float):
        # Six significant digits, like the default stream precision.
        return '%g' % value
    if isinstance(value, str):
        return value
    try:
        return str(value)
    except Exception as e:
        logger.debug("Could not render %s value: %s", type(value).__name__, e)
        return ''


def normalize_template(template: str) -> Tuple[str, int]:
    """
    Drop C length modifiers from every specifier in ``template``.

    Returns the cleaned template and the number of arguments it consumes,
    counting ``*`` widths and precisions. ``%%`` consumes nothing.
    """
    consumed = 0

    def strip_length(match):
        nonlocal consumed
        if match.group('conv') != '%':
            consumed += 1
            consumed += match.group('width') == '*'
            consumed += match.group('precision') == '*'
        return '%' + match.group('head') + match.group('conv')

    return _SPECIFIER.sub(strip_length, template), consumed


def render_template(template: str, args: Sequence[Any]) -> str:
    """
    Substitute ``args`` into a printf-style ``template``.

    Specifiers are consumed left to right and surplus arguments are
    ignored. Too few arguments, a type mismatch, or an unsupported
    conversion such as ``%p`` renders as the empty string.
    """
    try:
        text, consumed = normalize_template(str(template))
        return text % tuple(args[:consumed])
    except Exception as e:
        logger.debug("Could not format %r with %d argument(s): %s", template, len(args), e)
        return ''


def render_message(payload: Any, *args: Any) -> str:
    """
    Render a payload with optional printf arguments.

    With no arguments the payload is rendered verbatim, so a literal ``%``
    in a plain string is never treated as a specifier.
    """
    if args:
        return render_template(payload, args)
    return render_value(payload)
