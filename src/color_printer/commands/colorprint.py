#!/usr/bin/env python3
"""
colorprint - Print tagged, colored lines from the shell.

Usage:
    colorprint say <message> [args...]     Print one line (printf-style args)
    colorprint say -t ERROR "disk full"    Color picked from the tag
    colorprint dots -n 250                 Run the silent status indicator
    colorprint palette                     Show the available colors
    colorprint config show|get|set|init|path
"""
import argparse
import json
import logging
import sys
import time
from typing import Any, List, Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from color_printer.core.colors import PrintColor
from color_printer.core.config import CP_CONFIG_FILE, DEFAULT_CONFIG, get_config
from color_printer.core.indicator import tick
from color_printer.core.printer import emit, ok
from color_printer.utils.error_handling import handle_cli_errors
from color_printer.utils.exceptions import ConfigError
from color_printer.utils.logging import get_logger, setup_logger

logger = get_logger(__name__)

MAX_DEMO_TICKS = 120


def non_negative(convert):
    """argparse type that rejects negative numbers with a usage error."""
    def parse(text: str):
        try:
            value = convert(text)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid number: {text!r}") from None
        if value < 0:
            raise argparse.ArgumentTypeError(f"must not be negative: {text}")
        return value
    return parse


def coerce_arg(text: str) -> Any:
    """Turn a shell word into an int, a float, or leave it as a string."""
    for convert in (int, float):
        try:
            return convert(text)
        except ValueError:
            continue
    return text


def cmd_say(args):
    """Print one tagged line."""
    config = get_config()
    tag = args.tag or config.get_with_default('defaults.tag')
    color = PrintColor.parse(args.color) if args.color else config.color_for_tag(tag)
    values = [coerce_arg(a) for a in args.args]

    logger.debug("say: tag=%s color=%s args=%r", tag, color.name, values)
    emit(color, tag, args.message, *values)


def cmd_dots(args):
    """Run the dot indicator for a fixed number of ticks."""
    config = get_config()
    color = PrintColor.parse(args.color) if args.color else config.get_color('indicator.color')
    interval = args.interval if args.interval is not None else config.get_interval()

    counter = 0
    for _ in range(args.count):
        counter = tick(color, True, counter)
        if interval:
            time.sleep(interval)

    if args.count:
        print(flush=True)
    logger.debug("dots: %d tick(s), final counter %d", args.count, counter)


def cmd_palette(args):
    """Show every color with its escape sequence."""
    table = Table(title="colorprint palette", box=box.SIMPLE)
    table.add_column("Color", style="bold")
    table.add_column("Escape")
    table.add_column("Sample")

    for color in PrintColor:
        name = color.name.lower()
        table.add_row(name, repr(color.code).strip("'"), Text("[INFO] sample", style=name))

    Console().print(table)


def cmd_config_show(args):
    """Display current configuration."""
    config = get_config()

    if config.config_exists():
        print(json.dumps(config.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(f"No configuration file found at {CP_CONFIG_FILE}")
        print("Using default configuration:")
        print(json.dumps(DEFAULT_CONFIG, indent=2, ensure_ascii=False))


def cmd_config_get(args):
    """Get a specific config value."""
    value = get_config().get_with_default(args.key)

    if value is None:
        raise ConfigError(f"Key not found: {args.key}")

    if isinstance(value, (dict, list)):
        print(json.dumps(value, indent=2, ensure_ascii=False))
    else:
        print(value)


def cmd_config_set(args):
    """Set a config value."""
    config = get_config()

    if not config.config_exists():
        config.init_config()
        print(f"Created config file at {CP_CONFIG_FILE}")

    # JSON first so numbers and booleans keep their type
    try:
        value = json.loads(args.value)
    except json.JSONDecodeError:
        value = args.value

    config.set(args.key, value)
    ok("Set %s = %s", args.key, json.dumps(value) if isinstance(value, (dict, list)) else value)


def cmd_config_init(args):
    """Create default configuration file."""
    config = get_config()

    if config.config_exists():
        if not args.force:
            raise ConfigError(f"Config already exists at {CP_CONFIG_FILE} (use --force to overwrite)")
        backup_path = CP_CONFIG_FILE.with_name(CP_CONFIG_FILE.name + ".bak")
        CP_CONFIG_FILE.replace(backup_path)
        print(f"Backed up existing config to {backup_path}")

    config.init_config()
    print(f"Created default config at {CP_CONFIG_FILE}")


def cmd_config_path(args):
    """Show config file path."""
    print(CP_CONFIG_FILE)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='colorprint',
        description='Print tagged, colored lines and silent status indicators',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  colorprint say "hello"
  colorprint say -c yellow -t WARN "%d items, %.2f%% done" 5 33.333
  colorprint dots -n 150 --interval 0.02
  colorprint config set severities.NOTICE magenta
'''
    )
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Show diagnostic output on stderr')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # say
    say_parser = subparsers.add_parser('say', help='Print one tagged, colored line')
    say_parser.add_argument('message', help='Message, or printf template when args follow')
    say_parser.add_argument('args', nargs='*', help='printf arguments')
    say_parser.add_argument('--color', '-c', help='Color name (default: from the tag)')
    say_parser.add_argument('--tag', '-t', help='Severity tag (default: config defaults.tag)')

    # dots
    dots_parser = subparsers.add_parser('dots', help='Run the silent status indicator')
    dots_parser.add_argument('--count', '-n', type=non_negative(int), default=MAX_DEMO_TICKS,
                             help=f'Number of ticks (default: {MAX_DEMO_TICKS})')
    dots_parser.add_argument('--color', '-c', help='Color name (default: config indicator.color)')
    dots_parser.add_argument('--interval', type=non_negative(float),
                             help='Seconds between ticks (default: config indicator.interval_seconds)')

    # palette
    subparsers.add_parser('palette', help='Show the available colors')

    # config
    config_parser = subparsers.add_parser('config', help='Manage configuration')
    config_sub = config_parser.add_subparsers(dest='config_command', help='Config commands')
    config_sub.add_parser('show', help='Display current configuration')
    get_parser = config_sub.add_parser('get', help='Get a specific config value')
    get_parser.add_argument('key', help='Config key (dot notation)')
    set_parser = config_sub.add_parser('set', help='Set a config value')
    set_parser.add_argument('key', help='Config key (dot notation)')
    set_parser.add_argument('value', help='Value to set')
    init_parser = config_sub.add_parser('init', help='Create default configuration')
    init_parser.add_argument('--force', '-f', action='store_true',
                             help='Overwrite existing config')
    config_sub.add_parser('path', help='Show config file path')

    return parser


COMMANDS = {
    'say': cmd_say,
    'dots': cmd_dots,
    'palette': cmd_palette,
}

CONFIG_COMMANDS = {
    'show': cmd_config_show,
    'get': cmd_config_get,
    'set': cmd_config_set,
    'init': cmd_config_init,
    'path': cmd_config_path,
}


@handle_cli_errors
def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        setup_logger(level=logging.DEBUG)

    if not args.command:
        parser.print_help()
        sys.exit(0)

    if args.command == 'config':
        if not args.config_command:
            parser.parse_args(['config', '--help'])
        CONFIG_COMMANDS[args.config_command](args)
        return

    COMMANDS[args.command](args)


if __name__ == '__main__':
    main()
