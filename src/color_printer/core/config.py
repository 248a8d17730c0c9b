"""
Configuration for the colorprint command line.
Handles loading, saving, and looking up defaults such as tag colors.

The library functions never read this; they take explicit arguments.
"""
import json
import pathlib
from typing import Any, Dict, Optional

from color_printer.core.colors import PrintColor
from color_printer.utils.exceptions import ConfigError
from color_printer.utils.logging import get_logger

logger = get_logger(__name__)

CP_CONFIG_DIR = pathlib.Path.home() / ".color-printer"
CP_CONFIG_FILE = CP_CONFIG_DIR / "config.json"

DEFAULT_CONFIG: Dict[str, Any] = {
    "version": "1.0",
    "defaults": {
        "color": "green",
        "tag": "INFO"
    },
    "severities": {
        "INFO": "blue",
        "OK": "green",
        "WARNING": "yellow",
        "ERROR": "red",
        "DEBUG": "cyan"
    },
    "indicator": {
        "color": "green",
        "interval_seconds": 0.05
    }
}


class PrinterConfig:
    """Configuration manager for colorprint (singleton)."""

    _instance: Optional['PrinterConfig'] = None
    _config: Dict[str, Any]

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._config = {}
            cls._instance._loaded = False
        return cls._instance

    def _ensure_loaded(self) -> None:
        if not self._loaded:
            self._load()

    def _load(self) -> None:
        """Load configuration from file or use defaults."""
        if CP_CONFIG_FILE.exists():
            try:
                with open(CP_CONFIG_FILE, 'r', encoding='utf-8') as f:
                    self._config = json.load(f)
            except (json.JSONDecodeError, IOError) as e:
                logger.warning("Could not read %s: %s", CP_CONFIG_FILE, e)
                self._config = self._deep_copy(DEFAULT_CONFIG)
        else:
            self._config = self._deep_copy(DEFAULT_CONFIG)
        self._loaded = True

    def _deep_copy(self, d: Dict[str, Any]) -> Dict[str, Any]:
        return json.loads(json.dumps(d))

    def reload(self) -> None:
        """Force reload configuration from file."""
        self._loaded = False
        self._ensure_loaded()

    def get(self, path: str, default: Any = None) -> Any:
        """
        Get config value by dot-notation path.

        Example: config.get('defaults.tag', 'INFO')
        """
        self._ensure_loaded()
        value = self._config

        for key in path.split('.'):
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value if value is not None else default

    def set(self, path: str, value: Any) -> None:
        """
        Set config value by dot-notation path and persist.

        Example: config.set('severities.NOTICE', 'magenta')
        """
        self._ensure_loaded()
        keys = path.split('.')
        config = self._config

        for key in keys[:-1]:
            config = config.setdefault(key, {})
            if not isinstance(config, dict):
                raise ConfigError(f"Cannot set '{path}': '{key}' is not a section")

        config[keys[-1]] = value
        self._save()

    def _save(self) -> None:
        CP_CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        with open(CP_CONFIG_FILE, 'w', encoding='utf-8') as f:
            json.dump(self._config, f, indent=2, ensure_ascii=False)

    def get_with_default(self, path: str) -> Any:
        """Get config value with fallback to DEFAULT_CONFIG."""
        value = self.get(path)
        if value is not None:
            return value

        default_value = DEFAULT_CONFIG
        for key in path.split('.'):
            if isinstance(default_value, dict) and key in default_value:
                default_value = default_value[key]
            else:
                return None
        return default_value

    def get_color(self, path: str) -> PrintColor:
        """Read a color name at ``path`` and resolve it to a PrintColor."""
        name = self.get_with_default(path)
        if name is None:
            raise ConfigError(f"No color configured at '{path}'")
        return PrintColor.parse(name)

    def color_for_tag(self, tag: str) -> PrintColor:
        """
        Pick the color for a severity tag.

        Precedence:
        1. severities.<TAG> (case-insensitive tag)
        2. defaults.color
        """
        self._ensure_loaded()
        severities = self.get('severities')
        if severities is None:
            severities = DEFAULT_CONFIG['severities']
        if not isinstance(severities, dict):
            raise ConfigError(
                f"'severities' must map tags to color names, got {type(severities).__name__}")

        wanted = tag.upper()
        for name, color in severities.items():
            if name.upper() == wanted:
                return PrintColor.parse(color)

        return self.get_color('defaults.color')

    def get_interval(self) -> float:
        """Seconds between indicator ticks, from indicator.interval_seconds."""
        value = self.get_with_default('indicator.interval_seconds')
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
            raise ConfigError(
                f"'indicator.interval_seconds' must be a non-negative number, got {value!r}")
        return float(value)

    def init_config(self) -> bool:
        """
        Initialize configuration file with defaults.
        Returns True if created, False if already exists.
        """
        if CP_CONFIG_FILE.exists():
            return False

        self._config = self._deep_copy(DEFAULT_CONFIG)
        self._save()
        self._loaded = True
        return True

    def to_dict(self) -> Dict[str, Any]:
        """Return full configuration as dictionary."""
        self._ensure_loaded()
        return self._deep_copy(self._config)

    def config_exists(self) -> bool:
        return CP_CONFIG_FILE.exists()


def get_config() -> PrinterConfig:
    """Get the singleton config instance."""
    return PrinterConfig()


def color_for_tag(tag: str) -> PrintColor:
    """Resolve the configured color for a severity tag."""
    return get_config().color_for_tag(tag)
