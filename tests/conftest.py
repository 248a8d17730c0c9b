"""Pytest configuration and fixtures for color-printer tests."""
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture(autouse=True)
def reset_config_singleton():
    """Reset PrinterConfig singleton between tests."""
    from color_printer.core import config as config_module

    original_instance = config_module.PrinterConfig._instance
    config_module.PrinterConfig._instance = None

    yield

    config_module.PrinterConfig._instance = original_instance


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by --verbose so they don't outlive capsys."""
    logger = logging.getLogger("color_printer")

    yield

    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def temp_config_dir(tmp_path: Path, monkeypatch) -> Path:
    """Create temporary config directory and patch config paths."""
    from color_printer.core import config as config_module
    from color_printer.commands import colorprint as colorprint_module

    config_dir = tmp_path / ".color-printer"
    config_dir.mkdir(parents=True)
    config_file = config_dir / "config.json"

    monkeypatch.setattr(config_module, "CP_CONFIG_DIR", config_dir)
    monkeypatch.setattr(config_module, "CP_CONFIG_FILE", config_file)
    monkeypatch.setattr(colorprint_module, "CP_CONFIG_FILE", config_file)

    return config_dir


@pytest.fixture
def mock_config(temp_config_dir: Path) -> Dict[str, Any]:
    """Create a mock configuration file."""
    from color_printer.core import config as config_module

    config_data = {
        "version": "1.0",
        "defaults": {"color": "white", "tag": "NOTE"},
        "severities": {
            "INFO": "blue",
            "ERROR": "red",
            "Notice": "magenta"
        },
        "indicator": {"color": "cyan", "interval_seconds": 0}
    }

    with open(config_module.CP_CONFIG_FILE, "w", encoding="utf-8") as f:
        json.dump(config_data, f, indent=2)

    return config_data
