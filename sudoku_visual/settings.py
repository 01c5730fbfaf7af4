"""
Settings Module for Sudoku Visual Solver

Provides persistent storage for user preferences using JSON.
Settings are stored in config.json in the working directory.

Out-of-range values are clamped rather than rejected; only values that
cannot be read as integers raise InvalidConfiguration.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

from .errors import InvalidConfiguration

logger = logging.getLogger(__name__)

# Settings file location (working directory)
SETTINGS_FILE = Path("config.json")

MAX_CELLS_TO_REMOVE = 81

# Default settings
DEFAULT_SETTINGS: Dict[str, Any] = {
    "cells_to_remove": 40,
    "delay_ms": 100,
    "stop_timeout_ms": 500,
}


def _as_int(name: str, value: Any) -> int:
    """Interpret value as an integer or raise InvalidConfiguration."""
    if isinstance(value, bool):
        raise InvalidConfiguration(f"{name} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise InvalidConfiguration(f"{name} must be an integer, got {value!r}") from e


def normalize_cells_to_remove(value: Any, name: str = "cells_to_remove") -> int:
    """
    Clamp the number of cells to remove into [0, 81].

    Args:
        value: Requested number of cells
        name: Setting name used in messages

    Returns:
        Clamped integer

    Raises:
        InvalidConfiguration: If value is not an integer
    """
    cells = _as_int(name, value)
    clamped = max(0, min(MAX_CELLS_TO_REMOVE, cells))
    if clamped != cells:
        logger.warning(f"{name}={cells} out of range, clamped to {clamped}")
    return clamped


def normalize_delay_ms(value: Any, name: str = "delay_ms") -> int:
    """
    Normalize a per-step delay; negative values become 0 (no pausing).

    Args:
        value: Requested delay in milliseconds
        name: Setting name used in messages

    Returns:
        Delay >= 0

    Raises:
        InvalidConfiguration: If value is not an integer
    """
    delay = _as_int(name, value)
    if delay < 0:
        logger.warning(f"{name}={delay} is negative, treating as 0")
        return 0
    return delay


def normalize_settings(settings: Dict[str, Any]) -> Dict[str, Any]:
    """
    Apply the clamping rules to a settings dictionary.

    Values that are not integers fall back to their defaults.

    Args:
        settings: Raw settings (e.g. freshly parsed JSON)

    Returns:
        New dictionary with normalized values
    """
    result = dict(settings)
    checks = {
        "cells_to_remove": normalize_cells_to_remove,
        "delay_ms": normalize_delay_ms,
        "stop_timeout_ms": normalize_delay_ms,
    }
    for key, normalize in checks.items():
        try:
            result[key] = normalize(result.get(key, DEFAULT_SETTINGS[key]), key)
        except InvalidConfiguration as e:
            logger.warning(f"Invalid setting {key}: {e}, using default")
            result[key] = DEFAULT_SETTINGS[key]
    return result


def load_settings(path: Path = SETTINGS_FILE) -> Dict[str, Any]:
    """
    Load settings from config.json.

    Args:
        path: Settings file location

    Returns:
        Settings dictionary. Returns defaults if file missing or invalid.
    """
    if not path.exists():
        logger.debug("Settings file not found, using defaults")
        return DEFAULT_SETTINGS.copy()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            settings = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        logger.warning(f"Failed to load settings: {e}, using defaults")
        return DEFAULT_SETTINGS.copy()

    if not isinstance(settings, dict):
        logger.warning("Settings file is not a JSON object, using defaults")
        return DEFAULT_SETTINGS.copy()

    # Merge with defaults to handle missing keys
    result = DEFAULT_SETTINGS.copy()
    result.update(settings)
    result = normalize_settings(result)
    logger.debug(f"Settings loaded: {result}")
    return result


def save_settings(settings: Dict[str, Any], path: Path = SETTINGS_FILE) -> None:
    """
    Save settings to config.json.

    Args:
        settings: Settings dictionary to save
        path: Settings file location
    """
    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(settings, f, indent=2)
        logger.debug(f"Settings saved: {settings}")
    except IOError as e:
        logger.error(f"Failed to save settings: {e}")
