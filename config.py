"""Configuration management for the text editor MCP server.

Handles loading settings from appsettings.json with sensible defaults.
"""

import json
from pathlib import Path
from typing import Any


# Base directory used when no command line argument is given
DEFAULT_BASE_DIR = "./texteditor-data"

# Write to a temp file and rename over the target by default
DEFAULT_ATOMIC_WRITES = True

DEFAULT_LOG_LEVEL = "INFO"

_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _load_settings(config_dir: Path | None = None) -> dict[str, Any]:
    """Read appsettings.json as a dict.

    Args:
        config_dir: Directory containing appsettings.json. If None, uses script directory.

    Returns:
        Parsed settings, or an empty dict if the file is missing or unreadable.
    """
    if config_dir is None:
        config_dir = Path(__file__).parent

    config_path = config_dir / "appsettings.json"

    try:
        if config_path.is_file():
            with config_path.open("r", encoding="utf-8") as f:
                config = json.load(f)
                if isinstance(config, dict):
                    return config
    except (OSError, json.JSONDecodeError):
        # Config file corrupted or unreadable - use defaults
        pass

    return {}


def load_default_base_dir(config_dir: Path | None = None) -> str:
    """Load the fallback base directory from appsettings.json.

    Reads the 'defaultBaseDir' string. Used only when the server is started
    without a positional base directory argument.

    Args:
        config_dir: Directory containing appsettings.json. If None, uses script directory.

    Returns:
        Base directory path string. Defaults to ./texteditor-data.
    """
    value = _load_settings(config_dir).get("defaultBaseDir")
    if isinstance(value, str) and value.strip():
        return value
    return DEFAULT_BASE_DIR


def load_atomic_writes(config_dir: Path | None = None) -> bool:
    """Load the atomic write setting from appsettings.json.

    When enabled, file writes go to a temporary file in the target's
    directory which is then renamed over the target, so an interrupted
    write never leaves a half-written file behind.

    Args:
        config_dir: Directory containing appsettings.json. If None, uses script directory.

    Returns:
        True if writes should be atomic. Defaults to True.
    """
    value = _load_settings(config_dir).get("atomicWrites")
    if isinstance(value, bool):
        return value
    return DEFAULT_ATOMIC_WRITES


def load_log_level(config_dir: Path | None = None) -> str:
    """Load the log level name from appsettings.json.

    Args:
        config_dir: Directory containing appsettings.json. If None, uses script directory.

    Returns:
        Upper-case logging level name. Defaults to INFO.
    """
    value = _load_settings(config_dir).get("logLevel")
    if isinstance(value, str) and value.upper() in _VALID_LOG_LEVELS:
        return value.upper()
    return DEFAULT_LOG_LEVEL


# Singletons: Load settings at module import
DEFAULT_BASE_DIR_SETTING: str = load_default_base_dir()
ATOMIC_WRITES: bool = load_atomic_writes()
LOG_LEVEL: str = load_log_level()
