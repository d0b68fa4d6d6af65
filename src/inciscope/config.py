# src/inciscope/config.py
"""Configuration file discovery for inciscope.

Settings come from (highest precedence first):
- Keyword arguments passed to ``load_settings``
- Environment variables (``INCISCOPE_*``) and a local ``.env`` file
- An ``inciscope.yaml`` file in the working directory or one of its parents
- Built-in defaults
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from inciscope.exceptions import ConfigError
from inciscope.settings import Settings

CONFIG_FILES = ["inciscope.yaml", "inciscope.yml", ".inciscoperc"]

VALID_KEYS = set(Settings.model_fields)


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find a configuration file in the given directory or its parents.

    Args:
        start_dir: Directory to start searching from (default: cwd)

    Returns:
        Path to config file if found, None otherwise
    """
    current = start_dir or Path.cwd()
    for _ in range(10):  # Limit search depth
        for config_name in CONFIG_FILES:
            config_path = current / config_name
            if config_path.exists():
                return config_path
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def load_config(config_path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration values from a yaml file.

    Args:
        config_path: Explicit path. When None, searches with ``find_config_file``.

    Returns:
        Mapping of setting name to value (empty when no file is found).

    Raises:
        ConfigError: If the file is unreadable, not a mapping, or has unknown keys.
    """
    path = Path(config_path) if config_path else find_config_file()
    if path is None:
        return {}

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Could not read {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping of settings")

    unknown = sorted(set(data) - VALID_KEYS)
    if unknown:
        raise ConfigError(
            f"Unknown keys in {path}: {', '.join(unknown)}. "
            f"Valid keys: {', '.join(sorted(VALID_KEYS))}"
        )
    return data


def load_settings(config_path: str | Path | None = None, **overrides: Any) -> Settings:
    """Build Settings from a config file, the environment, and explicit overrides."""
    file_values = load_config(config_path)
    explicit = {key: value for key, value in overrides.items() if value is not None}
    return Settings.from_sources(file_values, explicit)
