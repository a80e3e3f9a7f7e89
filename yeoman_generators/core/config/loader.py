"""
Configuration loader — reads yeoman.yml into a ProjectConfig.

The directory holding yeoman.yml is the application root: local
generators are looked up under it and plugins are discovered next to
it.  Without a yeoman.yml the current directory plays that role.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from yeoman_generators.core.models.config import ProjectConfig

logger = logging.getLogger(__name__)

PROJECT_CONFIG_FILE = "yeoman.yml"


class ConfigError(Exception):
    """Raised when yeoman.yml is invalid or missing."""


def find_project_file(start_dir: Path | None = None) -> Path | None:
    """Search for yeoman.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to yeoman.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / PROJECT_CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def load_config(path: Path) -> ProjectConfig:
    """Load and validate yeoman.yml.

    An empty file is a valid, empty configuration.

    Raises:
        ConfigError: If the file is missing, unreadable or invalid.
    """
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading project config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        config = ProjectConfig.model_validate(data)
    except Exception as e:
        raise ConfigError(f"Invalid project configuration: {e}") from e

    logger.info("Loaded %s (%d hook override(s))", path, len(config.generator))
    return config
