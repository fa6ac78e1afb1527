"""
Configuration loader — reads packaging.yml into a PackagingConfig.

The file is optional. Without one, the defaults package checkcites
into build/packaging under the current directory.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from checkcites_build.core.models.packaging import PackagingConfig

logger = logging.getLogger(__name__)

# Default config filename
PACKAGING_CONFIG_FILE = "packaging.yml"


class ConfigError(Exception):
    """Raised when packaging configuration is invalid or unreadable."""


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for packaging.yml starting from the given directory, walking up.

    Returns:
        Path to packaging.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / PACKAGING_CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_config(path: Path) -> PackagingConfig:
    """Load and validate packaging configuration.

    Raises:
        ConfigError: If the file is missing or invalid.
    """
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading packaging config from %s", path)

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

    # Keys may sit under a "packaging" mapping or at the top level
    section = data.get("packaging", data)
    if not isinstance(section, dict):
        raise ConfigError(f"Expected 'packaging' to be a mapping in {path}")

    try:
        config = PackagingConfig.model_validate(section)
    except ValidationError as e:
        raise ConfigError(f"Invalid packaging configuration: {e}") from e

    logger.info("Loaded packaging config for '%s' %s", config.name, config.version)
    return config


def resolve_config(path: Path | None = None) -> tuple[PackagingConfig, Path]:
    """Return the config and the directory its relative paths hang off.

    Falls back to defaults rooted at the current directory when no
    packaging.yml exists.
    """
    if path is None:
        path = find_config_file()

    if path is None:
        logger.debug("No %s found, using defaults", PACKAGING_CONFIG_FILE)
        return PackagingConfig(), Path.cwd()

    return load_config(path), path.parent.resolve()
