"""
Configuration loader — reads release.yml into a ReleaseConfig.

The release procedure writes ``release.yml`` next to the action stubs
when it assembles a bundle. It pins the artifact release the stubs
will download; nothing about it is chosen at invocation time.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from action_launcher.core.models.release import ReleaseConfig

logger = logging.getLogger(__name__)

# Default config filename
RELEASE_CONFIG_FILE = "release.yml"


class ConfigError(Exception):
    """Raised when release configuration is invalid or missing."""


def find_release_file(start_dir: Path | None = None) -> Path | None:
    """Search for release.yml starting from the given directory, walking up.

    Stubs live one directory below the bundle root, so the file is
    usually found on the second step.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to release.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / RELEASE_CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_release_config(path: Path | None = None, start_dir: Path | None = None) -> ReleaseConfig:
    """Load and validate the release configuration.

    Args:
        path: Explicit path to release.yml. If None, searches upward
            from ``start_dir``.
        start_dir: Where the upward search begins (default: cwd).

    Returns:
        Validated ReleaseConfig model.

    Raises:
        ConfigError: If the file is missing or invalid.
    """
    if path is None:
        path = find_release_file(start_dir)

    if path is None:
        raise ConfigError(
            f"No {RELEASE_CONFIG_FILE} found. "
            "The bundle was not assembled by the release procedure, or specify --config."
        )

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading release config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        config = ReleaseConfig.model_validate(data)
    except Exception as e:
        raise ConfigError(f"Invalid release configuration: {e}") from e

    logger.info("Loaded release '%s' for %s", config.release_ref, config.tool_name)
    return config
