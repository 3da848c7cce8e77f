"""
Shared CLI helpers.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from action_launcher.core.models.launch import ArtifactLocation


def load_location(ctx: click.Context) -> ArtifactLocation:
    """Resolve the artifact location from release.yml + environment, or exit 1."""
    from action_launcher.core.config.environment import read_runtime_env
    from action_launcher.core.config.loader import ConfigError, load_release_config
    from action_launcher.core.services.launcher.errors import LauncherError
    from action_launcher.core.services.launcher.resolver import resolve_artifact

    config_path: Path | None = ctx.obj.get("config_path")
    try:
        config = load_release_config(config_path)
        return resolve_artifact(config, read_runtime_env())
    except (ConfigError, LauncherError) as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)
