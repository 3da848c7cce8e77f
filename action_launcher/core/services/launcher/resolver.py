"""
Artifact resolver — where the binary comes from and where it lives.

Pure: no filesystem access, no network.  Given the same
ReleaseConfig and RuntimeEnv it always returns the same paths.
"""

from __future__ import annotations

import logging
from pathlib import Path

from action_launcher.core.config.environment import ENV_ARCH, ENV_HOME, ENV_OS, ENV_REPO
from action_launcher.core.models.launch import ArtifactLocation, RuntimeEnv
from action_launcher.core.models.release import ReleaseConfig
from action_launcher.core.services.launcher.errors import EnvironmentResolutionError

logger = logging.getLogger(__name__)

_RELEASE_URL = "https://github.com/{repo}/releases/download/bin-{rev}"

# RuntimeEnv field → variable it was read from, for error messages
_ENV_NAMES = {"os": ENV_OS, "arch": ENV_ARCH, "home": ENV_HOME, "repo": ENV_REPO}


def platform_tag(os_name: str, arch: str) -> str:
    """``RUNNER_OS`` + ``RUNNER_ARCH`` → ``linux-x64`` style tag."""
    return f"{os_name}-{arch}".lower()


def _require(env: RuntimeEnv, *fields: str) -> None:
    missing = [_ENV_NAMES[name] for name in fields if not getattr(env, name)]
    if missing:
        raise EnvironmentResolutionError(
            "Missing required environment value(s): " + ", ".join(missing)
        )


def artifact_url(config: ReleaseConfig, env: RuntimeEnv) -> str:
    """Download URL of the compressed artifact for this host."""
    _require(env, "os", "arch")
    asset = f"{platform_tag(env.os, env.arch)}-{config.artifact_name}"

    if config.is_url:
        return f"{config.release_ref}/{asset}"

    _require(env, "repo")
    base = _RELEASE_URL.format(repo=env.repo, rev=config.release_ref)
    return f"{base}/{asset}"


def resolve_artifact(config: ReleaseConfig, env: RuntimeEnv) -> ArtifactLocation:
    """Compute the download URL and cache paths for the current host.

    Only one binary is ever resident per host: the installed name
    carries no platform or revision suffix.

    Raises:
        EnvironmentResolutionError: If a value the resolution needs
            is missing.  Nothing has touched the filesystem yet.
    """
    url = artifact_url(config, env)
    _require(env, "home")

    tool = config.tool_name
    cache_dir = Path(env.home) / ".cache" / tool
    location = ArtifactLocation(
        url=url,
        cache_dir=cache_dir,
        binary_path=cache_dir / tool,
        download_path=cache_dir / f"{tool}.{env.pid}.zst",
        staging_path=cache_dir / f"{tool}.{env.pid}.tmp",
    )
    logger.debug("Resolved %s → %s", location.url, location.binary_path)
    return location
