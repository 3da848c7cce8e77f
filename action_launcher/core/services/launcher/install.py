"""
Cache population — fetch, decompress, publish.

The binary at ``binary_path`` is only ever written by a single
``os.replace`` of a fully prepared, already-executable file.  Several
stubs may race here on the same host; each works in its own
pid-named temporaries and the last rename wins.  All racers fetch the
same artifact, so whichever wins is correct.

Losing racers' temporaries are left behind (see ``cache prune``).
"""

from __future__ import annotations

import logging
import os
import subprocess

from action_launcher.core.models.launch import ArtifactLocation
from action_launcher.core.services.launcher.errors import (
    DecompressError,
    FetchError,
    InstallError,
)

logger = logging.getLogger(__name__)

_EXEC_MODE = 0o755


def _run_tool(cmd: list[str]) -> int:
    """Run an external tool with inherited stdio and return its exit code.

    Output goes straight to the job log; nothing is captured.
    """
    logger.debug("Running: %s", " ".join(cmd))
    return subprocess.run(cmd, check=False).returncode


def fetch_artifact(url: str, dest: os.PathLike[str] | str) -> None:
    """Download ``url`` to ``dest`` with curl.  No retry.

    Raises:
        FetchError: On network failure, a non-success HTTP status,
            or when curl itself is unavailable.
    """
    logger.info("Downloading %s", url)
    try:
        code = _run_tool(["curl", "-fsSL", url, "-o", str(dest)])
    except OSError as exc:
        raise FetchError(f"Cannot run curl: {exc}") from exc
    if code != 0:
        raise FetchError(f"Download of {url} failed (curl exit {code})")


def decompress_artifact(src: os.PathLike[str] | str, dest: os.PathLike[str] | str) -> None:
    """Decompress a zstd artifact from ``src`` into ``dest``.

    Raises:
        DecompressError: If zstd is unavailable or rejects the input.
    """
    try:
        code = _run_tool(["zstd", "-qd", str(src), "-o", str(dest)])
    except OSError as exc:
        raise DecompressError(f"Cannot run zstd: {exc}") from exc
    if code != 0:
        raise DecompressError(f"Decompression of {src} failed (zstd exit {code})")


def ensure_binary(location: ArtifactLocation) -> bool:
    """Make sure an executable binary exists at ``location.binary_path``.

    Returns:
        True if this call installed it, False on a cache hit.

    Raises:
        FetchError, DecompressError, InstallError
    """
    if location.binary_path.exists():
        logger.debug("Cache hit: %s", location.binary_path)
        return False

    logger.debug("Cache miss: %s", location.binary_path)

    try:
        location.cache_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise InstallError(f"Cannot create cache directory {location.cache_dir}: {exc}") from exc

    fetch_artifact(location.url, location.download_path)
    decompress_artifact(location.download_path, location.staging_path)

    try:
        location.download_path.unlink()
        os.chmod(location.staging_path, _EXEC_MODE)
        # Sole publication point — atomic on POSIX, last writer wins.
        os.replace(location.staging_path, location.binary_path)
    except OSError as exc:
        raise InstallError(f"Cannot install {location.binary_path}: {exc}") from exc

    logger.info("Installed %s", location.binary_path)
    return True
