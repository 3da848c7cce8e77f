"""
Cache inspection and cleanup.

Never called by ``launch()``.  The install path tolerates leftover
temporaries from racing stubs; these helpers exist for operators on
long-lived (self-hosted) runners where the cache is not thrown away
with the host.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Any

from action_launcher.core.models.launch import ArtifactLocation

logger = logging.getLogger(__name__)


def _temporaries(location: ArtifactLocation) -> list[Path]:
    """``<tool>.<pid>.zst`` / ``<tool>.<pid>.tmp`` files in the cache dir."""
    if not location.cache_dir.is_dir():
        return []
    tool = location.binary_path.name
    found: list[Path] = []
    for pattern in (f"{tool}.*.zst", f"{tool}.*.tmp"):
        found.extend(location.cache_dir.glob(pattern))
    return sorted(found)


def cache_status(location: ArtifactLocation) -> dict[str, Any]:
    """Return whether the binary is installed and what else is lying around.

    Returns::

        {
            "cache_dir": "/home/runner/.cache/rust-actions",
            "binary_path": "/home/runner/.cache/rust-actions/rust-actions",
            "installed": True,
            "size_bytes": 12345678,
            "executable": True,
            "temporaries": ["/home/runner/.cache/rust-actions/rust-actions.4242.tmp"],
        }
    """
    binary = location.binary_path
    installed = binary.is_file()
    return {
        "cache_dir": str(location.cache_dir),
        "binary_path": str(binary),
        "installed": installed,
        "size_bytes": binary.stat().st_size if installed else 0,
        "executable": installed and bool(binary.stat().st_mode & 0o111),
        "temporaries": [str(p) for p in _temporaries(location)],
    }


def prune_temporaries(location: ArtifactLocation) -> list[str]:
    """Delete leftover download/staging files.  Returns what was removed.

    Must not run while another stub may be installing on the same host:
    it would delete that stub's in-flight temporaries.
    """
    removed: list[str] = []
    for path in _temporaries(location):
        path.unlink(missing_ok=True)
        logger.info("Removed %s", path)
        removed.append(str(path))
    return removed


def clear_cache(location: ArtifactLocation) -> bool:
    """Remove the whole cache directory.  Returns True if it existed."""
    if not location.cache_dir.exists():
        return False
    shutil.rmtree(location.cache_dir)
    logger.info("Cleared %s", location.cache_dir)
    return True
