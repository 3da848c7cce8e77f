"""
Entry point — the one boundary every action stub calls into.

    stub (<action>/<phase>.py)
      → launch(action, phase)
          → resolve_artifact → ensure_binary → dispatch
      → sys.exit(status)

Anything that goes wrong before the binary exits on its own is
reported the same way: one ``::error`` annotation on stdout and
status 1.  The binary's own exit status, zero or not, passes through
untouched.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import NoReturn, TextIO

from action_launcher.core.config.environment import read_runtime_env
from action_launcher.core.config.loader import load_release_config
from action_launcher.core.models.launch import CallSite, DispatchRequest
from action_launcher.core.models.release import DEFAULT_TOOL_NAME, ReleaseConfig
from action_launcher.core.observability.logging_config import setup_logging_from_env
from action_launcher.core.services.launcher.annotations import format_error_annotation
from action_launcher.core.services.launcher.dispatch import dispatch
from action_launcher.core.services.launcher.install import ensure_binary
from action_launcher.core.services.launcher.resolver import resolve_artifact

logger = logging.getLogger(__name__)

BOOTSTRAP_FAILURE = 1


def launch(
    action: str,
    phase: str,
    *,
    config: ReleaseConfig | None = None,
    config_path: Path | None = None,
    start_dir: Path | None = None,
    environ: Mapping[str, str] | None = None,
    out: TextIO | None = None,
) -> int:
    """Bootstrap the binary and run ``<binary> <action> <phase>``.

    Args:
        action: Action name (the stub's directory).
        phase: Phase name (the stub's file stem).
        config: Release config; loaded from release.yml when omitted.
        config_path: Explicit release.yml path.
        start_dir: Where to start searching for release.yml.
        environ: Environment mapping (default: ``os.environ``).
        out: Stream for the annotation (default: ``sys.stdout``).

    Returns:
        The binary's exit status, or 1 if bootstrap failed.
    """
    title = config.error_title if config else f"Error initializing {DEFAULT_TOOL_NAME}"
    try:
        call_site = CallSite(action=action, phase=phase)
        if config is None:
            config = load_release_config(config_path, start_dir=start_dir)
            title = config.error_title

        env = read_runtime_env(environ)
        location = resolve_artifact(config, env)
        ensure_binary(location)

        return dispatch(DispatchRequest(
            binary_path=location.binary_path,
            action=call_site.action,
            phase=call_site.phase,
        ))
    except Exception as exc:
        logger.debug("Bootstrap failed", exc_info=True)
        stream = out if out is not None else sys.stdout
        stream.write(f"\n{format_error_annotation(title, exc)}\n")
        stream.flush()
        return BOOTSTRAP_FAILURE


def stub_identity(stub_file: str | Path) -> tuple[str, str]:
    """``.../setup-rust/post.py`` → ``("setup-rust", "post")``.

    Not validated here; ``launch()`` rejects unusable names inside
    its error boundary.
    """
    path = Path(stub_file)
    return path.parent.name, path.stem


def run_stub(stub_file: str | Path) -> NoReturn:
    """Body of every per-action stub::

        # <bundle>/<action>/<phase>.py
        from action_launcher.core.services.launcher import run_stub
        run_stub(__file__)

    Derives (action, phase) from the stub's own location, looks for
    release.yml from there upward, and exits with the launch status.
    """
    setup_logging_from_env()
    action, phase = stub_identity(stub_file)
    sys.exit(launch(action, phase, start_dir=Path(stub_file).parent))
