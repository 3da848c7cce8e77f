"""
Launcher service — bootstrap and dispatch of the prebuilt action binary.

    resolver     → URL + cache paths from (ReleaseConfig, RuntimeEnv)  [pure]
    install      → fetch, decompress, atomic rename into the cache
    dispatch     → run the binary with (action, phase), relay exit status
    annotations  → ``::error`` workflow-command formatting
    entry        → the top-level boundary every stub calls into
"""

from action_launcher.core.services.launcher.entry import launch, run_stub
from action_launcher.core.services.launcher.resolver import platform_tag, resolve_artifact

__all__ = [
    "launch",
    "platform_tag",
    "resolve_artifact",
    "run_stub",
]
