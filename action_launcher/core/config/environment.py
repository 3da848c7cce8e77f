"""
Runtime environment — the host facts one invocation depends on.

Read once, at the boundary, into a RuntimeEnv.  Everything past
this point takes the struct as a parameter and never looks at
``os.environ`` again.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from action_launcher.core.models.launch import RuntimeEnv

# Variables provided by the GitHub Actions runner
ENV_OS = "RUNNER_OS"
ENV_ARCH = "RUNNER_ARCH"
ENV_HOME = "HOME"
ENV_REPO = "GITHUB_ACTION_REPOSITORY"


def read_runtime_env(
    environ: Mapping[str, str] | None = None,
    pid: int | None = None,
) -> RuntimeEnv:
    """Snapshot the environment values the launcher needs.

    Missing values are kept as empty strings; the resolver rejects
    them when (and only when) it needs them.
    """
    env = os.environ if environ is None else environ
    return RuntimeEnv(
        os=env.get(ENV_OS, ""),
        arch=env.get(ENV_ARCH, ""),
        home=env.get(ENV_HOME, ""),
        repo=env.get(ENV_REPO, ""),
        pid=os.getpid() if pid is None else pid,
    )
