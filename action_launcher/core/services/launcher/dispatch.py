"""
Dispatch — run the cached binary and relay its exit status.
"""

from __future__ import annotations

import logging
import subprocess

from action_launcher.core.models.launch import DispatchRequest
from action_launcher.core.services.launcher.errors import (
    AbnormalTerminationError,
    DispatchError,
)

logger = logging.getLogger(__name__)


def dispatch(request: DispatchRequest) -> int:
    """Run ``<binary> <action> <phase>`` with inherited stdio.

    Returns:
        The binary's own exit status, unchanged — including non-zero.

    Raises:
        DispatchError: If the binary cannot be started.
        AbnormalTerminationError: If it was killed by a signal.
    """
    argv = request.argv
    logger.debug("Dispatching: %s", " ".join(argv))

    try:
        result = subprocess.run(argv, check=False)
    except OSError as exc:
        raise DispatchError(f"Cannot run {request.binary_path}: {exc}") from exc

    # subprocess reports death-by-signal as -signum
    if result.returncode < 0:
        raise AbnormalTerminationError(argv, -result.returncode)

    logger.debug("%s exited with %d", request.binary_path.name, result.returncode)
    return result.returncode
