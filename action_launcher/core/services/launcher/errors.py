"""
Launcher errors — one type per way a bootstrap can fail.

Every one of these ends up in the same place: ``entry.launch()``
turns it into a single ``::error`` annotation and exit status 1.
A non-zero exit from the dispatched binary is NOT an error here.
"""

from __future__ import annotations


class LauncherError(Exception):
    """Base class for bootstrap failures."""


class EnvironmentResolutionError(LauncherError):
    """A required environment value is missing or empty."""


class FetchError(LauncherError):
    """The artifact could not be downloaded."""


class DecompressError(LauncherError):
    """The downloaded artifact could not be decompressed."""


class InstallError(LauncherError):
    """A filesystem step of the install (mkdir, chmod, rename) failed."""


class DispatchError(LauncherError):
    """The cached binary could not be started."""


class AbnormalTerminationError(LauncherError):
    """The binary was killed by a signal instead of exiting."""

    def __init__(self, argv: list[str], signal_number: int) -> None:
        self.argv = argv
        self.signal_number = signal_number
        super().__init__(
            f"Command {argv!r} terminated by signal {signal_number}"
        )
