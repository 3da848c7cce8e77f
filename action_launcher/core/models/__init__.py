"""
Domain models — Pydantic types for the launcher.

All models are re-exported here for convenient access:

    from action_launcher.core.models import CallSite, RuntimeEnv, ReleaseConfig
"""

from action_launcher.core.models.launch import (
    ArtifactLocation,
    CallSite,
    DispatchRequest,
    RuntimeEnv,
)
from action_launcher.core.models.release import ReleaseConfig

__all__ = [
    # launch.py
    "ArtifactLocation",
    "CallSite",
    "DispatchRequest",
    # release.py
    "ReleaseConfig",
    "RuntimeEnv",
]
