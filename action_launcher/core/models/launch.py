"""
Launch models — everything one invocation needs to know.

CallSite says *what* to run, RuntimeEnv says *where* we are,
ArtifactLocation says where the binary comes from and where it lives,
and DispatchRequest is the exact contract with the native binary.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator


class CallSite(BaseModel):
    """Identity of the stub that invoked the launcher.

    ``action`` is the stub's parent directory name, ``phase`` is the
    stub's file name without its extension.
    """

    model_config = ConfigDict(frozen=True)

    action: str
    phase: str

    @field_validator("action", "phase")
    @classmethod
    def _path_safe(cls, value: str) -> str:
        if not value or value in (".", ".."):
            raise ValueError(f"not a usable name: {value!r}")
        if "/" in value or "\\" in value or "\0" in value:
            raise ValueError(f"must not contain path separators: {value!r}")
        return value


class RuntimeEnv(BaseModel):
    """Host facts read once from the process environment.

    Values may be empty here; the resolver decides which ones it
    actually needs and fails loudly when they are missing.
    """

    model_config = ConfigDict(frozen=True)

    os: str = ""
    arch: str = ""
    home: str = ""
    repo: str = ""
    pid: int


class ArtifactLocation(BaseModel):
    """Where the artifact is downloaded from and installed to."""

    model_config = ConfigDict(frozen=True)

    url: str
    cache_dir: Path
    binary_path: Path
    download_path: Path     # compressed, pid-unique
    staging_path: Path      # decompressed, pid-unique, renamed into place

    def to_dict(self) -> dict[str, str]:
        return {
            "url": self.url,
            "cache_dir": str(self.cache_dir),
            "binary_path": str(self.binary_path),
            "download_path": str(self.download_path),
            "staging_path": str(self.staging_path),
        }


class DispatchRequest(BaseModel):
    """Exactly two positional arguments; exit status is the only result."""

    model_config = ConfigDict(frozen=True)

    binary_path: Path
    action: str
    phase: str

    @property
    def argv(self) -> list[str]:
        return [str(self.binary_path), self.action, self.phase]
