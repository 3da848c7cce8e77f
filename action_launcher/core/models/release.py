"""
Release model — the reference baked into a distributed bundle.

Written once by the release procedure (``release.yml`` next to the
stubs) and never supplied at invocation time.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_TOOL_NAME = "rust-actions"


class ReleaseConfig(BaseModel):
    """Which artifact release a bundle points at.

    ``release_ref`` is either a literal URL prefix (anything starting
    with ``https``) or a revision used to build the conventional
    ``bin-<revision>`` release tag.
    """

    model_config = ConfigDict(frozen=True)

    release_ref: str = Field(min_length=1)
    tool_name: str = Field(default=DEFAULT_TOOL_NAME, pattern=r"^[A-Za-z0-9][A-Za-z0-9._-]*$")
    annotation_title: str = ""

    @field_validator("release_ref", mode="before")
    @classmethod
    def _revision_as_text(cls, value: object) -> object:
        # YAML reads an all-digit revision (20240101) as an int
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @property
    def is_url(self) -> bool:
        """Whether the reference is a literal download prefix."""
        return self.release_ref.startswith("https")

    @property
    def artifact_name(self) -> str:
        """Compressed artifact file name, without the platform prefix."""
        return f"{self.tool_name}.zst"

    @property
    def error_title(self) -> str:
        """Title used for bootstrap failure annotations."""
        return self.annotation_title or f"Error initializing {self.tool_name}"
