"""
Shared test fixtures and configuration.
"""

import os
import stat
import textwrap
from pathlib import Path

import pytest

from action_launcher.core.models.launch import RuntimeEnv
from action_launcher.core.models.release import ReleaseConfig


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def home_dir(tmp_path: Path) -> Path:
    """A fresh, empty HOME for one test."""
    home = tmp_path / "home"
    home.mkdir()
    return home


@pytest.fixture
def release_config() -> ReleaseConfig:
    return ReleaseConfig(release_ref="abc123")


@pytest.fixture
def runtime_env(home_dir: Path) -> RuntimeEnv:
    return RuntimeEnv(
        os="Linux",
        arch="X64",
        home=str(home_dir),
        repo="octo/rust-actions",
        pid=4242,
    )


@pytest.fixture
def runner_environ(home_dir: Path) -> dict[str, str]:
    """Environment mapping as the GitHub runner would provide it."""
    return {
        "RUNNER_OS": "Linux",
        "RUNNER_ARCH": "X64",
        "HOME": str(home_dir),
        "GITHUB_ACTION_REPOSITORY": "octo/rust-actions",
    }


@pytest.fixture
def release_yml(tmp_path: Path) -> Path:
    """A bundle root with release.yml, like the release procedure writes it."""
    bundle = tmp_path / "bundle"
    bundle.mkdir()
    path = bundle / "release.yml"
    path.write_text(textwrap.dedent("""\
        release_ref: abc123
        tool_name: rust-actions
    """))
    return path


def _write_script(path: Path, body: str) -> Path:
    path.write_text(body)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


# The "native binary": prints its arguments, exits with $FAKE_EXIT.
_FAKE_BINARY = """\
#!/bin/sh
echo "ran $1 $2"
exit "${FAKE_EXIT:-0}"
"""

# curl -fsSL <url> -o <dest>
_FAKE_CURL = """\
#!/bin/sh
echo "curl $2" >> "$FAKE_TOOLS_DIR/calls.log"
case "$2" in
  *unreachable*) echo "curl: (6) Could not resolve host" >&2; exit 6 ;;
esac
sleep "${FAKE_CURL_DELAY:-0}"
cp "$FAKE_TOOLS_DIR/artifact" "$4"
"""

# zstd -qd <src> -o <dest>
_FAKE_ZSTD = """\
#!/bin/sh
echo "zstd $2" >> "$FAKE_TOOLS_DIR/calls.log"
if [ -n "$FAKE_ZSTD_FAIL" ]; then echo "zstd: unknown header" >&2; exit 1; fi
cp "$2" "$4"
"""


class FakeTools:
    """Stand-ins for curl and zstd on PATH, plus the artifact they serve."""

    def __init__(self, root: Path) -> None:
        self.root = root
        self.artifact = root / "artifact"
        self.log = root / "calls.log"

    @property
    def artifact_bytes(self) -> bytes:
        return self.artifact.read_bytes()

    def calls(self, tool: str) -> list[str]:
        if not self.log.exists():
            return []
        return [line for line in self.log.read_text().splitlines() if line.startswith(tool)]


@pytest.fixture
def fake_tools(tmp_path: Path, monkeypatch) -> FakeTools:
    """Put fake ``curl`` and ``zstd`` first on PATH.

    "Decompression" is a copy, so the installed binary is byte-identical
    to the served artifact: a shell script that echoes its arguments.
    """
    root = tmp_path / "fake-tools"
    bin_dir = root / "bin"
    bin_dir.mkdir(parents=True)

    _write_script(root / "artifact", _FAKE_BINARY)
    _write_script(bin_dir / "curl", _FAKE_CURL)
    _write_script(bin_dir / "zstd", _FAKE_ZSTD)

    monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")
    monkeypatch.setenv("FAKE_TOOLS_DIR", str(root))
    monkeypatch.delenv("FAKE_EXIT", raising=False)
    monkeypatch.delenv("FAKE_ZSTD_FAIL", raising=False)
    return FakeTools(root)


@pytest.fixture
def write_script():
    """Write an executable shell script and return its path."""
    return _write_script
