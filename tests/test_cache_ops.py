"""
Tests for cache inspection and cleanup.
"""

import pytest

from action_launcher.core.services.launcher.cache_ops import (
    cache_status,
    clear_cache,
    prune_temporaries,
)
from action_launcher.core.services.launcher.resolver import resolve_artifact


@pytest.fixture
def location(release_config, runtime_env):
    return resolve_artifact(release_config, runtime_env)


@pytest.fixture
def populated(location):
    """Installed binary plus temporaries orphaned by two losing racers."""
    location.cache_dir.mkdir(parents=True)
    location.binary_path.write_bytes(b"#!/bin/sh\n")
    location.binary_path.chmod(0o755)
    (location.cache_dir / "rust-actions.111.zst").write_bytes(b"z")
    (location.cache_dir / "rust-actions.222.tmp").write_bytes(b"t")
    (location.cache_dir / "unrelated.txt").write_text("keep me")
    return location


class TestCacheStatus:
    def test_empty(self, location):
        status = cache_status(location)
        assert status["installed"] is False
        assert status["size_bytes"] == 0
        assert status["executable"] is False
        assert status["temporaries"] == []

    def test_populated(self, populated):
        status = cache_status(populated)
        assert status["installed"] is True
        assert status["executable"] is True
        assert status["size_bytes"] == len(b"#!/bin/sh\n")
        assert [p.rsplit("/", 1)[-1] for p in status["temporaries"]] == [
            "rust-actions.111.zst",
            "rust-actions.222.tmp",
        ]


class TestPruneTemporaries:
    def test_removes_only_temporaries(self, populated):
        removed = prune_temporaries(populated)
        assert len(removed) == 2
        remaining = sorted(p.name for p in populated.cache_dir.iterdir())
        assert remaining == ["rust-actions", "unrelated.txt"]

    def test_no_cache_dir(self, location):
        assert prune_temporaries(location) == []


class TestClearCache:
    def test_clear(self, populated):
        assert clear_cache(populated) is True
        assert not populated.cache_dir.exists()

    def test_clear_missing(self, location):
        assert clear_cache(location) is False
