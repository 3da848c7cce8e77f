"""
Race tests — several stubs populating one cold cache at the same time.

Each racer is a real launcher process; the fake curl sleeps so their
downloads overlap.  No locking exists: correctness comes only from
pid-unique temporaries and os.replace onto the same final path.
"""

from __future__ import annotations

import os
import stat
import subprocess
import sys
import time

import pytest

pytestmark = pytest.mark.skipif(sys.platform == "win32", reason="needs /bin/sh")

RACERS = 4


def _spawn(project_root, release_yml, env, action, phase):
    return subprocess.Popen(
        [sys.executable, "-m", "action_launcher.main",
         "--config", str(release_yml), "run", action, phase],
        env=env,
        cwd=str(project_root),
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
    )


@pytest.fixture
def race_env(fake_tools, runner_environ, project_root):
    env = dict(os.environ)
    env.update(runner_environ)
    env["FAKE_CURL_DELAY"] = "1"
    env["PYTHONPATH"] = os.pathsep.join(
        p for p in (str(project_root), env.get("PYTHONPATH", "")) if p
    )
    return env


class TestColdCacheRace:
    def test_all_racers_succeed(self, project_root, release_yml, race_env, home_dir, fake_tools):
        binary = home_dir / ".cache" / "rust-actions" / "rust-actions"
        expected = fake_tools.artifact_bytes

        procs = [
            _spawn(project_root, release_yml, race_env, f"action-{i}", "main")
            for i in range(RACERS)
        ]

        # Whenever the final path exists, it must hold the complete artifact
        observed_partial = []
        while any(p.poll() is None for p in procs):
            if binary.exists():
                data = binary.read_bytes()
                if data != expected:
                    observed_partial.append(len(data))
            time.sleep(0.01)

        results = [(p.returncode, *p.communicate()) for p in procs]

        for i, (code, out, err) in enumerate(results):
            assert code == 0, err
            assert f"ran action-{i} main" in out
            assert "::error" not in out

        assert observed_partial == []
        assert binary.read_bytes() == expected
        assert stat.S_IMODE(binary.stat().st_mode) == 0o755

    def test_every_racer_fetches(self, project_root, release_yml, race_env, fake_tools):
        procs = [
            _spawn(project_root, release_yml, race_env, "action", f"phase-{i}")
            for i in range(RACERS)
        ]
        for p in procs:
            p.communicate()
            assert p.returncode == 0

        # No leader election: each cold racer downloads for itself
        assert len(fake_tools.calls("curl")) >= 2

    def test_warm_cache_after_race(self, project_root, release_yml, race_env, fake_tools):
        first = [_spawn(project_root, release_yml, race_env, "a", "main") for _ in range(2)]
        for p in first:
            p.communicate()
        fetched = len(fake_tools.calls("curl"))

        p = _spawn(project_root, release_yml, race_env, "a", "post")
        out, _ = p.communicate()
        assert p.returncode == 0
        assert "ran a post" in out
        assert len(fake_tools.calls("curl")) == fetched
