"""Tests for the subprocess runner."""

from __future__ import annotations

import sys

import pytest

from conftest import FakeRunner

from toolcache.core.errors import ProcessLaunchError
from toolcache.core.runner import Runner, SubprocessRunner


class TestSubprocessRunner:
    def test_captures_stdout_and_exit_code(self):
        result = SubprocessRunner().run(
            [sys.executable, "-c", "import sys; print('hello'); sys.exit(3)"]
        )
        assert result.return_code == 3
        assert result.std_out.strip() == "hello"

    def test_missing_program(self, tmp_dir):
        with pytest.raises(ProcessLaunchError, match="Unable to start"):
            SubprocessRunner().run([str(tmp_dir / "no-such-cl6x")])


class TestRunnerProtocol:
    def test_default_runner_satisfies_protocol(self):
        assert isinstance(SubprocessRunner(), Runner)

    def test_fake_runner_satisfies_protocol(self):
        assert isinstance(FakeRunner(), Runner)
