"""Shared test fixtures for Toolcache."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from toolcache.config import ToolcacheConfig
from toolcache.core.runner import RunResult
from toolcache.models.toolchain import TI_C6X_FLAGS, ToolchainFlags

IDENTITY_TEXT = "TMS320C6x C/C++ Compiler v8.3.12\nUsage: cl6x [options] [filenames]\n"


def ar_header(name: bytes, size: int, timestamp: int = 1600000000) -> bytes:
    """Build one 60-byte ``ar`` member header."""
    header = (
        name.ljust(16)
        + str(timestamp).encode().ljust(12)
        + b"0".ljust(6)
        + b"0".ljust(6)
        + b"100644".ljust(8)
        + str(size).encode().ljust(10)
        + b"`\n"
    )
    assert len(header) == 60
    return header


def ar_archive(members: Sequence[tuple[bytes, bytes]], timestamp: int = 1600000000) -> bytes:
    """Build a complete archive from ``(name, data)`` pairs."""
    out = b"!<arch>\n"
    for name, data in members:
        out += ar_header(name, len(data), timestamp) + data
        if len(data) % 2:
            out += b"\n"
    return out


class FakeRunner:
    """Scripted stand-in for the subprocess runner.

    A preprocess-only run writes ``preprocessed`` into the requested output
    file; an identity probe returns ``identity``.
    """

    def __init__(
        self,
        *,
        preprocessed: str | bytes = "int x;",
        identity: str = IDENTITY_TEXT,
        preprocess_code: int = 0,
        identity_code: int = 0,
        flags: ToolchainFlags = TI_C6X_FLAGS,
    ) -> None:
        self.preprocessed = preprocessed
        self.identity = identity
        self.preprocess_code = preprocess_code
        self.identity_code = identity_code
        self.flags = flags
        self.calls: list[list[str]] = []
        self.output_paths: list[Path] = []

    def run(self, args: Sequence[str]) -> RunResult:
        argv = list(args)
        self.calls.append(argv)
        if self.flags.identity_flag in argv[1:]:
            return RunResult(return_code=self.identity_code, std_out=self.identity)
        if self.flags.preprocess_only in argv:
            output = next(
                a[len(self.flags.output_file):]
                for a in reversed(argv)
                if a.startswith(self.flags.output_file)
            )
            path = Path(output)
            self.output_paths.append(path)
            if self.preprocess_code == 0:
                data = self.preprocessed
                if isinstance(data, str):
                    data = data.encode("utf-8")
                path.write_bytes(data)
            return RunResult(return_code=self.preprocess_code, std_err="error: boom")
        return RunResult(return_code=1, std_err="unexpected command")


@pytest.fixture
def tmp_dir(tmp_path: Path) -> Path:
    """Provide a temporary directory for test artifacts."""
    return tmp_path


@pytest.fixture
def in_tmp_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test with the temporary directory as the working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def settings(tmp_path: Path) -> ToolcacheConfig:
    """Configuration with a private temp directory for preprocessed output."""
    return ToolcacheConfig(temp_dir=tmp_path / "tmp")


@pytest.fixture
def flags() -> ToolchainFlags:
    return TI_C6X_FLAGS


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def make_file(tmp_path: Path) -> Callable[..., Path]:
    """Factory fixture: write bytes or text to a file under tmp_path."""

    def _factory(name: str, content: bytes | str = b"") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_bytes(content)
        return path

    return _factory
