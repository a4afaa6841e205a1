"""Subprocess execution backends.

The adapters only need ``run(args) -> RunResult``.  ``SubprocessRunner``
is the production implementation; tests substitute any object that
satisfies the ``Runner`` protocol.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict

from toolcache.core.errors import ProcessLaunchError

logger = logging.getLogger(__name__)


class RunResult(BaseModel):
    """Exit status and captured output of one process run."""

    model_config = ConfigDict(frozen=True)

    return_code: int
    std_out: str = ""
    std_err: str = ""


@runtime_checkable
class Runner(Protocol):
    """Protocol for process execution backends."""

    def run(self, args: Sequence[str]) -> RunResult:
        """Run *args* synchronously and return its exit code and output."""
        ...


class SubprocessRunner:
    """Runs commands with :func:`subprocess.run`, capturing text output.

    No timeout is enforced here; a runner that needs one can wrap this.
    """

    def run(self, args: Sequence[str]) -> RunResult:
        argv = list(args)
        logger.debug("Running: %s", " ".join(argv))
        try:
            completed = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except OSError as exc:
            raise ProcessLaunchError(
                f"Unable to start the program: {exc}",
                context={"program": argv[0] if argv else ""},
            ) from exc
        return RunResult(
            return_code=completed.returncode,
            std_out=completed.stdout or "",
            std_err=completed.stderr or "",
        )
