"""Toolchain identity probe."""

from __future__ import annotations

from collections.abc import Sequence

from toolcache.core.errors import ToolchainProbeError
from toolcache.core.runner import Runner
from toolcache.models.toolchain import ToolchainFlags


def get_program_id(args: Sequence[str], runner: Runner, flags: ToolchainFlags) -> str:
    """Return the toolchain's self-description, used verbatim as its identity.

    The full help text is kept rather than a parsed version number so that
    changes in version-string format cannot make two builds look alike.
    """
    # TODO: fold in the executable's size to tell apart patched builds that
    # print identical help text.
    result = runner.run([args[0], flags.identity_flag])
    if result.return_code != 0:
        raise ToolchainProbeError(
            "Unable to get the compiler version information string.",
            context={"program": args[0], "return_code": str(result.return_code)},
        )
    return result.std_out
