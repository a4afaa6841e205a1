"""Preprocessing and link-input fingerprinting.

An object compilation is represented by the toolchain's own preprocessed
output: it captures macro expansion, included headers and conditional
compilation in one text.  A link is represented by a digest of every
input file that exists on disk.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from toolcache.core import files
from toolcache.core.archive import hash_link_file
from toolcache.core.errors import PreprocessError, UnsupportedCommandError
from toolcache.core.hasher import Hasher
from toolcache.core.link_script import hash_link_cmd_file
from toolcache.core.runner import Runner
from toolcache.models.invocation import InvocationKind, InvocationScan
from toolcache.models.toolchain import ToolchainFlags

logger = logging.getLogger(__name__)


def make_preprocessor_cmd(
    args: Sequence[str], preprocessed_file: str | Path, flags: ToolchainFlags
) -> list[str]:
    """Derive a preprocess-only command from an object compilation.

    Drops the compile-only marker, the output declaration and any existing
    preprocess-control flags, then forces preprocess-only output into
    *preprocessed_file*.
    """
    dropped = (flags.output_file, *flags.preprocess_control)
    preprocess_args = [
        arg
        for arg in args
        if arg != flags.compile_only and not arg.startswith(dropped)
    ]
    preprocess_args.append(flags.preprocess_only)
    preprocess_args.append(f"{flags.output_file}{preprocessed_file}")
    return preprocess_args


def run_preprocessor(
    args: Sequence[str],
    runner: Runner,
    flags: ToolchainFlags,
    temp_dir: str | Path | None = None,
) -> str:
    """Run the toolchain in preprocess-only mode and return its output text.

    The output is decoded as latin-1, which maps every byte to exactly one
    character, so sources that differ only in non-UTF-8 bytes keep distinct
    fingerprints.  The private output file is removed on every exit path.
    """
    with files.temp_file(temp_dir, flags.preprocessed_suffix) as preprocessed_file:
        preprocess_args = make_preprocessor_cmd(args, preprocessed_file, flags)
        logger.debug("Preprocessing: %s", " ".join(preprocess_args))
        result = runner.run(preprocess_args)
        if result.return_code != 0:
            raise PreprocessError(
                "Preprocessing command was unsuccessful.",
                context={
                    "return_code": str(result.return_code),
                    "stderr": result.std_err.strip(),
                },
            )
        return preprocessed_file.read_bytes().decode("latin-1")


def hash_link_inputs(
    args: Sequence[str], flags: ToolchainFlags, algorithm: str | None = None
) -> str:
    """Digest every existing input file of a link, in command-line order.

    ``args[0]`` is the toolchain itself and is skipped.  Linker command
    files are parsed so that referenced libraries contribute their content.
    """
    hasher = Hasher(algorithm)
    for arg in args[1:]:
        if not arg or arg.startswith("-") or not files.file_exists(arg):
            continue
        if files.get_extension(arg).lower() == flags.linker_command_extension:
            logger.debug("Hashing cmd-file %s", arg)
            hash_link_cmd_file(arg, hasher, flags)
        else:
            hash_link_file(arg, hasher)
    return hasher.final()


def preprocess_source(
    args: Sequence[str],
    scan: InvocationScan,
    runner: Runner,
    flags: ToolchainFlags,
    *,
    temp_dir: str | Path | None = None,
    algorithm: str | None = None,
) -> str:
    """Return the cache-relevant content representation of an invocation."""
    kind = scan.kind
    if kind is InvocationKind.OBJECT_COMPILE and scan.output_file:
        return run_preprocessor(args, runner, flags, temp_dir)
    if kind is InvocationKind.LINK and scan.output_file:
        return hash_link_inputs(args, flags, algorithm)
    raise UnsupportedCommandError(
        "Unsupported compilation command.",
        context={"kind": kind.value if kind else "unknown"},
    )
