"""Relevant-argument filtering — the stable argument part of a cache key."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from toolcache.core import files
from toolcache.models.toolchain import ToolchainFlags

logger = logging.getLogger(__name__)


def is_unwanted_arg(arg: str, flags: ToolchainFlags) -> bool:
    """True for flags that do not change how preprocessed code becomes binary."""
    return arg.startswith(flags.filtered_prefixes)


def is_input_file(arg: str) -> bool:
    # Input file contents are already part of the content fingerprint, and
    # their paths may be absolute.
    return not arg.startswith("-") and files.file_exists(arg)


def get_relevant_arguments(args: Sequence[str], flags: ToolchainFlags) -> list[str]:
    """Filter resolved arguments down to the ones that belong in a cache key.

    The first argument becomes the toolchain's bare file name.  Order of the
    kept arguments is preserved.
    """
    if not args:
        return []
    filtered_args = [files.get_file_part(args[0])]
    for arg in args[1:]:
        if not arg or is_unwanted_arg(arg, flags) or is_input_file(arg):
            continue
        filtered_args.append(arg)

    logger.debug("Filtered arguments: %s", " ".join(filtered_args))
    return filtered_args
