"""Linker command file resolution.

Linker command files reference libraries with lines such as
``-l"/path/to/lib.a"``.  The referenced file's *content* is hashed, not
its path.  Every other line is hashed as its literal bytes.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from toolcache.core import files
from toolcache.core.archive import hash_link_file, read_link_input
from toolcache.core.hasher import Hasher
from toolcache.models.toolchain import ToolchainFlags

logger = logging.getLogger(__name__)


def referenced_path(line: str, flags: ToolchainFlags) -> str | None:
    """Return the library path named by *line*, or None for ordinary lines."""
    if not line.startswith(flags.library_reference):
        return None
    name = line[len(flags.library_reference):].rstrip()
    if len(name) > 2 and name[0] == '"':
        name = name[1:-1]
    return name


def split_lines(data: bytes) -> list[bytes]:
    """Split command-file bytes on ``\\n``, dropping a trailing ``\\r`` per line."""
    lines = data.split(b"\n")
    if lines[-1] == b"":
        lines.pop()
    return [line[:-1] if line.endswith(b"\r") else line for line in lines]


def hash_link_cmd_file(path: str | Path, hasher: Hasher, flags: ToolchainFlags) -> None:
    """Fold a linker command file and every library it references into *hasher*."""
    library_prefix = os.fsencode(flags.library_reference)
    for line in split_lines(read_link_input(path)):
        if line.startswith(library_prefix):
            library = referenced_path(os.fsdecode(line), flags)
            hash_link_file(library, hasher)
        else:
            hasher.update(line + b"\n")
    logger.debug("Hashed command file %s", files.get_file_part(path))
