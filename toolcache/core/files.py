"""Local filesystem primitives used by the adapters."""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

logger = logging.getLogger(__name__)


def read_bytes(path: str | Path) -> bytes:
    return Path(path).read_bytes()


def file_exists(path: str | Path) -> bool:
    """True if *path* names an existing regular file (not a directory)."""
    try:
        return Path(path).is_file()
    except (OSError, ValueError):
        # Unrepresentable paths (embedded NUL, too long) are not files
        return False


def get_extension(path: str | Path) -> str:
    """Return the extension including the dot, e.g. ``.cmd``."""
    return Path(path).suffix


def get_file_part(path: str | Path, include_extension: bool = True) -> str:
    """Return the file name of *path* without its directory.

    Both ``/`` and ``\\`` are treated as separators, so Windows-style
    toolchain paths behave the same on every host.
    """
    name = str(path).replace("\\", "/").rsplit("/", 1)[-1]
    if not include_extension:
        stem, dot, _ = name.rpartition(".")
        if dot and stem:
            name = stem
    return name


def get_temp_folder(directory: str | Path | None = None) -> Path:
    """Return *directory* (created if needed) or the system temp directory."""
    if directory is None:
        return Path(tempfile.gettempdir())
    folder = Path(directory)
    folder.mkdir(parents=True, exist_ok=True)
    return folder


@contextmanager
def temp_file(directory: str | Path | None = None, suffix: str = "") -> Iterator[Path]:
    """Reserve a private temporary file path, deleted when the scope exits.

    The file is created empty so the name cannot be claimed by another
    process; it is removed on every exit path, including exceptions.
    """
    fd, name = tempfile.mkstemp(suffix=suffix, dir=get_temp_folder(directory))
    os.close(fd)
    path = Path(name)
    try:
        yield path
    finally:
        try:
            path.unlink(missing_ok=True)
        except OSError:
            logger.warning("Unable to remove temporary file %s", path)
