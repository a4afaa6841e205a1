"""Archive-aware file hashing.

Static libraries in the common ``ar`` format embed a modification time in
every member header.  Hashing those bytes verbatim would make identical
libraries look different, so member headers are hashed without their
timestamp field.  Every other file is hashed verbatim.

Header layout (60 bytes, all ASCII)::

    offset  size  field
         0    16  member name
        16    12  modification timestamp   (skipped)
        28     6  owner id
        34     6  group id
        40     8  file mode
        48    10  member size, decimal
        58     2  terminator "`\\n"
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from toolcache.core import files
from toolcache.core.errors import ArchiveParseError, InputFileError
from toolcache.core.hasher import Hasher

logger = logging.getLogger(__name__)

AR_SIGNATURE = b"!<arch>\n"
HEADER_SIZE = 60
NAME_SIZE = 16
TIMESTAMP_END = 28
SIZE_OFFSET = 48
SIZE_FIELD = 10

_SIZE_PATTERN = re.compile(rb"-?[0-9]+")


class ArchiveRecord(BaseModel):
    """One member of an archive, as byte ranges of the archive data."""

    model_config = ConfigDict(frozen=True)

    offset: int
    identity: bytes
    metadata: bytes
    size: int

    @property
    def data_offset(self) -> int:
        return self.offset + HEADER_SIZE

    @property
    def next_offset(self) -> int:
        # Member data is padded to an even number of bytes
        return self.data_offset + self.size + (self.size & 1)


def is_ar_data(data: bytes) -> bool:
    return data.startswith(AR_SIGNATURE)


def _parse_size(field: bytes, offset: int) -> int:
    # Left-aligned decimal, padded with trailing spaces
    text = field.rstrip(b" ")
    if not _SIZE_PATTERN.fullmatch(text):
        raise ArchiveParseError(
            "Unable to parse an AR format file: Invalid file size.",
            context={"offset": str(offset), "size_field": repr(field)},
        )
    return int(text)


def iter_ar_records(data: bytes) -> Iterator[ArchiveRecord]:
    """Yield every member record of an archive.

    Raises
    ------
    ArchiveParseError
        On a truncated header, a negative size, or a size that runs past the
        end of the data.  Records already yielded must be discarded by the
        caller.
    """
    pos = len(AR_SIGNATURE)
    while pos < len(data):
        if pos + HEADER_SIZE > len(data):
            raise ArchiveParseError(
                "Unable to parse an AR format file: Invalid AR file header.",
                context={"offset": str(pos), "remaining": str(len(data) - pos)},
            )
        size = _parse_size(data[pos + SIZE_OFFSET:pos + SIZE_OFFSET + SIZE_FIELD], pos)
        if size < 0 or pos + HEADER_SIZE + size > len(data):
            raise ArchiveParseError(
                "Unable to parse an AR format file: Invalid file size.",
                context={"offset": str(pos), "size": str(size)},
            )
        record = ArchiveRecord(
            offset=pos,
            identity=data[pos:pos + NAME_SIZE],
            metadata=data[pos + TIMESTAMP_END:pos + HEADER_SIZE],
            size=size,
        )
        yield record
        pos = record.next_offset


def hash_ar_data(data: bytes, hasher: Hasher) -> None:
    """Hash archive *data* into *hasher*, skipping member timestamps.

    The archive is fully validated before anything is hashed, so a corrupt
    archive leaves *hasher* untouched.
    """
    records = list(iter_ar_records(data))
    for record in records:
        hasher.update(record.identity)
        hasher.update(record.metadata)
        hasher.update(data[record.data_offset:record.data_offset + record.size])


def read_link_input(path: str | Path) -> bytes:
    try:
        return files.read_bytes(path)
    except OSError as exc:
        raise InputFileError(
            f"Unable to read link input: {exc.strerror or exc}",
            context={"file": str(path)},
        ) from exc


def hash_link_file(path: str | Path, hasher: Hasher) -> None:
    """Hash one link input, stripping timestamps if it is an archive."""
    data = read_link_input(path)
    if is_ar_data(data):
        logger.debug("Hashing AR: %s", files.get_file_part(path))
        try:
            hash_ar_data(data, hasher)
        except ArchiveParseError as exc:
            exc.context.setdefault("file", str(path))
            raise
    else:
        logger.debug("Hashing: %s", files.get_file_part(path))
        hasher.update(data)


def hash_file(path: str | Path, algorithm: str | None = None) -> str:
    """Return the archive-aware digest of a single file."""
    hasher = Hasher(algorithm)
    hash_link_file(path, hasher)
    return hasher.final()
