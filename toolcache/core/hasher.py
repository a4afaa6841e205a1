"""Incremental digest accumulator.

A content fingerprint is a function of byte content only.  Nothing in this
module looks at file metadata.
"""

from __future__ import annotations

import hashlib

from toolcache.config import config


class Hasher:
    """Running digest over a sequence of byte chunks.

    Strings are encoded as UTF-8 before hashing.  ``final()`` may be called
    more than once; it does not reset the accumulated state.

    Examples
    --------
    >>> h = Hasher("sha256")
    >>> h.update(b"int x;")
    >>> len(h.final())
    64
    """

    def __init__(self, algorithm: str | None = None) -> None:
        self._algorithm = algorithm or config.hash_algorithm
        self._hash = hashlib.new(self._algorithm)

    @property
    def algorithm(self) -> str:
        return self._algorithm

    def update(self, data: bytes | bytearray | memoryview | str) -> None:
        if isinstance(data, str):
            data = data.encode("utf-8")
        self._hash.update(data)

    def final(self) -> str:
        """Return the lowercase hex digest of everything hashed so far."""
        return self._hash.hexdigest()

