"""Response-file expansion.

A response file holds extra command-line arguments.  References are
expanded exactly one level deep: the expanded arguments are spliced in
place of the reference, and any reference *inside* them is left for the
classifier to reject.
"""

from __future__ import annotations

import codecs
import logging
import shlex
from collections.abc import Sequence
from pathlib import Path

from toolcache.core import files
from toolcache.core.errors import ResponseFileError
from toolcache.models.toolchain import ToolchainFlags

logger = logging.getLogger(__name__)

_BOM_ENCODINGS = (
    (codecs.BOM_UTF8, "utf-8"),
    (codecs.BOM_UTF32_BE, "utf-32-be"),
    (codecs.BOM_UTF32_LE, "utf-32-le"),
    (codecs.BOM_UTF16_BE, "utf-16-be"),
    (codecs.BOM_UTF16_LE, "utf-16-le"),
)


def decode_text(raw: bytes) -> str:
    """Decode response-file bytes, honouring a leading byte-order mark."""
    for bom, encoding in _BOM_ENCODINGS:
        if raw.startswith(bom):
            return raw[len(bom):].decode(encoding)
    return raw.decode("utf-8")


def split_args(text: str) -> list[str]:
    """Tokenize a command-line string the way a shell would.

    Double and single quotes group words and are removed.  Backslashes are
    literal so Windows paths pass through unchanged.
    """
    lexer = shlex.shlex(text, posix=True)
    lexer.whitespace_split = True
    lexer.escape = ""
    lexer.commenters = ""
    return list(lexer)


def read_response_file(path: str | Path) -> list[str]:
    """Read a response file and return its arguments.

    Line breaks are folded into single spaces before tokenizing.
    """
    try:
        raw = files.read_bytes(path)
    except OSError as exc:
        raise ResponseFileError(
            f"Unable to read response file: {exc.strerror or exc}",
            context={"file": str(path)},
        ) from exc
    try:
        text = decode_text(raw)
    except UnicodeDecodeError as exc:
        raise ResponseFileError(
            "Response file is not valid text.",
            context={"file": str(path)},
        ) from exc
    text = text.replace("\r\n", " ").replace("\n", " ").replace("\r", " ")
    try:
        return split_args(text)
    except ValueError as exc:
        # shlex raises ValueError("No closing quotation")
        raise ResponseFileError(
            f"Unable to parse response file: {exc}",
            context={"file": str(path)},
        ) from exc


def resolve_args(args: Sequence[str], flags: ToolchainFlags) -> list[str]:
    """Replace every response-file reference in *args* by its contents.

    Non-reference arguments keep their relative order.
    """
    resolved: list[str] = []
    for arg in args:
        response_file = flags.response_file_path(arg)
        if response_file:
            expanded = read_response_file(response_file)
            logger.debug(
                "Expanded response file %s into %d arguments", response_file, len(expanded)
            )
            resolved.extend(expanded)
        else:
            resolved.append(arg)
    return resolved

