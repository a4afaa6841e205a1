"""Adapter error model — every failure aborts the current invocation.

Each error carries a stable ``ErrorCode`` and a ``context`` mapping naming
the file or argument that triggered it.  Nothing in the core catches these;
they travel up to the cache engine, which decides whether to run the
toolchain uncached.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum


class ErrorCode(str, Enum):
    """Stable error identifiers."""

    ADAPTER = "E_ADAPTER"
    RESPONSE_FILE = "E_RESPONSE_FILE"
    ARCHIVE_PARSE = "E_ARCHIVE_PARSE"
    DUPLICATE_BUILD_FILE = "E_DUPLICATE_BUILD_FILE"
    MISSING_BUILD_FILE = "E_MISSING_BUILD_FILE"
    UNSUPPORTED_COMMAND = "E_UNSUPPORTED_COMMAND"
    PREPROCESS = "E_PREPROCESS"
    TOOLCHAIN_PROBE = "E_TOOLCHAIN_PROBE"
    INPUT_FILE = "E_INPUT_FILE"
    PROCESS_LAUNCH = "E_PROCESS_LAUNCH"
    UNKNOWN_TOOLCHAIN = "E_UNKNOWN_TOOLCHAIN"


class ToolcacheError(RuntimeError):
    """Base class for all adapter failures."""

    code: ErrorCode = ErrorCode.ADAPTER

    def __init__(
        self,
        message: str,
        *,
        context: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.context = dict(context or {})

    def __str__(self) -> str:
        parts = [self.message]
        for key, value in self.context.items():
            if value:
                parts.append(f"  {key}: {value}")
        return "\n".join(parts)


class ResponseFileError(ToolcacheError):
    """Raised for nested (recursive) or unreadable response files."""

    code = ErrorCode.RESPONSE_FILE


class ArchiveParseError(ToolcacheError):
    """Raised when an AR archive is truncated or declares impossible sizes.

    A partial digest of a corrupt archive must never reach the cache.
    """

    code = ErrorCode.ARCHIVE_PARSE


class DuplicateBuildFileError(ToolcacheError):
    """Raised when one build-file role is declared more than once."""

    code = ErrorCode.DUPLICATE_BUILD_FILE


class MissingBuildFileError(ToolcacheError):
    """Raised when no primary output file is declared."""

    code = ErrorCode.MISSING_BUILD_FILE


class UnsupportedCommandError(ToolcacheError):
    """Raised when an invocation is neither an object compile nor a link."""

    code = ErrorCode.UNSUPPORTED_COMMAND


class PreprocessError(ToolcacheError):
    code = ErrorCode.PREPROCESS


class ToolchainProbeError(ToolcacheError):
    code = ErrorCode.TOOLCHAIN_PROBE


class InputFileError(ToolcacheError):
    """Raised when a link input cannot be read."""

    code = ErrorCode.INPUT_FILE


class ProcessLaunchError(ToolcacheError):
    """Raised when the toolchain binary cannot be started at all."""

    code = ErrorCode.PROCESS_LAUNCH


class UnknownToolchainError(ToolcacheError):
    """Raised when no registered wrapper handles the invoked binary."""

    code = ErrorCode.UNKNOWN_TOOLCHAIN


__all__ = [
    "ArchiveParseError",
    "DuplicateBuildFileError",
    "ErrorCode",
    "InputFileError",
    "MissingBuildFileError",
    "PreprocessError",
    "ProcessLaunchError",
    "ResponseFileError",
    "ToolcacheError",
    "ToolchainProbeError",
    "UnknownToolchainError",
    "UnsupportedCommandError",
]
