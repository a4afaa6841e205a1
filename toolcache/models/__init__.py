"""Toolcache data models — all Pydantic v2, all frozen (immutable)."""

from toolcache.models.fingerprint import (
    ErrorReport,
    InvocationFingerprint,
    InvocationOutcome,
)
from toolcache.models.invocation import (
    BuildFileRole,
    ExpectedFile,
    InvocationKind,
    InvocationScan,
)
from toolcache.models.toolchain import TI_C6X_FLAGS, ToolchainFlags

__all__ = [
    # invocation
    "InvocationKind",
    "BuildFileRole",
    "ExpectedFile",
    "InvocationScan",
    # toolchain
    "ToolchainFlags",
    "TI_C6X_FLAGS",
    # fingerprint
    "InvocationFingerprint",
    "ErrorReport",
    "InvocationOutcome",
]
