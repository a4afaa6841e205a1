"""Cache-engine handoff models — one record per fingerprinted invocation."""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from toolcache.models.invocation import BuildFileRole, ExpectedFile


class InvocationFingerprint(BaseModel):
    """What the cache engine receives for a single invocation.

    The engine composes the final cache key from ``toolchain_identity``,
    ``relevant_arguments`` and ``content_fingerprint``; ``build_files`` tells
    it which paths to populate or restore.
    """

    model_config = ConfigDict(frozen=True)

    wrapper: str
    toolchain_identity: str
    relevant_arguments: list[str]
    content_fingerprint: str
    build_files: dict[BuildFileRole, ExpectedFile] = Field(default_factory=dict)

    def canonical_bytes(self) -> bytes:
        """Sorted-key, compact JSON encoding for deterministic hashing."""
        payload: dict[str, Any] = self.model_dump(mode="json")
        return json.dumps(
            payload, sort_keys=True, separators=(",", ":"), ensure_ascii=True
        ).encode("utf-8")


class ErrorReport(BaseModel):
    """Serializable description of a failed invocation."""

    model_config = ConfigDict(frozen=True)

    code: str
    message: str
    context: dict[str, str] = Field(default_factory=dict)


class InvocationOutcome(BaseModel):
    """Success-or-error result handed to the cache engine.

    Exactly one of ``fingerprint`` and ``error`` is set.  On error the
    engine decides whether to fall back to an uncached toolchain run.
    """

    model_config = ConfigDict(frozen=True)

    fingerprint: InvocationFingerprint | None = None
    error: ErrorReport | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
