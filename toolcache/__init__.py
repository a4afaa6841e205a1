"""Toolcache: compiler-toolchain adapters for a compilation cache.

Normalizes a toolchain invocation into a stable cache-key fragment and
fingerprints every input that influences the compiled output:
  - response-file expansion and invocation classification
  - preprocessed source text for object compilations
  - archive-aware, timestamp-free digests of link inputs
  - linker command files resolved to library content
"""

__version__ = "0.2.0"

from toolcache.core.errors import ToolcacheError
from toolcache.models.fingerprint import InvocationFingerprint, InvocationOutcome
from toolcache.wrappers.registry import WrapperRegistry, default_registry

__all__ = [
    "InvocationFingerprint",
    "InvocationOutcome",
    "ToolcacheError",
    "WrapperRegistry",
    "default_registry",
    "__version__",
]
