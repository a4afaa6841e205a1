"""Per-toolchain program wrappers."""

from toolcache.wrappers.base import ProgramWrapper
from toolcache.wrappers.registry import WrapperRegistry, default_registry
from toolcache.wrappers.ti_c6x import TiC6xWrapper

__all__ = ["ProgramWrapper", "TiC6xWrapper", "WrapperRegistry", "default_registry"]
