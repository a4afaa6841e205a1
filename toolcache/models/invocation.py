"""Invocation classification and declared build-file models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class InvocationKind(str, Enum):
    """What a single toolchain invocation does.

    ``OBJECT_COMPILE`` wins over ``LINK`` when both markers are present.
    ``PREPROCESS`` is reported for invocations that carry only the
    preprocess-only flag. Those are unsupported and never cached.
    """

    PREPROCESS = "preprocess"
    OBJECT_COMPILE = "object_compile"
    LINK = "link"


class BuildFileRole(str, Enum):
    """Logical role of a file the cache engine must populate on a hit."""

    OBJECT = "object"
    LINK_TARGET = "linktarget"
    DEPENDENCY = "dep"
    MAP = "map"


class ExpectedFile(BaseModel):
    """A declared output path and whether the toolchain must produce it."""

    model_config = ConfigDict(frozen=True)

    path: str
    required: bool = True


class InvocationScan(BaseModel):
    """Everything a single pass over the resolved arguments discovers.

    Duplicate declarations are rejected while scanning, so each role holds
    at most one path.
    """

    model_config = ConfigDict(frozen=True)

    is_object_compilation: bool = False
    is_link: bool = False
    is_preprocess_only: bool = False
    output_file: str | None = None
    dependency_file: str | None = None
    map_file: str | None = None

    @property
    def kind(self) -> InvocationKind | None:
        if self.is_object_compilation:
            return InvocationKind.OBJECT_COMPILE
        if self.is_link:
            return InvocationKind.LINK
        if self.is_preprocess_only:
            return InvocationKind.PREPROCESS
        return None
