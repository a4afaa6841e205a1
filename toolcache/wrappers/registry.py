"""Wrapper registry — selects a toolchain adapter from the invoked binary.

Wrapper classes are tried in registration order; the first whose
``can_handle_command()`` accepts the argument vector wins.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from toolcache.config import ToolcacheConfig
from toolcache.core import files
from toolcache.core.errors import UnknownToolchainError
from toolcache.core.runner import Runner
from toolcache.wrappers.base import ProgramWrapper
from toolcache.wrappers.ti_c6x import TiC6xWrapper

logger = logging.getLogger(__name__)


class WrapperRegistry:
    """Ordered collection of ``ProgramWrapper`` classes.

    Examples
    --------
    >>> registry = WrapperRegistry()
    >>> registry.register(TiC6xWrapper)
    >>> registry.names()
    ['ti_c6x']
    """

    def __init__(self) -> None:
        self._wrappers: list[type[ProgramWrapper]] = []

    def register(self, wrapper_cls: type[ProgramWrapper]) -> None:
        """Add a wrapper class.

        Raises
        ------
        ValueError
            If a wrapper with the same name is already registered.
        """
        if wrapper_cls.name in self.names():
            raise ValueError(f"Wrapper '{wrapper_cls.name}' is already registered.")
        self._wrappers.append(wrapper_cls)
        logger.debug("Registered wrapper %s", wrapper_cls.name)

    def unregister(self, name: str) -> bool:
        before = len(self._wrappers)
        self._wrappers = [w for w in self._wrappers if w.name != name]
        return len(self._wrappers) != before

    def names(self) -> list[str]:
        return [w.name for w in self._wrappers]

    def wrappers(self) -> list[type[ProgramWrapper]]:
        return list(self._wrappers)

    def find_wrapper(
        self,
        args: Sequence[str],
        *,
        runner: Runner | None = None,
        settings: ToolcacheConfig | None = None,
    ) -> ProgramWrapper:
        """Return a wrapper instance for *args*.

        Raises
        ------
        UnknownToolchainError
            If no registered wrapper handles the program.
        """
        if not args:
            raise UnknownToolchainError("No program given.")
        for wrapper_cls in self._wrappers:
            wrapper = wrapper_cls(args, runner=runner, settings=settings)
            if wrapper.can_handle_command():
                logger.debug("Selected wrapper %s for %s", wrapper_cls.name, args[0])
                return wrapper
        raise UnknownToolchainError(
            "No wrapper can handle this program.",
            context={"program": files.get_file_part(args[0])},
        )


def default_registry() -> WrapperRegistry:
    """Return a registry holding every built-in wrapper."""
    registry = WrapperRegistry()
    registry.register(TiC6xWrapper)
    return registry
