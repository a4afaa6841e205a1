"""Program wrapper interface — one implementation per toolchain family.

A wrapper is created for a single invocation and is stateless beyond it.
``fingerprint()`` runs the full sequence::

    resolve -> classify -> {preprocess | hash link inputs}
            -> filter arguments -> probe identity
"""

from __future__ import annotations

import abc
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import ClassVar

from toolcache.config import ToolcacheConfig, config as default_config
from toolcache.core.errors import ToolcacheError
from toolcache.core.runner import Runner, SubprocessRunner
from toolcache.models.fingerprint import (
    ErrorReport,
    InvocationFingerprint,
    InvocationOutcome,
)
from toolcache.models.invocation import BuildFileRole, ExpectedFile

logger = logging.getLogger(__name__)


class ProgramWrapper(abc.ABC):
    """Adapter contract between the cache engine and one toolchain.

    Parameters
    ----------
    args:
        The raw argument vector; ``args[0]`` is the toolchain binary.
    runner:
        Process backend for the preprocess run and the identity probe.
    settings:
        Adapter configuration; defaults to the module-level singleton.
    """

    name: ClassVar[str] = "generic"

    def __init__(
        self,
        args: Sequence[str],
        *,
        runner: Runner | None = None,
        settings: ToolcacheConfig | None = None,
    ) -> None:
        if not args:
            raise ValueError("A program wrapper needs at least the program path.")
        self._args: list[str] = list(args)
        self._resolved_args: list[str] = []
        self._runner = runner or SubprocessRunner()
        self._settings = settings or default_config

    @property
    def args(self) -> list[str]:
        return list(self._args)

    @property
    def resolved_args(self) -> list[str]:
        return list(self._resolved_args)

    @property
    def temp_dir(self) -> Path | None:
        return self._settings.temp_dir

    @property
    def hash_algorithm(self) -> str:
        return self._settings.hash_algorithm

    # -- Contract -----------------------------------------------------------

    @abc.abstractmethod
    def can_handle_command(self) -> bool:
        """Return True if this wrapper understands ``args[0]``."""

    @abc.abstractmethod
    def resolve_args(self) -> None:
        """Expand response files into ``resolved_args``."""

    @abc.abstractmethod
    def preprocess_source(self) -> str:
        """Return the cache-relevant content representation."""

    @abc.abstractmethod
    def get_relevant_arguments(self) -> list[str]:
        """Return the stable argument fragment of the cache key."""

    @abc.abstractmethod
    def get_program_id(self) -> str:
        """Return the toolchain identity string."""

    @abc.abstractmethod
    def get_build_files(self) -> dict[BuildFileRole, ExpectedFile]:
        """Return the files the cache engine must populate on a hit."""

    # -- Pipeline -----------------------------------------------------------

    def fingerprint(self) -> InvocationFingerprint:
        """Run the whole adapter pipeline for this invocation.

        Raises
        ------
        ToolcacheError
            On any failure; no partial record is returned.
        """
        self.resolve_args()
        build_files = self.get_build_files()
        content = self.preprocess_source()
        relevant_arguments = self.get_relevant_arguments()
        identity = self.get_program_id()
        logger.debug(
            "Fingerprinted %s invocation with %d build files",
            self.name,
            len(build_files),
        )
        return InvocationFingerprint(
            wrapper=self.name,
            toolchain_identity=identity,
            relevant_arguments=relevant_arguments,
            content_fingerprint=content,
            build_files=build_files,
        )

    def try_fingerprint(self) -> InvocationOutcome:
        """Like :meth:`fingerprint`, but report failure as a value."""
        try:
            return InvocationOutcome(fingerprint=self.fingerprint())
        except ToolcacheError as exc:
            logger.info("%s adapter declined invocation: %s", self.name, exc.message)
            return InvocationOutcome(error=error_report(exc))


def error_report(exc: ToolcacheError) -> ErrorReport:
    return ErrorReport(
        code=exc.code.value,
        message=exc.message,
        context=dict(exc.context),
    )
