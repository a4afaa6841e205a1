"""Texas Instruments C6000 code generation tools (``cl6x``)."""

from __future__ import annotations

import re
from typing import ClassVar

from toolcache.core import classifier, files
from toolcache.core.arg_filter import get_relevant_arguments
from toolcache.core.identity import get_program_id
from toolcache.core.preprocess import preprocess_source
from toolcache.core.response_files import resolve_args
from toolcache.models.invocation import BuildFileRole, ExpectedFile
from toolcache.models.toolchain import TI_C6X_FLAGS, ToolchainFlags
from toolcache.wrappers.base import ProgramWrapper

_PROGRAM_RE = re.compile(r".*cl6x.*")


class TiC6xWrapper(ProgramWrapper):
    """Wrapper for ``cl6x`` object compilations and ``--run_linker`` links."""

    name = "ti_c6x"
    flags: ClassVar[ToolchainFlags] = TI_C6X_FLAGS

    def can_handle_command(self) -> bool:
        program = files.get_file_part(self._args[0]).lower()
        return _PROGRAM_RE.fullmatch(program) is not None

    def resolve_args(self) -> None:
        self._resolved_args = resolve_args(self._args, self.flags)

    def preprocess_source(self) -> str:
        scan = classifier.scan_invocation(self._resolved_args, self.flags)
        return preprocess_source(
            self._resolved_args,
            scan,
            self._runner,
            self.flags,
            temp_dir=self.temp_dir,
            algorithm=self.hash_algorithm,
        )

    def get_relevant_arguments(self) -> list[str]:
        return get_relevant_arguments(self._resolved_args, self.flags)

    def get_program_id(self) -> str:
        return get_program_id(self._resolved_args, self._runner, self.flags)

    def get_build_files(self) -> dict[BuildFileRole, ExpectedFile]:
        scan = classifier.scan_invocation(self._resolved_args, self.flags)
        return classifier.get_build_files(scan)
