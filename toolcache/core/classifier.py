"""Command classification and declared build-file extraction.

One read-only pass over the resolved arguments decides what kind of
invocation this is and which output, dependency and map files it
declares.
"""

from __future__ import annotations

from collections.abc import Sequence

from toolcache.core.errors import (
    DuplicateBuildFileError,
    MissingBuildFileError,
    ResponseFileError,
    UnsupportedCommandError,
)
from toolcache.models.invocation import (
    BuildFileRole,
    ExpectedFile,
    InvocationKind,
    InvocationScan,
)
from toolcache.models.toolchain import ToolchainFlags


def _value(arg: str) -> str:
    return arg[arg.find("=") + 1:]


def scan_invocation(args: Sequence[str], flags: ToolchainFlags) -> InvocationScan:
    """Scan resolved arguments once.

    Raises
    ------
    ResponseFileError
        If a response-file reference survived expansion (nested reference).
    DuplicateBuildFileError
        If the output, dependency or map file is declared twice.
    """
    is_object_compilation = False
    is_link = False
    is_preprocess_only = False
    output_file: str | None = None
    dependency_file: str | None = None
    map_file: str | None = None

    for arg in args:
        if arg == flags.compile_only:
            is_object_compilation = True
        elif arg == flags.run_linker:
            is_link = True
        elif arg == flags.preprocess_only:
            is_preprocess_only = True
        elif arg.startswith(flags.output_file):
            if output_file is not None:
                raise DuplicateBuildFileError(
                    "Only a single target file can be specified.",
                    context={"argument": arg, "previous": output_file},
                )
            output_file = _value(arg)
        elif arg.startswith(flags.dependency_file):
            if dependency_file is not None:
                raise DuplicateBuildFileError(
                    "Only a single dependency file can be specified.",
                    context={"argument": arg, "previous": dependency_file},
                )
            dependency_file = _value(arg)
        elif arg.startswith(flags.map_file):
            if map_file is not None:
                raise DuplicateBuildFileError(
                    "Only a single map file can be specified.",
                    context={"argument": arg, "previous": map_file},
                )
            map_file = _value(arg)
        elif arg.startswith(flags.response_file_prefixes):
            raise ResponseFileError(
                "Recursive response files are not supported.",
                context={"argument": arg},
            )

    return InvocationScan(
        is_object_compilation=is_object_compilation,
        is_link=is_link,
        is_preprocess_only=is_preprocess_only,
        output_file=output_file or None,
        dependency_file=dependency_file or None,
        map_file=map_file or None,
    )


def get_build_files(
    scan: InvocationScan,
) -> dict[BuildFileRole, ExpectedFile]:
    """Map each declared role to its expected file.

    The primary output is ``object`` for an object compilation (even when
    the run-linker marker is also present) and ``linktarget`` for a link.
    """
    if not scan.output_file:
        raise MissingBuildFileError("Unable to get the output file.")

    build_files: dict[BuildFileRole, ExpectedFile] = {}
    kind = scan.kind
    if kind is InvocationKind.OBJECT_COMPILE:
        build_files[BuildFileRole.OBJECT] = ExpectedFile(path=scan.output_file)
    elif kind is InvocationKind.LINK:
        build_files[BuildFileRole.LINK_TARGET] = ExpectedFile(path=scan.output_file)
    else:
        raise UnsupportedCommandError(
            "Unrecognized compilation type.",
            context={"output": scan.output_file},
        )

    if scan.dependency_file:
        build_files[BuildFileRole.DEPENDENCY] = ExpectedFile(path=scan.dependency_file)
    if scan.map_file:
        build_files[BuildFileRole.MAP] = ExpectedFile(path=scan.map_file)
    return build_files
