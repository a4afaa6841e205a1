"""Toolchain flag sets — the command-line vocabulary of one toolchain family."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ToolchainFlags(BaseModel):
    """Every flag prefix the adapter engine recognizes for a toolchain.

    Instances are immutable and shared process-wide; the engine functions
    take one as a parameter instead of hard-coding prefixes.
    """

    model_config = ConfigDict(frozen=True)

    # Response-file references: ``key=path`` form and short-flag form
    response_file_key: str
    response_file_short: str

    compile_only: str
    run_linker: str
    output_file: str
    dependency_file: tuple[str, ...]
    map_file: str

    # Dropped before synthesizing a preprocess-only run
    preprocess_control: tuple[str, ...]
    preprocess_only: str
    preprocessed_suffix: str = ".i"

    # Arguments that never reach the cache key
    filtered_prefixes: tuple[str, ...]

    linker_command_extension: str
    library_reference: str
    identity_flag: str

    @property
    def response_file_prefixes(self) -> tuple[str, str]:
        return (self.response_file_key, self.response_file_short)

    def response_file_path(self, arg: str) -> str | None:
        """Return the referenced path if *arg* is a response-file reference."""
        if arg.startswith(self.response_file_key):
            return arg[len(self.response_file_key):]
        if arg.startswith(self.response_file_short):
            return arg[len(self.response_file_short):]
        return None


# Texas Instruments C6000 code generation tools (cl6x)
TI_C6X_FLAGS = ToolchainFlags(
    response_file_key="--cmd_file=",
    response_file_short="-@",
    compile_only="--compile_only",
    run_linker="--run_linker",
    output_file="--output_file=",
    dependency_file=("-ppd=", "--preproc_dependency="),
    map_file="--map_file=",
    preprocess_control=("-pp", "--preproc_"),
    preprocess_only="--preproc_only",
    filtered_prefixes=(
        "-I",
        "--include",
        "--preinclude=",
        "-D",
        "--define=",
        "--c_file=",
        "--cpp_file=",
        "--output_file=",
        "--map_file=",
        "-ppd=",
        "--preproc_dependency=",
    ),
    linker_command_extension=".cmd",
    library_reference="-l",
    identity_flag="--help",
)
