"""``toolcache inspect`` — fingerprint one toolchain invocation.

Runs the full adapter pipeline for the given command line and prints what
the cache engine would receive.
"""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from toolcache.core.errors import ToolcacheError
from toolcache.wrappers.registry import default_registry

console = Console()
err_console = Console(stderr=True)


def inspect_cmd(
    command: list[str] = typer.Argument(
        ...,
        help="The toolchain command line. Put it after '--' so its flags are not parsed.",
    ),
    as_json: bool = typer.Option(
        False, "--json", help="Print the handoff record as JSON."
    ),
) -> None:
    """Fingerprint a toolchain invocation without running the compilation."""
    try:
        wrapper = default_registry().find_wrapper(command)
        record = wrapper.fingerprint()
    except ToolcacheError as exc:
        err_console.print(f"[red]{exc.code.value}:[/red] {exc}")
        raise typer.Exit(code=1)

    if as_json:
        console.print_json(record.model_dump_json())
        return

    table = Table(title=f"Invocation fingerprint ({record.wrapper})")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    identity_lines = record.toolchain_identity.strip().splitlines()
    table.add_row("Toolchain identity", identity_lines[0] if identity_lines else "")
    table.add_row("Relevant arguments", " ".join(record.relevant_arguments))
    content = record.content_fingerprint
    if len(content) > 80:
        content = f"{len(content)} characters of preprocessed text"
    table.add_row("Content fingerprint", content)
    for role, expected in record.build_files.items():
        table.add_row(f"Build file ({role.value})", expected.path)
    console.print(table)
