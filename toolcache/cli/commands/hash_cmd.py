"""``toolcache hash-file`` — archive-aware digests of individual files."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from toolcache.core.archive import hash_file
from toolcache.core.errors import ToolcacheError

console = Console()
err_console = Console(stderr=True)


def hash_cmd(
    paths: list[Path] = typer.Argument(..., help="Files to hash."),
    algorithm: str = typer.Option(None, help="hashlib algorithm (default from config)."),
) -> None:
    """Print the digest of each file, ignoring archive member timestamps."""
    failed = False
    for path in paths:
        try:
            digest = hash_file(path, algorithm)
        except ToolcacheError as exc:
            err_console.print(f"[red]{path}:[/red] {exc}")
            failed = True
            continue
        console.print(f"{digest}  {path}", highlight=False)
    if failed:
        raise typer.Exit(code=1)
