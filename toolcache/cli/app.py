"""Main Typer application — registers all CLI commands.

Entry point: ``toolcache`` (configured via pyproject.toml project.scripts).
"""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from toolcache import __version__
from toolcache.cli.commands.hash_cmd import hash_cmd
from toolcache.cli.commands.inspect_cmd import inspect_cmd
from toolcache.cli.logging_setup import configure_logging
from toolcache.config import config
from toolcache.wrappers.registry import default_registry

app = typer.Typer(
    name="toolcache",
    help="Toolcache: toolchain adapters for a compilation cache.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    configure_logging(config, verbose=verbose)


# Register subcommands
app.command(name="inspect", help="Fingerprint a toolchain invocation.")(inspect_cmd)
app.command(name="hash-file", help="Print archive-aware file digests.")(hash_cmd)


@app.command(name="wrappers", help="List registered toolchain wrappers.")
def wrappers_cmd() -> None:
    """List the toolchain wrappers in selection order."""
    console = Console()
    table = Table(title="Toolchain wrappers")
    table.add_column("#", justify="right")
    table.add_column("Name", style="cyan")
    table.add_column("Class")
    for index, wrapper_cls in enumerate(default_registry().wrappers(), start=1):
        table.add_row(str(index), wrapper_cls.name, wrapper_cls.__name__)
    console.print(table)


@app.command(name="version", help="Show the toolcache version.")
def version_cmd() -> None:
    Console().print(f"toolcache {__version__}")


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
