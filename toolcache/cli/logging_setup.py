"""Root logger configuration for the command-line entry point."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from toolcache.config import ToolcacheConfig


def configure_logging(settings: ToolcacheConfig, *, verbose: bool = False) -> None:
    """Send log records to stderr through rich, at the configured level."""
    level = "DEBUG" if verbose or settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
