"""Runtime configuration — env-driven.

Settings are read from TOOLCACHE_* environment variables or a .env file
in the working directory.
"""

from __future__ import annotations

import hashlib
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ToolcacheConfig(BaseSettings):
    """Adapter configuration with environment variable overrides.

    Examples
    --------
    Override via environment::

        export TOOLCACHE_LOG_LEVEL=DEBUG
        export TOOLCACHE_TEMP_DIR=/scratch/toolcache
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="TOOLCACHE_",
        env_file_encoding="utf-8",
        frozen=True,
    )

    log_level: str = "INFO"
    debug: bool = False

    # Where private preprocessed-output files are created (None = system temp)
    temp_dir: Path | None = None

    hash_algorithm: str = "sha256"

    @field_validator("hash_algorithm")
    @classmethod
    def _known_algorithm(cls, value: str) -> str:
        name = value.lower()
        if name not in hashlib.algorithms_guaranteed or name.startswith("shake_"):
            raise ValueError(f"Unknown hash algorithm: {value!r}")
        return name


# Module-level singleton — import as `from toolcache.config import config`
config = ToolcacheConfig()
