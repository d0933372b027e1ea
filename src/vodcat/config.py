"""Runtime configuration from environment variables.

VODCAT_DATA_DIR      catalog root, one directory per collection (default ".")
VODCAT_COLLECTIONS   extra collection names, comma-separated
VODCAT_LOG_LEVEL     logging level name (default INFO)
VODCAT_CORS_ORIGINS  allowed CORS origins, comma-separated
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

DEFAULT_DATA_DIR = Path(".")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _split_csv(value: str | None) -> tuple[str, ...]:
    if not value:
        return ()
    return tuple(part.strip() for part in value.split(",") if part.strip())


@dataclass(frozen=True)
class Settings:
    """Application settings."""

    data_dir: Path = DEFAULT_DATA_DIR
    extra_collections: tuple[str, ...] = ()
    log_level: str = "INFO"
    cors_origins: tuple[str, ...] = ()

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from environment variables.

        Args:
            environ: Mapping to read instead of os.environ.

        Returns:
            Settings with unset variables left at their defaults.
        """
        env = os.environ if environ is None else environ
        return cls(
            data_dir=Path(env.get("VODCAT_DATA_DIR", str(DEFAULT_DATA_DIR))).expanduser(),
            extra_collections=_split_csv(env.get("VODCAT_COLLECTIONS")),
            log_level=env.get("VODCAT_LOG_LEVEL", "INFO").upper(),
            cors_origins=_split_csv(env.get("VODCAT_CORS_ORIGINS")),
        )


def configure_logging(level: str = "INFO") -> None:
    """Install a stderr handler on the root logger."""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
