#  Copyright © 2025 Emmi AI GmbH. All rights reserved.

from __future__ import annotations

import os
from functools import cache
from pathlib import Path

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

CACHE_DIR_ENV_VAR = "FILE_CACHE_DIR"
DEFAULT_CACHE_ROOT = Path.home() / ".cache" / "inferencesh" / "files"


class CacheSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    root: Path = Field(DEFAULT_CACHE_ROOT)
    """Base directory holding one subdirectory per cache key."""

    @classmethod
    def from_env(cls) -> CacheSettings:
        """Builds settings from the ``FILE_CACHE_DIR`` environment variable, or the default root."""
        env_dir = os.getenv(CACHE_DIR_ENV_VAR)
        if env_dir:
            return cls(root=Path(env_dir).expanduser())
        return cls()


@cache
def get_cache_settings() -> CacheSettings:
    """Process-wide cache settings, read from the environment once on first use."""
    settings = CacheSettings.from_env()
    logger.debug(f"Using file cache root {settings.root}")
    return settings
