#  Copyright © 2025 Emmi AI GmbH. All rights reserved.

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path


class StorageDir(str, Enum):
    """Standard storage directories available to apps at runtime."""

    DATA = "/app/data"
    TEMP = "/app/tmp"
    CACHE = "/app/cache"

    def describe(self) -> str:
        return {
            self.DATA: "Persistent storage, survives across runs",
            self.TEMP: "Temporary storage, cleaned between runs",
            self.CACHE: "Cache storage, persists across runs and may be evicted",
        }[self]


def ensure_dir(directory: StorageDir | str | os.PathLike[str]) -> Path:
    """Creates a storage directory if needed and returns its path.

    Args:
        directory: A :class:`StorageDir` member or any directory path.

    Returns:
        - Path: The directory path.
    """
    path = Path(directory.value if isinstance(directory, StorageDir) else directory)
    path.mkdir(parents=True, exist_ok=True)
    return path


def is_ephemeral(directory: StorageDir | str | os.PathLike[str]) -> bool:
    """Whether existing files in ``directory`` must never be reused as cached copies."""
    if isinstance(directory, StorageDir):
        return directory is StorageDir.TEMP
    return Path(directory) == Path(StorageDir.TEMP.value)
