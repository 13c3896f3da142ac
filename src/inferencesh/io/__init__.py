#  Copyright © 2025 Emmi AI GmbH. All rights reserved.

# ruff: noqa: I001
from .errors import FileReferenceError, InvalidInputError, ResolutionFailedError, TransferFailedError
from .storage import StorageDir, ensure_dir
from .cache.settings import CacheSettings, get_cache_settings
from .cache.store import ContentCache
from .file import File
from .download import download

__all__ = [
    # --- from errors:
    "FileReferenceError",
    "InvalidInputError",
    "ResolutionFailedError",
    "TransferFailedError",
    # --- from storage:
    "StorageDir",
    "ensure_dir",
    # --- from cache:
    "CacheSettings",
    "ContentCache",
    "get_cache_settings",
    # --- from file:
    "File",
    # --- from download:
    "download",
]
