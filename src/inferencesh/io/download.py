#  Copyright © 2025 Emmi AI GmbH. All rights reserved.

from __future__ import annotations

import asyncio
import os
from pathlib import Path

from loguru import logger

from inferencesh.io.cache.store import ContentCache
from inferencesh.io.errors import InvalidInputError
from inferencesh.io.file import is_remote
from inferencesh.io.storage import StorageDir, ensure_dir, is_ephemeral


async def download(
    uri: str,
    directory: StorageDir | str | os.PathLike[str],
    *,
    ephemeral: bool | None = None,
) -> Path:
    """Downloads a file into ``directory`` and returns its local path.

    The file is laid out like the file cache, ``<directory>/<cache_key>/<filename>``. An existing
    file at that location is returned without downloading, except in ephemeral directories where
    leftovers from earlier runs are never trusted.

    Example:
        .. code-block:: python

            path = await download("https://example.com/model.bin", StorageDir.CACHE)

    Args:
        uri: ``http(s)://`` locator.
        directory: Target directory, created if missing.
        ephemeral: Always download, even if the file exists. Defaults to True for
            :attr:`StorageDir.TEMP` and False otherwise.

    Returns:
        - Path: Path of the downloaded file.

    Raises:
        InvalidInputError: If ``uri`` is not an ``http(s)://`` locator.
        TransferFailedError: If the download fails.
    """
    if not is_remote(uri):
        raise InvalidInputError("Only http:// and https:// locators can be downloaded", context={"uri": uri})
    if ephemeral is None:
        ephemeral = is_ephemeral(directory)

    cache = ContentCache.at(ensure_dir(directory))
    path = await asyncio.to_thread(cache.fetch, uri, reuse_existing=not ephemeral)
    logger.info(f"File ready → {path}")
    return path
