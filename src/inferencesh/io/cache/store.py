#  Copyright © 2025 Emmi AI GmbH. All rights reserved.

from __future__ import annotations

import os
from pathlib import Path
from uuid import uuid4

from loguru import logger

from inferencesh.io.cache.keys import cache_path
from inferencesh.io.cache.settings import CacheSettings, get_cache_settings
from inferencesh.io.errors import InvalidInputError, TransferFailedError
from inferencesh.io.transport import download_to_path


def _discard(path: Path) -> None:
    # Best effort: the transfer error is what gets reported.
    try:
        path.unlink(missing_ok=True)
    except OSError as exc:
        logger.warning(f"Could not remove partial download {path}: {exc}")


class ContentCache:
    """Content-addressed store of downloaded files.

    Every remote locator maps to ``<root>/<cache_key>/<filename>``. An entry becomes visible only
    through an atomic rename of a fully written sibling temp file, so a present entry is always
    complete and is never fetched again.

    Args:
        settings: Cache settings. Defaults to the process-wide settings read from the environment.
    """

    def __init__(self, settings: CacheSettings | None = None) -> None:
        self.settings = settings or get_cache_settings()

    @classmethod
    def at(cls, root: str | os.PathLike[str]) -> ContentCache:
        """Cache rooted at an explicit directory instead of the configured one."""
        return cls(CacheSettings(root=Path(root)))

    @property
    def root(self) -> Path:
        return self.settings.root

    def path_for(self, uri: str) -> Path:
        """Returns the cache entry location for ``uri`` without touching the filesystem.

        Raises:
            InvalidInputError: If the locator cannot be parsed (e.g. a malformed port).
        """
        try:
            return cache_path(self.root, uri)
        except ValueError as exc:
            raise InvalidInputError(f"Invalid locator: {exc}", context={"uri": uri}) from exc

    def fetch(self, uri: str, *, reuse_existing: bool = True) -> Path:
        """Guarantees a complete local copy of ``uri`` and returns its path.

        Args:
            uri: Remote locator.
            reuse_existing: Return an existing entry without network access. When False the
                locator is always fetched and the entry replaced. Defaults to True.

        Returns:
            - Path: The committed cache entry.

        Raises:
            TransferFailedError: If the download or the commit fails.
        """
        target = self.path_for(uri)
        if reuse_existing and target.exists():
            logger.debug(f"Cache hit for {uri} → {target}")
            return target

        target.parent.mkdir(parents=True, exist_ok=True)
        # unique per fetch; created by the transport with the default umask permissions
        tmp = target.with_name(f"{target.name}.{uuid4().hex}.tmp")

        logger.info(f"Downloading {uri} → {target}")
        try:
            download_to_path(uri, tmp, label=target.name)
            tmp.replace(target)
        except Exception as exc:
            raise TransferFailedError(uri, exc) from exc
        finally:
            if tmp.exists():
                _discard(tmp)
        return target

    def __repr__(self) -> str:
        return f"{type(self).__name__}(root={str(self.root)!r})"
