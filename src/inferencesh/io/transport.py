#  Copyright © 2025 Emmi AI GmbH. All rights reserved.

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any

import requests  # type: ignore[import-untyped]

from inferencesh.io.logging_progress import LogProgress

DEFAULT_CHUNK = 1024 * 1024  # 1 MiB
REQUEST_TIMEOUT = 60  # seconds, connect and read


def write_chunks(destination_path: Path, chunks: Iterable[bytes], *, progress: Any = None) -> int:
    """Writes byte chunks to ``destination_path``.

    Args:
        destination_path: Destination path, parent directories are created.
        chunks: Iterable of bytes to write.
        progress: Progress object or None for no progress. Expected to have .update(int) and .close() methods.

    Returns:
        - int: Number of bytes written.
    """
    destination_path.parent.mkdir(parents=True, exist_ok=True)
    written = 0
    try:
        with destination_path.open("wb") as f:
            for chunk in chunks:
                if not chunk:
                    continue
                f.write(chunk)
                written += len(chunk)
                if progress:
                    progress.update(len(chunk))
    finally:
        if progress:
            progress.close()
    return written


def download_to_path(uri: str, destination_path: Path, *, label: str | None = None) -> int:
    """Streams the full content at ``uri`` into ``destination_path``.

    Redirects are followed; the bytes of the final response are written.

    Args:
        uri: An ``http://`` or ``https://`` locator.
        destination_path: File to write.
        label: Name shown in progress logs, defaults to the destination file name.

    Returns:
        - int: Number of bytes written.

    Raises:
        requests.HTTPError: On a non-success status.
        requests.TooManyRedirects: On a redirect loop.
        requests.RequestException: On any other transport failure.
    """
    with requests.get(uri, stream=True, allow_redirects=True, timeout=REQUEST_TIMEOUT) as resp:
        resp.raise_for_status()
        total = int(resp.headers.get("Content-Length") or 0)
        progress = LogProgress(label=label or destination_path.name, total_bytes=total)
        return write_chunks(destination_path, resp.iter_content(DEFAULT_CHUNK), progress=progress)
