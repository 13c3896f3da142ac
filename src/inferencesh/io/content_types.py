#  Copyright © 2025 Emmi AI GmbH. All rights reserved.

from __future__ import annotations

import os
from pathlib import PurePath

# Closed lookup table, extension (lowercase, with leading dot) -> MIME type.
MIME_TYPES: dict[str, str] = {
    # images
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".webp": "image/webp",
    ".svg": "image/svg+xml",
    ".bmp": "image/bmp",
    ".tif": "image/tiff",
    ".tiff": "image/tiff",
    # video
    ".mp4": "video/mp4",
    ".webm": "video/webm",
    ".mov": "video/quicktime",
    ".mkv": "video/x-matroska",
    ".avi": "video/x-msvideo",
    # audio
    ".mp3": "audio/mpeg",
    ".wav": "audio/wav",
    ".ogg": "audio/ogg",
    ".flac": "audio/flac",
    ".aac": "audio/aac",
    ".m4a": "audio/mp4",
    # documents
    ".pdf": "application/pdf",
    ".json": "application/json",
    ".txt": "text/plain",
    ".md": "text/markdown",
    ".csv": "text/csv",
    ".html": "text/html",
    # archives
    ".zip": "application/zip",
    ".tar": "application/x-tar",
    ".gz": "application/gzip",
}


def guess_content_type(path: str | os.PathLike[str]) -> str | None:
    """Looks up the MIME type for a file by its extension.

    Args:
        path: File path or file name.

    Returns:
        - str: MIME type from :data:`MIME_TYPES`.
        - None: If the extension is missing or unknown.
    """
    return MIME_TYPES.get(PurePath(path).suffix.lower())
