#  Copyright © 2025 Emmi AI GmbH. All rights reserved.

"""File references: a file that may live at a remote URL or on local disk.

A :class:`File` is always backed by a local file once resolved. Remote ``http(s)://`` locators are
downloaded into the content-addressed cache (see :class:`~inferencesh.io.cache.store.ContentCache`)
and the cached copy is reused on every later resolution of the same locator.

Example:
    .. code-block:: python

        image = await File.resolve("https://example.com/cat.png")
        output = File.from_path("/tmp/result.png")
        json.dumps({"image": output.to_dict()})

The serialized record ``{path, uri, content_type, size, filename}`` omits every unset field. An
uploader reads ``path`` to find the bytes and ``uri`` to recognize an already-remote file.
"""

from __future__ import annotations

import asyncio
import dataclasses
import json
import os
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any
from urllib.parse import unquote, urlsplit
from urllib.request import url2pathname

from loguru import logger

from inferencesh.io.cache.store import ContentCache
from inferencesh.io.content_types import guess_content_type
from inferencesh.io.errors import InvalidInputError, ResolutionFailedError

REMOTE_SCHEMES = ("http://", "https://")
FILE_SCHEME = "file://"


class InputKind(str, Enum):
    REMOTE_LOCATOR = "remote_locator"
    LOCAL_PATH = "local_path"
    DESCRIPTOR = "descriptor"
    EXISTING = "existing"


def is_remote(uri: str) -> bool:
    return uri.startswith(REMOTE_SCHEMES)


def classify_input(value: Any) -> InputKind:
    """Decides once how a :meth:`File.resolve` input is interpreted."""
    if isinstance(value, File):
        return InputKind.EXISTING
    if isinstance(value, str):
        return InputKind.REMOTE_LOCATOR if is_remote(value) else InputKind.LOCAL_PATH
    if isinstance(value, os.PathLike):
        return InputKind.LOCAL_PATH
    return InputKind.DESCRIPTOR


def _as_local_path(value: str | os.PathLike[str]) -> str:
    """Absolute filesystem path for a plain path or a ``file://`` URL."""
    value = os.fspath(value)
    if value.startswith(FILE_SCHEME):
        value = url2pathname(unquote(urlsplit(value).path))
    return os.path.abspath(os.path.expanduser(value))


def _read_descriptor(descriptor: Any) -> dict[str, Any]:
    """Normalizes a mapping or attribute object into the canonical :class:`File` fields."""
    if isinstance(descriptor, Mapping):
        get = descriptor.get
    else:

        def get(key: str) -> Any:
            return getattr(descriptor, key, None)

    content_type = get("content_type")
    if content_type is None:
        content_type = get("contentType")
    return {
        "uri": get("uri") or None,
        "path": os.fspath(get("path")) if get("path") else None,
        "content_type": content_type,
        "size": get("size"),
        "filename": get("filename"),
    }


@dataclass
class File:
    """A file, possibly remote, materialized on local disk.

    Build instances with :meth:`resolve` (async, may download) or :meth:`from_path` (sync, local
    only) rather than calling the constructor directly.
    """

    uri: str | None = None
    """Remote locator the file was obtained from."""
    path: str | None = None
    """Absolute local path."""
    content_type: str | None = None
    """MIME type, inferred from the file extension when not given."""
    size: int | None = None
    """Size in bytes."""
    filename: str | None = None
    """Base name of the file."""

    def __post_init__(self) -> None:
        if not self.uri and not self.path:
            raise InvalidInputError("Either 'uri' or 'path' must be provided")
        if self.size is not None:
            if isinstance(self.size, bool) or not isinstance(self.size, int):
                raise InvalidInputError("'size' must be an integer", context={"size": self.size})
            if self.size < 0:
                raise InvalidInputError("'size' must be non-negative", context={"size": self.size})

    @classmethod
    async def resolve(cls, value: Any, *, cache: ContentCache | None = None) -> File:
        """Creates a file from a URL, a local path, a descriptor or another :class:`File`.

        Remote locators are downloaded into the cache unless an entry already exists. A
        :class:`File` input is copied without any network access.

        Args:
            value: ``http(s)://`` URL, local path (``str``, ``os.PathLike`` or ``file://`` URL),
                mapping or object with ``uri``/``path``/``content_type`` (or ``contentType``)/
                ``size``/``filename``, or an existing :class:`File`.
            cache: Cache to download into. Defaults to the cache configured by ``FILE_CACHE_DIR``.

        Returns:
            - File: A file with an absolute, existing ``path`` and populated metadata.

        Raises:
            InvalidInputError: If neither a locator nor a path is given.
            TransferFailedError: If downloading the locator fails.
            ResolutionFailedError: If no local file exists after resolution.
        """
        kind = classify_input(value)
        if kind is InputKind.EXISTING:
            return value.copy()
        if kind is InputKind.REMOTE_LOCATOR:
            file = cls(uri=value)
        elif kind is InputKind.LOCAL_PATH:
            file = cls(path=_as_local_path(value) if os.fspath(value) else None)
        else:
            file = cls(**_read_descriptor(value))

        if file.uri is not None:
            if is_remote(file.uri):
                cache = cache or ContentCache()
                local_path = await asyncio.to_thread(cache.fetch, file.uri)
                file.path = str(local_path)
            else:
                # A non-remote locator is just a local path.
                file.path = file.uri
                file.uri = None

        if not file.path:
            raise ResolutionFailedError("Either 'uri' or 'path' must be provided and be valid")
        file.path = _as_local_path(file.path)
        if not os.path.isfile(file.path):
            raise ResolutionFailedError("Local file does not exist or is not a regular file", context={"path": file.path})

        file._populate_metadata()
        logger.debug(f"Resolved {file.uri or file.path} → {file.path}")
        return file

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> File:
        """Creates a file from a local path without any network access.

        Metadata is filled in for an existing regular file; a missing file or a directory yields a reference with only
        ``path`` set.
        """
        file = cls(path=_as_local_path(path))
        file._populate_metadata()
        return file

    def copy(self) -> File:
        return dataclasses.replace(self)

    def exists(self) -> bool:
        """Checks the disk on every call."""
        return self.path is not None and os.path.exists(self.path)

    def refresh_metadata(self) -> None:
        """Re-reads the size from disk and fills in any missing content type or filename."""
        self.size = None
        self._populate_metadata()

    def to_dict(self) -> dict[str, Any]:
        """Serializes to ``{path, uri, content_type, size, filename}`` without unset fields."""
        record = {
            "path": self.path,
            "uri": self.uri,
            "content_type": self.content_type,
            "size": self.size,
            "filename": self.filename,
        }
        return {key: value for key, value in record.items() if value is not None}

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    def _populate_metadata(self) -> None:
        if self.path is None or not os.path.isfile(self.path):
            return
        local_path = Path(self.path)  # type: ignore[arg-type]
        if not self.content_type:
            self.content_type = guess_content_type(local_path)
        if self.size is None:
            try:
                self.size = local_path.stat().st_size
            except OSError as exc:
                logger.warning(f"Could not stat {local_path}: {exc}")
        if not self.filename:
            self.filename = local_path.name
