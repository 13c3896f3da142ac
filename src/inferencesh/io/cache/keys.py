#  Copyright © 2025 Emmi AI GmbH. All rights reserved.

from __future__ import annotations

from hashlib import sha256
from pathlib import Path, PurePosixPath
from urllib.parse import quote, urlsplit

CACHE_KEY_LENGTH = 12
FALLBACK_FILENAME = "download"
_DEFAULT_PORTS = {"http": 80, "https": 443}
# characters left as-is when percent-encoding, as in the WHATWG URL path and query encode sets
_PATH_SAFE = "/%!$&'()*+,;=:@[]\\^|"
_QUERY_SAFE = "/%!$&()*+,;=:?@[]\\^`{|}"


def _address(uri: str) -> tuple[str, str]:
    """Splits a locator into its cache identity ``host + path + query`` and its filename.

    The fragment never takes part in the identity. Path and query are percent-encoded and IPv6
    hosts keep their brackets, so the key matches the one computed from a browser-style
    ``URL.host + URL.pathname + URL.search``.
    """
    parts = urlsplit(uri)
    host = (parts.hostname or "").lower()
    if ":" in host:
        host = f"[{host}]"
    if parts.port is not None and parts.port != _DEFAULT_PORTS.get(parts.scheme.lower()):
        host = f"{host}:{parts.port}"
    path = quote(parts.path or "/", safe=_PATH_SAFE)
    identity = host + path
    if parts.query:
        identity += "?" + quote(parts.query, safe=_QUERY_SAFE)
    filename = PurePosixPath(path).name or FALLBACK_FILENAME
    return identity, filename


def cache_key(uri: str) -> str:
    """Short deterministic fingerprint of a locator.

    Args:
        uri: Remote locator, e.g. ``https://example.com/dir/model.bin?v=2``.

    Returns:
        - str: First 12 hex characters of ``sha256(host + path + query)``.
    """
    identity, _ = _address(uri)
    return sha256(identity.encode("utf-8")).hexdigest()[:CACHE_KEY_LENGTH]


def cache_filename(uri: str) -> str:
    """Final path segment of a locator, or ``download`` if it has none."""
    _, filename = _address(uri)
    return filename


def cache_path(root: Path, uri: str) -> Path:
    """Location of the cache entry for ``uri``: ``<root>/<cache_key>/<filename>``."""
    return root / cache_key(uri) / cache_filename(uri)
