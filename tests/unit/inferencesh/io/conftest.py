#  Copyright © 2025 Emmi AI GmbH. All rights reserved.

from __future__ import annotations

from pathlib import Path

import pytest

from inferencesh.io.cache.settings import get_cache_settings

STORE_MODULE_PATH = "inferencesh.io.cache.store"


class FakeTransport:
    """Stands in for the download primitive and records every call."""

    def __init__(self) -> None:
        self.payloads: dict[str, bytes] = {}
        self.failures: dict[str, BaseException] = {}
        self.calls: list[tuple[str, Path]] = []

    def __call__(self, uri: str, destination_path: Path, *, label: str | None = None) -> int:
        self.calls.append((uri, destination_path))
        if uri in self.failures:
            # leave a partial file behind, like an interrupted transfer would
            destination_path.write_bytes(b"part")
            raise self.failures[uri]
        data = self.payloads.get(uri, b"payload")
        destination_path.write_bytes(data)
        return len(data)

    @property
    def fetched(self) -> list[str]:
        return [uri for uri, _ in self.calls]


@pytest.fixture(autouse=True)
def cache_root(tmp_path: Path, monkeypatch) -> Path:
    """Points the default cache at a temporary directory for every test."""
    root = tmp_path / "file-cache"
    monkeypatch.setenv("FILE_CACHE_DIR", str(root))
    get_cache_settings.cache_clear()
    yield root
    get_cache_settings.cache_clear()


@pytest.fixture
def transport(monkeypatch) -> FakeTransport:
    fake = FakeTransport()
    monkeypatch.setattr(f"{STORE_MODULE_PATH}.download_to_path", fake)
    return fake


@pytest.fixture
def hello_file(tmp_path: Path) -> Path:
    path = tmp_path / "inputs" / "hello.txt"
    path.parent.mkdir(parents=True)
    path.write_text("hello world")
    return path
