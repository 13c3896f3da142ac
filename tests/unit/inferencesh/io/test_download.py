#  Copyright © 2025 Emmi AI GmbH. All rights reserved.

from __future__ import annotations

import importlib
from pathlib import Path

import pytest

from inferencesh.io.cache.keys import cache_key
from inferencesh.io.download import download
from inferencesh.io.errors import InvalidInputError, TransferFailedError
from inferencesh.io.storage import StorageDir

# the package re-exports the `download` function under the same name as this module
download_module = importlib.import_module("inferencesh.io.download")
URL = "https://example.com/weights/model.bin"


def _target(directory: Path, url: str = URL) -> Path:
    return directory / cache_key(url) / "model.bin"


@pytest.mark.asyncio
async def test_download_into_directory(tmp_path: Path, cache_root: Path, transport):
    transport.payloads[URL] = b"weights"
    out_dir = tmp_path / "data"

    path = await download(URL, out_dir)

    assert path == _target(out_dir)
    assert path.read_bytes() == b"weights"
    assert transport.fetched == [URL]
    # the default file cache is not involved
    assert not cache_root.exists()


@pytest.mark.asyncio
async def test_download_skips_existing_file(tmp_path: Path, transport):
    target = _target(tmp_path)
    target.parent.mkdir(parents=True)
    target.write_bytes(b"already here")

    path = await download(URL, tmp_path)

    assert path == target
    assert path.read_bytes() == b"already here"
    assert transport.calls == []


@pytest.mark.asyncio
async def test_download_ephemeral_always_fetches(tmp_path: Path, transport):
    transport.payloads[URL] = b"fresh"
    target = _target(tmp_path)
    target.parent.mkdir(parents=True)
    target.write_bytes(b"stale leftover")

    path = await download(URL, tmp_path, ephemeral=True)

    assert path == target
    assert path.read_bytes() == b"fresh"
    assert transport.fetched == [URL]


@pytest.mark.asyncio
async def test_download_into_temp_storage_dir_always_fetches(tmp_path: Path, transport, monkeypatch):
    # /app/tmp stands for the runtime temp dir; redirect it to a writable location
    app_tmp = tmp_path / "app-tmp"

    def _ensure_dir(directory):
        assert directory is StorageDir.TEMP
        app_tmp.mkdir(exist_ok=True)
        return app_tmp

    monkeypatch.setattr(download_module, "ensure_dir", _ensure_dir)

    await download(URL, StorageDir.TEMP)
    await download(URL, StorageDir.TEMP)

    assert transport.fetched == [URL, URL]
    assert _target(app_tmp).exists()


@pytest.mark.asyncio
async def test_download_second_call_is_cached(tmp_path: Path, transport):
    first = await download(URL, tmp_path)
    second = await download(URL, tmp_path)
    assert first == second
    assert len(transport.calls) == 1


@pytest.mark.asyncio
@pytest.mark.parametrize("uri", ["/local/model.bin", "s3://bucket/model.bin", ""])
async def test_download_rejects_non_http_locators(tmp_path: Path, transport, uri: str):
    with pytest.raises(InvalidInputError):
        await download(uri, tmp_path)
    assert transport.calls == []


@pytest.mark.asyncio
async def test_download_failure_leaves_no_file(tmp_path: Path, transport):
    transport.failures[URL] = ConnectionError("connection reset")

    with pytest.raises(TransferFailedError):
        await download(URL, tmp_path)

    assert not _target(tmp_path).exists()
    assert list(tmp_path.rglob("*.tmp")) == []
