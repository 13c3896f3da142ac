#  Copyright © 2025 Emmi AI GmbH. All rights reserved.

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Literal

import typer
from rich.traceback import install

from inferencesh.io.cache.settings import get_cache_settings
from inferencesh.io.cache.store import ContentCache
from inferencesh.io.cli.cli_utils import run_cli
from inferencesh.io.download import download
from inferencesh.io.file import File

RICH_MARKUP_MODE: Literal["markdown", "rich"] = "rich"
install(show_locals=False)

CTX = {"help_option_names": ["-h", "--help"], "max_content_width": 100}

files_app = typer.Typer(
    name="files",
    help="File references and the download cache.",
    no_args_is_help=True,
    rich_markup_mode=RICH_MARKUP_MODE,
    context_settings=CTX,
)


@files_app.command("fetch", short_help="Resolve a URL or path into the file cache and print its record.")
def files_fetch(
    uri: str = typer.Argument(..., help="http(s):// URL, file:// URL or local path"),
    cache_dir: Path | None = typer.Option(None, "--cache-dir", help="Cache root, overrides FILE_CACHE_DIR"),
):
    def _task() -> None:
        cache = ContentCache.at(cache_dir) if cache_dir else ContentCache()
        file = asyncio.run(File.resolve(uri, cache=cache))
        typer.echo(json.dumps(file.to_dict(), ensure_ascii=False))

    run_cli(_task)


@files_app.command("download", short_help="Download a URL into a directory.")
def files_download(
    uri: str = typer.Argument(..., help="http(s):// URL"),
    directory: Path = typer.Argument(..., help="Target directory"),
    force: bool = typer.Option(False, "--force", help="Download even if the file is already present"),
):
    def _task() -> None:
        path = asyncio.run(download(uri, directory, ephemeral=True if force else None))
        typer.echo(f"Wrote: {path}")

    run_cli(_task)


@files_app.command("info", short_help="Print the record of a local file (no network access).")
def files_info(path: Path = typer.Argument(..., exists=True, dir_okay=False)):
    def _task() -> None:
        typer.echo(File.from_path(path).to_json())

    run_cli(_task)


@files_app.command("cache-dir", short_help="Print the effective cache root.")
def files_cache_dir():
    typer.echo(str(get_cache_settings().root))
