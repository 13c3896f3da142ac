#  Copyright © 2025 Emmi AI GmbH. All rights reserved.

from __future__ import annotations

from typing import Literal

import typer
from rich.traceback import install

from inferencesh.io.cli.cli_files import files_app
from inferencesh.io.logging_config import configure_logging

RICH_MARKUP_MODE: Literal["markdown", "rich"] = "rich"
install(show_locals=False)

CTX = {"help_option_names": ["-h", "--help"], "max_content_width": 100}

app = typer.Typer(
    name="inferencesh files CLI",
    help="Fetch, cache and inspect files used by inference.sh apps.",
    no_args_is_help=True,
    rich_markup_mode=RICH_MARKUP_MODE,
    context_settings=CTX,
    pretty_exceptions_enable=False,
    add_completion=False,
)


@app.callback()
def main(
    debug: bool = typer.Option(False, help="Enable debug logging"),
    quiet: bool = typer.Option(False, help="Only log warnings and errors"),
) -> None:
    configure_logging(debug, quiet)


app.add_typer(files_app, no_args_is_help=True)

if __name__ == "__main__":
    app()
