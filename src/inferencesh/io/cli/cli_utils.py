#  Copyright © 2025 Emmi AI GmbH. All rights reserved.

from __future__ import annotations

from collections.abc import Callable  # noqa: TCH003

import typer

from inferencesh.io.errors import FileReferenceError


def run_cli(fn: Callable[[], None]) -> None:
    """Runs a command body, turning resolution and filesystem errors into exit code 1.

    Anything else propagates and is rendered by the rich traceback handler.
    """
    try:
        fn()
    except (FileReferenceError, OSError) as exc:
        typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from None
