#  Copyright © 2025 Emmi AI GmbH. All rights reserved.

from __future__ import annotations

from typing import Any


class FileReferenceError(Exception):
    """Base error for file resolution and caching.

    Args:
        message: Human-readable error message.
        context: Optional structured context, rendered into ``str(error)``.
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{key}={value!r}" for key, value in self.context.items())
            return f"{self.message} ({ctx})"
        return self.message


class InvalidInputError(FileReferenceError, ValueError):
    """Neither a remote locator nor a local path could be determined from the input."""


class TransferFailedError(FileReferenceError):
    """Fetching a remote locator failed (bad status, redirect loop, network error)."""

    def __init__(self, uri: str, cause: BaseException) -> None:
        super().__init__(f"Failed to download {uri}: {cause}", context={"uri": uri})
        self.uri = uri
        self.cause = cause


class ResolutionFailedError(FileReferenceError):
    """No local file could be established for a file reference."""
