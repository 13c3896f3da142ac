#  Copyright © 2025 Emmi AI GmbH. All rights reserved.

from __future__ import annotations

from loguru import logger


def fmt_bytes(num: int) -> str:
    """Converts a number of bytes to a human-readable string.

    Args:
        num: Input number of bytes.

    Returns:
        - Human readable string with trailing storage units.
    """
    value: int | float = num
    for unit in ("B", "KB", "MB", "GB", "TB"):
        if value < 1024 or unit == "TB":
            return f"{value:.2f} {unit}"
        value /= 1024
    return "0 B"


class LogProgress:
    """Percent-based download progress logger.
    - If total is known: log at N% steps (20% for files below 100 MiB, 10% otherwise).
    - If total unknown: log every `mb_step` MiB.

    Args:
        label: A label to use, e.g. a filename.
        total_bytes: [Optional] The total number of bytes expected.
        mb_step: [Optional] Logging interval in MiB when the total is unknown.
    """

    def __init__(self, *, label: str, total_bytes: int | None, mb_step: int = 32) -> None:
        self.label = label
        self.total = total_bytes or 0
        self.step = 20 if (self.total and self.total < 100 * 1024 * 1024) else 10
        self.next_pct = self.step
        self.bytes_done = 0
        self._last_chunk_log_at = 0
        self._chunk_threshold = mb_step * 1024 * 1024

    def update(self, delta: int) -> None:
        self.bytes_done += delta
        if self.total > 0:
            pct = int(self.bytes_done * 100 / self.total)
            while pct >= self.next_pct and self.next_pct <= 100:
                logger.debug(f"[{self.label}] {self.next_pct}% ({fmt_bytes(self.bytes_done)}/{fmt_bytes(self.total)})")
                self.next_pct += self.step
        elif self.bytes_done - self._last_chunk_log_at >= self._chunk_threshold:
            self._last_chunk_log_at = self.bytes_done
            logger.debug(f"[{self.label}] downloaded {fmt_bytes(self.bytes_done)}")

    def close(self) -> None:
        logger.info(f"[{self.label}] done ({fmt_bytes(self.bytes_done)})")
