# src/dataminer/common/logging.py
# -----------------------------------------------------------------------------
# Dependency-light logging utilities used by the report runner and CLI.
# - log_stdout: timestamped console output, optionally tagged by step
# - Timed: minimal context manager for durations
# The stats and plot functions themselves stay silent.
# -----------------------------------------------------------------------------
from __future__ import annotations

import sys
import time
from datetime import datetime
from types import TracebackType


def log_stdout(msg: str, *, tag: str | None = None) -> None:
    """Timestamped line to stdout (no external logging dependency)."""
    ts = datetime.now().isoformat(timespec="seconds")
    prefix = f"[{ts}]" if tag is None else f"[{ts}] [{tag}]"
    sys.stdout.write(f"{prefix} {msg}\n")
    sys.stdout.flush()


class Timed:
    """Context manager to measure durations of small blocks."""

    def __init__(self) -> None:
        self.start: float | None = None
        self.elapsed: float | None = None

    def __enter__(self) -> Timed:
        self.start = time.perf_counter()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        end = time.perf_counter()
        self.elapsed = end - (self.start or end)
