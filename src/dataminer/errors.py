# src/dataminer/errors.py
# -----------------------------------------------------------------------------
# Exception taxonomy shared by stats, plots, config and the CLI.
# Each error also subclasses the closest builtin so callers that only know
# TypeError / KeyError / ValueError still catch it.
# -----------------------------------------------------------------------------
from __future__ import annotations

from collections.abc import Iterable

__all__ = [
    "DataMinerError",
    "InvalidInputError",
    "ColumnNotFoundError",
    "InsufficientDataError",
    "ConfigError",
]


class DataMinerError(Exception):
    """Base class for all errors raised by dataminer."""


class InvalidInputError(DataMinerError, TypeError):
    """Argument is not the kind of object the operation needs."""


class ColumnNotFoundError(DataMinerError, KeyError):
    """One or more requested columns are absent from the table."""

    def __init__(self, missing: Iterable[str]) -> None:
        self.missing: list[str] = [str(c) for c in missing]
        super().__init__(f"Columns not found: {', '.join(self.missing)}")

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])


class InsufficientDataError(DataMinerError, ValueError):
    """Not enough numeric columns or values for the requested operation."""


class ConfigError(DataMinerError, ValueError):
    """Invalid or incomplete YAML configuration."""
