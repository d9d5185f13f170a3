# src/dataminer/common/__init__.py
# -----------------------------------------------------------------------------
# Shared building blocks: result contracts, schema predicates, stdout logging.
# Import the concrete modules directly; nothing is re-exported here.
# -----------------------------------------------------------------------------
from __future__ import annotations

__all__: list[str] = []
