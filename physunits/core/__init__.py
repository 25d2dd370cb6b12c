"""Core utilities: units, numeric, types, validation."""

from __future__ import annotations

__all__ = [
    "units",
    "numeric",
    "types",
    "validation",
]
