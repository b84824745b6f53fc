"""Adapters for external libraries."""

from .rdkit_adapter import RDKitAdapter

__all__ = [
    "RDKitAdapter",
]
