#!/usr/bin/env python3
# src/chemdesc/core/domain/models/atom.py

"""
Domain model representing an atom in a molecular structure.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class Atom:
    """Represents an atom in a molecular graph.

    Atoms compare by identity, so two carbons with the same fields are still
    two different graph nodes. The symbol cannot be changed once assigned.
    """

    symbol: str
    atom_id: Optional[int] = None
    formal_charge: int = 0
    charge: Optional[float] = None
    exact_mass: Optional[float] = None
    atomic_number: Optional[int] = None
    implicit_hydrogen_count: Optional[int] = None

    def __post_init__(self):
        if not isinstance(self.symbol, str) or not self.symbol:
            raise ValueError(f"Atom symbol must be a non-empty string, got {self.symbol!r}")

    def __setattr__(self, name, value):
        if name == "symbol" and "symbol" in self.__dict__:
            raise AttributeError("Atom symbol is immutable once assigned")
        super().__setattr__(name, value)
