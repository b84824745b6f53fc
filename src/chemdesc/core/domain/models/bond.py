#!/usr/bin/env python3
# src/chemdesc/core/domain/models/bond.py

"""
Domain model representing a chemical bond between atoms.

A bond usually joins two atoms, but multi-centre bonds with any number of
atoms greater than one are supported.
"""

from enum import Enum, auto
from typing import Iterable, Optional, Tuple

from .atom import Atom


class BondOrder(Enum):
    """Enumeration of possible bond orders."""

    SINGLE = auto()
    DOUBLE = auto()
    TRIPLE = auto()
    QUADRUPLE = auto()
    AROMATIC = auto()
    UNSET = auto()

    @property
    def numeric(self) -> float:
        """Numeric bond order, 1.5 for aromatic and 0 when unset."""
        return _NUMERIC_ORDERS[self]


_NUMERIC_ORDERS = {
    BondOrder.SINGLE: 1.0,
    BondOrder.DOUBLE: 2.0,
    BondOrder.TRIPLE: 3.0,
    BondOrder.QUADRUPLE: 4.0,
    BondOrder.AROMATIC: 1.5,
    BondOrder.UNSET: 0.0,
}


class BondStereo(Enum):
    """Enumeration of bond stereo indicators."""

    NONE = auto()
    UP = auto()
    DOWN = auto()
    UP_OR_DOWN = auto()
    UNDEFINED = auto()


class Bond:
    """Represents a chemical bond over an ordered sequence of atoms."""

    def __init__(
        self,
        atoms: Iterable[Atom],
        order: Optional[BondOrder] = None,
        stereo: BondStereo = BondStereo.NONE,
    ):
        """
        Initialize a Bond from an explicit list of atoms.

        Args:
            atoms: Two or more distinct atoms, in bond order
            order: Bond order, UNSET when omitted
            stereo: Stereo indicator
        """
        atoms = tuple(atoms)
        if len(atoms) < 2:
            raise ValueError(f"A bond needs at least two atoms, got {len(atoms)}")
        for atom in atoms:
            if not isinstance(atom, Atom):
                raise ValueError(f"Bond atoms must be Atom instances, got {atom!r}")
        if len({id(atom) for atom in atoms}) != len(atoms):
            raise ValueError("A bond cannot reference the same atom twice")
        self._atoms: Tuple[Atom, ...] = atoms
        self._order = BondOrder.UNSET
        self._stereo = BondStereo.NONE
        self.order = BondOrder.UNSET if order is None else order
        self.stereo = stereo

    @classmethod
    def between(
        cls,
        atom1: Atom,
        atom2: Atom,
        order: BondOrder = BondOrder.SINGLE,
        stereo: BondStereo = BondStereo.NONE,
    ) -> "Bond":
        """Create a two-atom bond, SINGLE unless another order is given."""
        return cls((atom1, atom2), order=order, stereo=stereo)

    @property
    def atoms(self) -> Tuple[Atom, ...]:
        return self._atoms

    @property
    def atom_count(self) -> int:
        return len(self._atoms)

    def get_atom(self, index: int) -> Atom:
        """Return the atom at ``index``; negative indices are rejected."""
        if not 0 <= index < len(self._atoms):
            raise IndexError(
                f"Atom index {index} out of range for bond with {len(self._atoms)} atoms"
            )
        return self._atoms[index]

    @property
    def order(self) -> BondOrder:
        return self._order

    @order.setter
    def order(self, value: BondOrder) -> None:
        if not isinstance(value, BondOrder):
            raise TypeError(f"Bond order must be a BondOrder, got {value!r}")
        self._order = value

    @property
    def stereo(self) -> BondStereo:
        return self._stereo

    @stereo.setter
    def stereo(self, value: BondStereo) -> None:
        if not isinstance(value, BondStereo):
            raise TypeError(f"Bond stereo must be a BondStereo, got {value!r}")
        self._stereo = value

    def contains(self, atom: Atom) -> bool:
        return any(a is atom for a in self._atoms)

    def get_other_atom(self, atom: Atom) -> Atom:
        """Return the partner of ``atom`` in a two-atom bond."""
        if self.atom_count != 2:
            raise ValueError("get_other_atom is only defined for two-atom bonds")
        first, second = self._atoms
        if atom is first:
            return second
        if atom is second:
            return first
        raise ValueError("Atom is not part of this bond")

    def is_connected_to(self, other: "Bond") -> bool:
        """True when the two bonds share at least one atom."""
        return any(other.contains(atom) for atom in self._atoms)

    def compare(self, other: object) -> bool:
        """
        Structural comparison with another bond.

        Two bonds compare equal when they reference the same atom identities,
        regardless of their order in the bond, and have the same bond order.
        """
        if not isinstance(other, Bond):
            return False
        if other is self:
            return True
        if self.atom_count != other.atom_count or self.order is not other.order:
            return False
        return {id(a) for a in self._atoms} == {id(a) for a in other.atoms}

    def __repr__(self) -> str:
        symbols = "-".join(atom.symbol for atom in self._atoms)
        return f"Bond({symbols}, order={self._order.name}, stereo={self._stereo.name})"
