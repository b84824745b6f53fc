#!/usr/bin/env python3
# src/chemdesc/core/domain/models/molecular_graph.py

"""
Domain model representing a molecular structure as a graph.
"""

from typing import Iterable, List, Optional, Tuple

import networkx as nx

from .atom import Atom
from .bond import Bond


class MolecularGraph:
    """Graph representation of a molecule or substructure.

    The graph owns its atoms and bonds. Atoms and bonds keep insertion
    order, and the index of a bond (``bond_number``) is what per-bond
    descriptors use to address it. Connectivity is mirrored in a
    ``networkx.Graph`` whose nodes are the Atom objects; a multi-centre bond
    contributes an edge between every pair of its atoms.
    """

    def __init__(
        self,
        atoms: Optional[Iterable[Atom]] = None,
        bonds: Optional[Iterable[Bond]] = None,
        title: str = "",
    ):
        """
        Initialize a MolecularGraph.

        Args:
            atoms: Atoms to add, in order
            bonds: Bonds to add, in order; their atoms must be among ``atoms``
            title: Optional molecule name
        """
        self.title = title
        self._atoms: List[Atom] = []
        self._bonds: List[Bond] = []
        self._graph = nx.Graph()
        for atom in atoms or ():
            self.add_atom(atom)
        for bond in bonds or ():
            self.add_bond(bond)

    @property
    def atoms(self) -> Tuple[Atom, ...]:
        return tuple(self._atoms)

    @property
    def bonds(self) -> Tuple[Bond, ...]:
        return tuple(self._bonds)

    @property
    def atom_count(self) -> int:
        return len(self._atoms)

    @property
    def bond_count(self) -> int:
        return len(self._bonds)

    def add_atom(self, atom: Atom) -> Atom:
        if not isinstance(atom, Atom):
            raise TypeError(f"Expected an Atom, got {atom!r}")
        if self.contains_atom(atom):
            raise ValueError(f"Atom {atom.symbol} is already part of this graph")
        self._atoms.append(atom)
        self._graph.add_node(atom)
        return atom

    def add_bond(self, bond: Bond) -> Bond:
        if not isinstance(bond, Bond):
            raise TypeError(f"Expected a Bond, got {bond!r}")
        if self.contains_bond(bond):
            raise ValueError(f"{bond!r} is already part of this graph")
        for atom in bond.atoms:
            if not self.contains_atom(atom):
                raise ValueError(f"{bond!r} references an atom outside this graph")
        self._bonds.append(bond)
        atoms = bond.atoms
        for i, first in enumerate(atoms):
            for second in atoms[i + 1:]:
                if self._graph.has_edge(first, second):
                    self._graph[first][second]["bonds"].append(bond)
                else:
                    self._graph.add_edge(first, second, bonds=[bond])
        return bond

    def contains_atom(self, atom: Atom) -> bool:
        return self._graph.has_node(atom)

    def contains_bond(self, bond: Bond) -> bool:
        return any(b is bond for b in self._bonds)

    def get_atom(self, index: int) -> Atom:
        if not 0 <= index < len(self._atoms):
            raise IndexError(f"Atom index {index} out of range ({len(self._atoms)} atoms)")
        return self._atoms[index]

    def get_bond(self, index: int) -> Bond:
        if not 0 <= index < len(self._bonds):
            raise IndexError(f"Bond index {index} out of range ({len(self._bonds)} bonds)")
        return self._bonds[index]

    def atom_number(self, atom: Atom) -> int:
        """Return the index of ``atom`` in this graph."""
        for index, candidate in enumerate(self._atoms):
            if candidate is atom:
                return index
        raise ValueError("Atom is not part of this graph")

    def bond_number(self, bond: Bond) -> int:
        """Return the index of ``bond`` in this graph."""
        for index, candidate in enumerate(self._bonds):
            if candidate is bond:
                return index
        raise ValueError("Bond is not part of this graph")

    def get_connected_atoms(self, atom: Atom) -> List[Atom]:
        if not self.contains_atom(atom):
            raise ValueError("Atom is not part of this graph")
        return list(self._graph.neighbors(atom))

    def get_connected_bonds(self, atom: Atom) -> List[Bond]:
        if not self.contains_atom(atom):
            raise ValueError("Atom is not part of this graph")
        return [bond for bond in self._bonds if bond.contains(atom)]

    def get_bond_between(self, atom1: Atom, atom2: Atom) -> Optional[Bond]:
        """Return the first bond joining the two atoms, or None."""
        if not self._graph.has_edge(atom1, atom2):
            return None
        return self._graph[atom1][atom2]["bonds"][0]

    def to_networkx(self) -> nx.Graph:
        """Return a copy of the connectivity graph."""
        return self._graph.copy()

    def __repr__(self) -> str:
        return (
            f"MolecularGraph(title={self.title!r}, atoms={len(self._atoms)}, "
            f"bonds={len(self._bonds)})"
        )
