"""Shared fixtures for descriptor tests."""

from pathlib import Path

import pytest

from chemdesc.core.domain.models import Atom, Bond, BondOrder, MolecularGraph


def _alkene(left_h: int, right_h: int, substituents=()):
    """C=C with explicit hydrogen counts and optional methyl groups on the first carbon."""
    c1 = Atom("C", implicit_hydrogen_count=left_h)
    c2 = Atom("C", implicit_hydrogen_count=right_h)
    atoms = [c1, c2]
    bonds = [Bond.between(c1, c2, BondOrder.DOUBLE)]
    for symbol, hydrogens in substituents:
        atom = Atom(symbol, implicit_hydrogen_count=hydrogens)
        atoms.append(atom)
        bonds.append(Bond.between(c1, atom))
    return MolecularGraph(atoms, bonds)


@pytest.fixture
def ethene() -> MolecularGraph:
    return _alkene(2, 2)


@pytest.fixture
def propene() -> MolecularGraph:
    """CH3-CH=CH2 with the double bond first."""
    return _alkene(1, 2, substituents=[("C", 3)])


@pytest.fixture
def formaldehyde() -> MolecularGraph:
    c = Atom("C", implicit_hydrogen_count=2)
    o = Atom("O", implicit_hydrogen_count=0)
    return MolecularGraph([c, o], [Bond.between(c, o, BondOrder.DOUBLE)])


@pytest.fixture
def ethane() -> MolecularGraph:
    c1 = Atom("C", implicit_hydrogen_count=3)
    c2 = Atom("C", implicit_hydrogen_count=3)
    return MolecularGraph([c1, c2], [Bond.between(c1, c2)])


ARFF_HEADER = """@relation toy
@attribute x numeric
@attribute y numeric
@attribute class {05_0,10_5,14_9}
@data
"""


@pytest.fixture
def toy_arff(tmp_path: Path) -> Path:
    """Small two-attribute ARFF dataset with three well separated classes."""
    rows = [
        "0.0,0.0,05_0",
        "0.1,0.1,05_0",
        "5.0,5.0,10_5",
        "5.1,5.1,10_5",
        "9.0,9.0,14_9",
        "9.1,9.1,14_9",
    ]
    path = tmp_path / "toy.arff"
    path.write_text(ARFF_HEADER + "\n".join(rows) + "\n")
    return path
