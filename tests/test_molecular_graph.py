import networkx as nx
import pytest

from chemdesc.core.domain.models import Atom, Bond, BondOrder, MolecularGraph


def test_molecular_graph(propene):
    """Indices and connectivity of a small graph."""
    assert propene.atom_count == 3
    assert propene.bond_count == 2

    double = propene.get_bond(0)
    assert double.order is BondOrder.DOUBLE
    assert propene.bond_number(double) == 0
    assert propene.bond_number(propene.get_bond(1)) == 1

    c1 = propene.get_atom(0)
    assert propene.atom_number(c1) == 0
    assert set(map(id, propene.get_connected_atoms(c1))) == {
        id(propene.get_atom(1)),
        id(propene.get_atom(2)),
    }
    assert len(propene.get_connected_bonds(c1)) == 2
    assert propene.get_bond_between(c1, propene.get_atom(1)) is double
    assert propene.get_bond_between(propene.get_atom(1), propene.get_atom(2)) is None

    G = propene.to_networkx()
    assert isinstance(G, nx.Graph)
    assert len(G.nodes) == 3
    assert len(G.edges) == 2


def test_bond_number_is_identity_based(ethene):
    bond = ethene.get_bond(0)
    twin = Bond.between(bond.get_atom(0), bond.get_atom(1), BondOrder.DOUBLE)

    assert twin.compare(bond)
    with pytest.raises(ValueError):
        ethene.bond_number(twin)


def test_add_bond_with_foreign_atom():
    c = Atom("C")
    graph = MolecularGraph([c])
    with pytest.raises(ValueError):
        graph.add_bond(Bond.between(c, Atom("O")))


def test_duplicate_members_rejected():
    c1, c2 = Atom("C"), Atom("C")
    bond = Bond.between(c1, c2)
    graph = MolecularGraph([c1, c2], [bond])
    with pytest.raises(ValueError):
        graph.add_atom(c1)
    with pytest.raises(ValueError):
        graph.add_bond(bond)


def test_index_lookups_are_not_clamped(ethene):
    with pytest.raises(IndexError):
        ethene.get_atom(-1)
    with pytest.raises(IndexError):
        ethene.get_bond(1)
    with pytest.raises(ValueError):
        ethene.atom_number(Atom("C"))


def test_multi_centre_bond_connectivity():
    b1, b2, h = Atom("B"), Atom("B"), Atom("H")
    bridge = Bond([b1, h, b2])
    graph = MolecularGraph([b1, b2, h], [bridge])

    assert graph.bond_count == 1
    assert graph.get_bond_between(b1, b2) is bridge
    assert len(graph.get_connected_atoms(h)) == 2
