import pytest
from rdkit import Chem

from chemdesc.core.domain.models import Atom, Bond, BondOrder, MolecularGraph
from chemdesc.infrastructure.adapters.rdkit_adapter import RDKitAdapter


@pytest.fixture
def adapter():
    return RDKitAdapter()


def test_to_rdkit_preserves_indices(adapter, propene):
    mol = adapter.to_rdkit(propene)

    assert mol.GetNumAtoms() == propene.atom_count
    assert mol.GetNumBonds() == propene.bond_count
    assert mol.GetBondWithIdx(0).GetBondType() == Chem.BondType.DOUBLE
    assert mol.GetAtomWithIdx(0).GetTotalNumHs() == 1
    assert mol.GetAtomWithIdx(2).GetTotalNumHs() == 3
    assert mol.GetAtomWithIdx(0).GetHybridization() == Chem.HybridizationType.SP2


def test_frozen_hydrogens_survive_charge_changes(adapter, ethene):
    mol = Chem.RWMol(adapter.to_rdkit(ethene, freeze_hydrogens=True))
    mol.GetBondWithIdx(0).SetBondType(Chem.BondType.SINGLE)
    mol.GetAtomWithIdx(0).SetFormalCharge(1)
    mol.GetAtomWithIdx(1).SetFormalCharge(-1)
    form = adapter.perceive(mol)

    assert [atom.GetTotalNumHs() for atom in form.GetAtoms()] == [2, 2]


def test_from_smiles(adapter):
    graph = adapter.from_smiles("CC=C")

    assert graph.atom_count == 3
    assert [bond.order for bond in graph.bonds] == [BondOrder.SINGLE, BondOrder.DOUBLE]
    assert [atom.implicit_hydrogen_count for atom in graph.atoms] == [3, 1, 2]
    assert graph.title == "CC=C"


def test_kekulized_benzene_has_double_bonds(adapter):
    aromatic = adapter.from_smiles("c1ccccc1")
    kekule = adapter.from_smiles("c1ccccc1", kekulize=True)

    assert {bond.order for bond in aromatic.bonds} == {BondOrder.AROMATIC}
    assert [bond.order for bond in kekule.bonds].count(BondOrder.DOUBLE) == 3


def test_invalid_smiles(adapter):
    with pytest.raises(ValueError):
        adapter.from_smiles("C(")


def test_multi_centre_bond_is_rejected(adapter):
    b1, b2, h = Atom("B"), Atom("B"), Atom("H")
    graph = MolecularGraph([b1, b2, h], [Bond([b1, h, b2])])
    with pytest.raises(ValueError):
        adapter.to_rdkit(graph)


def test_unknown_element_is_rejected(adapter):
    graph = MolecularGraph([Atom("Zz")])
    with pytest.raises(ValueError):
        adapter.to_rdkit(graph)
