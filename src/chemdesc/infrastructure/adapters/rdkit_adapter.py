"""Adapter between MolecularGraph and RDKit molecules."""

from typing import Dict

from rdkit import Chem

from ...core.domain.models.atom import Atom
from ...core.domain.models.bond import Bond, BondOrder
from ...core.domain.models.molecular_graph import MolecularGraph

_TO_RDKIT: Dict[BondOrder, "Chem.BondType"] = {
    BondOrder.SINGLE: Chem.BondType.SINGLE,
    BondOrder.DOUBLE: Chem.BondType.DOUBLE,
    BondOrder.TRIPLE: Chem.BondType.TRIPLE,
    BondOrder.QUADRUPLE: Chem.BondType.QUADRUPLE,
    BondOrder.AROMATIC: Chem.BondType.AROMATIC,
    BondOrder.UNSET: Chem.BondType.UNSPECIFIED,
}
_FROM_RDKIT = {rdkit_type: order for order, rdkit_type in _TO_RDKIT.items()}

_PERCEPTION_OPS = (
    Chem.SanitizeFlags.SANITIZE_SYMMRINGS
    | Chem.SanitizeFlags.SANITIZE_SETCONJUGATION
    | Chem.SanitizeFlags.SANITIZE_SETHYBRIDIZATION
)


class RDKitAdapter:
    """Adapter for RDKit structure perception and charge models."""

    def to_rdkit(self, graph: MolecularGraph, freeze_hydrogens: bool = False) -> Chem.Mol:
        """
        Convert a MolecularGraph to an RDKit molecule.

        Atom and bond indices are preserved. Atoms with an
        ``implicit_hydrogen_count`` keep exactly that many hydrogens, the
        others get RDKit's default valence model.

        Args:
            graph: Molecular structure as graph
            freeze_hydrogens: Fix every atom's hydrogen count after perception,
                so later edits to charges or bond orders keep the hydrogens

        Returns:
            RDKit molecule with ring, conjugation and hybridization perceived

        Raises:
            ValueError: If the graph has multi-centre bonds, unknown elements
                or cannot be perceived by RDKit
        """
        rw_mol = Chem.RWMol()
        for atom in graph.atoms:
            try:
                rd_atom = Chem.Atom(atom.symbol)
            except (RuntimeError, ValueError) as exc:
                raise ValueError(f"Unknown element symbol {atom.symbol!r}") from exc
            rd_atom.SetFormalCharge(int(atom.formal_charge))
            if atom.implicit_hydrogen_count is not None:
                rd_atom.SetNumExplicitHs(int(atom.implicit_hydrogen_count))
                rd_atom.SetNoImplicit(True)
            rw_mol.AddAtom(rd_atom)

        for bond in graph.bonds:
            if bond.atom_count != 2:
                raise ValueError(f"RDKit cannot represent multi-centre bond {bond!r}")
            begin = graph.atom_number(bond.get_atom(0))
            end = graph.atom_number(bond.get_atom(1))
            rw_mol.AddBond(begin, end, _TO_RDKIT[bond.order])
            if bond.order is BondOrder.AROMATIC:
                rw_mol.GetBondBetweenAtoms(begin, end).SetIsAromatic(True)
                rw_mol.GetAtomWithIdx(begin).SetIsAromatic(True)
                rw_mol.GetAtomWithIdx(end).SetIsAromatic(True)

        mol = self.perceive(rw_mol)
        if freeze_hydrogens:
            mol = Chem.RWMol(mol)
            for rd_atom in mol.GetAtoms():
                rd_atom.SetNumExplicitHs(rd_atom.GetTotalNumHs())
                rd_atom.SetNoImplicit(True)
            mol = self.perceive(mol)
        return mol

    def perceive(self, mol: Chem.Mol) -> Chem.Mol:
        """Update valences, rings, conjugation and hybridization without kekulizing."""
        mol = Chem.Mol(mol)
        try:
            mol.UpdatePropertyCache(strict=False)
            Chem.SanitizeMol(mol, sanitizeOps=_PERCEPTION_OPS, catchErrors=False)
        except (RuntimeError, ValueError) as exc:
            raise ValueError(f"RDKit could not perceive structure: {exc}") from exc
        return mol

    def from_rdkit(self, mol: Chem.Mol, title: str = "") -> MolecularGraph:
        """Convert an RDKit molecule to a MolecularGraph with fixed hydrogen counts."""
        atoms = []
        for rd_atom in mol.GetAtoms():
            atoms.append(
                Atom(
                    symbol=rd_atom.GetSymbol(),
                    atom_id=rd_atom.GetIdx(),
                    formal_charge=rd_atom.GetFormalCharge(),
                    implicit_hydrogen_count=rd_atom.GetTotalNumHs(),
                )
            )
        bonds = [
            Bond.between(
                atoms[rd_bond.GetBeginAtomIdx()],
                atoms[rd_bond.GetEndAtomIdx()],
                order=_FROM_RDKIT.get(rd_bond.GetBondType(), BondOrder.UNSET),
            )
            for rd_bond in mol.GetBonds()
        ]
        return MolecularGraph(atoms, bonds, title=title)

    def from_smiles(self, smiles: str, kekulize: bool = False) -> MolecularGraph:
        """
        Build a MolecularGraph from a SMILES string.

        Args:
            smiles: SMILES string
            kekulize: Replace aromatic bonds with alternating single and
                double bonds

        Raises:
            ValueError: If RDKit cannot parse the SMILES
        """
        mol = Chem.MolFromSmiles(smiles)
        if mol is None:
            raise ValueError(f"Could not parse SMILES {smiles!r}")
        if kekulize:
            Chem.Kekulize(mol, clearAromaticFlags=True)
        return self.from_rdkit(mol, title=smiles)
