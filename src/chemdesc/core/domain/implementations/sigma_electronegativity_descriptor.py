"""Sigma electronegativity of an atom."""

from .gasteiger_atomic_descriptor import GasteigerAtomicDescriptor
from ..models.atom import Atom
from ..models.descriptor_value import DescriptorValue, DoubleResult
from ..models.molecular_graph import MolecularGraph
from ...utils import gasteiger


class SigmaElectronegativityDescriptor(GasteigerAtomicDescriptor):
    """
    Orbital electronegativity of an atom at its equalized sigma charge.

    The value is ``a + b*q + c*q**2`` with the Gasteiger-Marsili coefficients
    of the atom's element and hybridization and ``q`` its partial sigma charge
    after ``max_iterations`` equalization steps.
    """

    DICTIONARY_REFERENCE = "sigmaElectronegativity"

    def calculate(self, atom: Atom, graph: MolecularGraph) -> DescriptorValue:
        mol, charges, index = self._charges(atom, graph)
        rd_atom = mol.GetAtomWithIdx(index)
        value = gasteiger.sigma_electronegativity(
            rd_atom.GetSymbol(), gasteiger.hybridization_of(rd_atom), float(charges[index])
        )
        return self._make_value(DoubleResult(value))
