"""Partial sigma charge of an atom."""

from .gasteiger_atomic_descriptor import GasteigerAtomicDescriptor
from ..models.atom import Atom
from ..models.descriptor_value import DescriptorValue, DoubleResult
from ..models.molecular_graph import MolecularGraph


class PartialSigmaChargeDescriptor(GasteigerAtomicDescriptor):
    """
    Sigma charge of an atom by Gasteiger-Marsili iterative equalization.

    Parameters:
        max_iterations: Number of equalization iterations (default 6)
    """

    DICTIONARY_REFERENCE = "partialSigmaCharge"

    def calculate(self, atom: Atom, graph: MolecularGraph) -> DescriptorValue:
        _, charges, index = self._charges(atom, graph)
        return self._make_value(DoubleResult(float(charges[index])))
