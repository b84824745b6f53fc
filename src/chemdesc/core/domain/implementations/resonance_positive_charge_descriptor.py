"""Positive charge carried by the polar resonance forms of a bond."""

import logging
from typing import List

from rdkit import Chem

from ..interfaces.descriptor import MolecularDescriptor
from ..models.descriptor_value import DescriptorValue, DoubleArrayResult
from ..models.molecular_graph import MolecularGraph
from ...utils import gasteiger
from ....exceptions import CalculationError, InvalidParameterError
from ....infrastructure.adapters.rdkit_adapter import RDKitAdapter

logger = logging.getLogger(__name__)

_LOWERED = {
    Chem.BondType.DOUBLE: Chem.BondType.SINGLE,
    Chem.BondType.TRIPLE: Chem.BondType.DOUBLE,
    Chem.BondType.QUADRUPLE: Chem.BondType.TRIPLE,
}


class ResonancePositiveChargeDescriptor(MolecularDescriptor):
    """
    Sigma charge on the cationic centre of each heterolytic resonance form.

    For the bond at ``bond_position`` one pi bond is broken heterolytically
    twice: once with the positive charge on the first atom and once with it
    on the second. Each form is re-equalized with Gasteiger-Marsili and the
    charge of its positive atom is reported, first atom first. Bonds without
    a pi component (single, aromatic or unset) give ``[0.0, 0.0]``.

    Parameters:
        bond_position: Index of the target bond in the graph (required)
        max_iterations: Number of equalization iterations (default 6)
    """

    DICTIONARY_REFERENCE = "resonancePositiveCharge"
    PARAMETER_NAMES = ("bond_position", "max_iterations")
    PARAMETER_TYPES = {"bond_position": int, "max_iterations": int}
    DEFAULT_PARAMETERS = (None, 6)

    def __init__(self, adapter: RDKitAdapter = None):
        super().__init__()
        self._adapter = adapter or RDKitAdapter()

    def _validate_parameters(self, values):
        if values[0] < 0:
            raise InvalidParameterError(f"bond_position must not be negative, got {values[0]}")
        if values[1] < 1:
            raise InvalidParameterError(f"max_iterations must be at least 1, got {values[1]}")

    def calculate(self, graph: MolecularGraph) -> DescriptorValue:
        position = self._parameter("bond_position")
        if position is None:
            raise CalculationError("bond_position parameter is not set")
        if not 0 <= position < graph.bond_count:
            raise CalculationError(
                f"bond_position {position} out of range for graph with {graph.bond_count} bonds"
            )
        if graph.get_bond(position).atom_count != 2:
            raise CalculationError("Resonance forms are only defined for two-atom bonds")

        try:
            mol = self._adapter.to_rdkit(graph, freeze_hydrogens=True)
        except ValueError as exc:
            raise CalculationError(str(exc)) from exc

        rd_bond = mol.GetBondWithIdx(position)
        lowered = _LOWERED.get(rd_bond.GetBondType())
        if lowered is None:
            return self._make_value(DoubleArrayResult([0.0, 0.0]))

        begin = rd_bond.GetBeginAtomIdx()
        end = rd_bond.GetEndAtomIdx()
        values: List[float] = []
        for cation, anion in ((begin, end), (end, begin)):
            form = Chem.RWMol(mol)
            form.GetBondWithIdx(position).SetBondType(lowered)
            for index, shift in ((cation, 1), (anion, -1)):
                rd_atom = form.GetAtomWithIdx(index)
                rd_atom.SetFormalCharge(rd_atom.GetFormalCharge() + shift)
            try:
                form = self._adapter.perceive(form)
            except ValueError as exc:
                raise CalculationError(str(exc)) from exc
            charges = gasteiger.sigma_charges(form, self._parameter("max_iterations"))
            values.append(float(charges[cation]))

        logger.debug(f"Resonance positive charges for bond {position}: {values}")
        return self._make_value(DoubleArrayResult(values))
