"""Shared base for atomic descriptors derived from Gasteiger-Marsili charges."""

from typing import Tuple

import numpy as np
from rdkit import Chem

from ..interfaces.descriptor import AtomicDescriptor
from ..models.atom import Atom
from ..models.molecular_graph import MolecularGraph
from ...utils import gasteiger
from ....exceptions import CalculationError, InvalidParameterError
from ....infrastructure.adapters.rdkit_adapter import RDKitAdapter


class GasteigerAtomicDescriptor(AtomicDescriptor):
    """Atomic descriptor parameterised by the number of PEOE iterations."""

    PARAMETER_NAMES = ("max_iterations",)
    PARAMETER_TYPES = {"max_iterations": int}
    DEFAULT_PARAMETERS = (6,)

    def __init__(self, adapter: RDKitAdapter = None):
        super().__init__()
        self._adapter = adapter or RDKitAdapter()

    def _validate_parameters(self, values):
        if values[0] < 1:
            raise InvalidParameterError(f"max_iterations must be at least 1, got {values[0]}")

    def _charges(self, atom: Atom, graph: MolecularGraph) -> Tuple[Chem.Mol, np.ndarray, int]:
        """Return the perceived molecule, all sigma charges and the atom index."""
        index = graph.atom_number(atom)
        try:
            mol = self._adapter.to_rdkit(graph)
        except ValueError as exc:
            raise CalculationError(str(exc)) from exc
        charges = gasteiger.sigma_charges(mol, self._parameter("max_iterations"))
        return mol, charges, index
