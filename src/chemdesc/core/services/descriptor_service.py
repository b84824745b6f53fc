"""Service for evaluating descriptors over every element of a graph."""

import logging
from typing import List

from tqdm import tqdm

from ..domain.interfaces.descriptor import AtomicDescriptor, BondDescriptor
from ..domain.models.descriptor_value import DescriptorValue
from ..domain.models.molecular_graph import MolecularGraph

logger = logging.getLogger(__name__)


class DescriptorService:
    """Service for batch descriptor calculations."""

    def calculate_bonds(
        self,
        graph: MolecularGraph,
        descriptor: BondDescriptor,
        progress: bool = False,
    ) -> List[DescriptorValue]:
        """
        Calculate a bond descriptor for each bond of a graph.

        Args:
            graph: Molecular graph
            descriptor: Bond descriptor to evaluate
            progress: Show a progress bar

        Returns:
            One DescriptorValue per bond, in bond order
        """
        results = [
            descriptor.calculate(bond, graph)
            for bond in tqdm(
                graph.bonds,
                desc=type(descriptor).__name__,
                unit="bond",
                disable=not progress,
            )
        ]
        computed = sum(1 for result in results if result.is_computed)
        logger.info(f"Computed {computed} of {len(results)} bond values for {graph!r}")
        return results

    def calculate_atoms(
        self,
        graph: MolecularGraph,
        descriptor: AtomicDescriptor,
        progress: bool = False,
    ) -> List[DescriptorValue]:
        """Calculate an atomic descriptor for each atom of a graph."""
        return [
            descriptor.calculate(atom, graph)
            for atom in tqdm(
                graph.atoms,
                desc=type(descriptor).__name__,
                unit="atom",
                disable=not progress,
            )
        ]
