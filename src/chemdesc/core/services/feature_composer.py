# src/chemdesc/core/services/feature_composer.py
"""Assembly of classifier feature vectors for bond-level composite descriptors."""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

import numpy as np

from ..domain.implementations.partial_sigma_charge_descriptor import (
    PartialSigmaChargeDescriptor,
)
from ..domain.implementations.resonance_positive_charge_descriptor import (
    ResonancePositiveChargeDescriptor,
)
from ..domain.implementations.sigma_electronegativity_descriptor import (
    SigmaElectronegativityDescriptor,
)
from ..domain.interfaces.descriptor import AtomicDescriptor, MolecularDescriptor
from ..domain.models.bond import Bond, BondOrder
from ..domain.models.molecular_graph import MolecularGraph
from ...exceptions import CalculationError, InvalidParameterError, NotApplicableError

logger = logging.getLogger(__name__)

FEATURE_NAMES: Tuple[str, ...] = (
    "sigma_electronegativity_1",
    "partial_sigma_charge_1",
    "sigma_electronegativity_2",
    "partial_sigma_charge_2",
    "resonance_positive_charge_1",
    "resonance_positive_charge_2",
)


@dataclass(frozen=True)
class FeatureVector:
    """Outcome of feature assembly: the values, or the reason there are none."""

    values: Optional[np.ndarray] = None
    error: Optional[Exception] = None

    @property
    def is_complete(self) -> bool:
        return self.values is not None and self.error is None


class PiSystemFeatureComposer:
    """
    Builds the six-value feature vector of a carbon-carbon double bond.

    Only bonds of order DOUBLE whose first two atoms are both carbon are
    eligible. The composer reads atoms 0 and 1 of the bond; bonds with more
    than two atoms are outside its domain. Bonds in conjugated systems or
    next to heteroatoms are not excluded, although the training data covers
    isolated pi systems only.
    """

    def __init__(
        self,
        electronegativity_factory: Callable[[], AtomicDescriptor] = SigmaElectronegativityDescriptor,
        charge_factory: Callable[[], AtomicDescriptor] = PartialSigmaChargeDescriptor,
        resonance_factory: Callable[[], MolecularDescriptor] = ResonancePositiveChargeDescriptor,
    ):
        """
        Initialize the composer with sub-descriptor factories.

        A fresh sub-descriptor is created for every composition so parameter
        state is never shared between targets.
        """
        self._electronegativity_factory = electronegativity_factory
        self._charge_factory = charge_factory
        self._resonance_factory = resonance_factory

    @property
    def feature_names(self) -> Tuple[str, ...]:
        return FEATURE_NAMES

    def is_applicable(self, bond: Bond) -> bool:
        """True for a DOUBLE bond between two carbon atoms."""
        return (
            bond.order is BondOrder.DOUBLE
            and bond.get_atom(0).symbol == "C"
            and bond.get_atom(1).symbol == "C"
        )

    def compose(self, bond: Bond, graph: MolecularGraph) -> FeatureVector:
        """
        Evaluate the sub-descriptors for ``bond`` in a fixed order.

        An ineligible bond yields a NotApplicableError as the vector's
        ``error``; sub-descriptor failures are logged and returned there as
        CalculationError or InvalidParameterError. Neither is raised. A
        bond that is not part of ``graph`` is a caller error and raises
        ValueError.
        """
        if not self.is_applicable(bond):
            return FeatureVector(
                error=NotApplicableError(f"{bond!r} is not a carbon-carbon double bond")
            )

        position = graph.bond_number(bond)
        first = bond.get_atom(0)
        second = bond.get_atom(1)
        try:
            values = []
            for atom in (first, second):
                values.append(self._electronegativity_factory().calculate(atom, graph).value.value)
                values.append(self._charge_factory().calculate(atom, graph).value.value)

            resonance = self._resonance_factory()
            parameters = list(resonance.get_parameters())
            parameters[0] = position
            resonance.set_parameters(parameters)
            charges = resonance.calculate(graph).value
            values.extend([charges.get(0), charges.get(1)])
        except (CalculationError, InvalidParameterError) as exc:
            logger.warning(f"Feature assembly failed for bond {position} of {graph!r}: {exc}")
            return FeatureVector(error=exc)

        vector = np.asarray(values, dtype=float)
        logger.debug(f"Features for bond {position}: {dict(zip(FEATURE_NAMES, vector))}")
        return FeatureVector(values=vector)
