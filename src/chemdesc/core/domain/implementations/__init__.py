"""Concrete atomic, molecular and bond descriptors."""

from .partial_sigma_charge_descriptor import PartialSigmaChargeDescriptor
from .sigma_electronegativity_descriptor import SigmaElectronegativityDescriptor
from .resonance_positive_charge_descriptor import ResonancePositiveChargeDescriptor
from .ionization_potential_bond_descriptor import IonizationPotentialBondDescriptor

__all__ = [
    "PartialSigmaChargeDescriptor",
    "SigmaElectronegativityDescriptor",
    "ResonancePositiveChargeDescriptor",
    "IonizationPotentialBondDescriptor",
]
