"""Bond and atom descriptors for molecular graphs, with classifier-backed prediction."""

__version__ = "0.1.0"

from .core.domain.models import Atom, Bond, BondOrder, BondStereo, MolecularGraph
from .core.domain.implementations import IonizationPotentialBondDescriptor
from .core.services import ClassifierBridge, ClassValueLookup, IsotopeRegistry

__all__ = [
    "Atom",
    "Bond",
    "BondOrder",
    "BondStereo",
    "MolecularGraph",
    "IonizationPotentialBondDescriptor",
    "ClassifierBridge",
    "ClassValueLookup",
    "IsotopeRegistry",
]
