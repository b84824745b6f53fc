"""Core domain models and interfaces."""

from .models.molecular_graph import MolecularGraph
from .interfaces.descriptor import AtomicDescriptor, BondDescriptor, MolecularDescriptor
from .interfaces.classifier import ClassifierModel

__all__ = [
    "MolecularGraph",
    "AtomicDescriptor",
    "BondDescriptor",
    "MolecularDescriptor",
    "ClassifierModel",
]
