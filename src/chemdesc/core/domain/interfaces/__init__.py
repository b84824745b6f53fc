"""Descriptor and classifier interfaces."""

from .descriptor import AtomicDescriptor, BondDescriptor, Descriptor, MolecularDescriptor
from .classifier import ClassifierModel

__all__ = [
    "Descriptor",
    "AtomicDescriptor",
    "BondDescriptor",
    "MolecularDescriptor",
    "ClassifierModel",
]
