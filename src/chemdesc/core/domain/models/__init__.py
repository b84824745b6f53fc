"""Domain model classes."""

from .atom import Atom
from .bond import Bond, BondOrder, BondStereo
from .molecular_graph import MolecularGraph
from .isotope import Element, IsotopeEntry
from .descriptor_value import (
    DescriptorSpecification,
    DescriptorValue,
    DoubleArrayResult,
    DoubleResult,
)

__all__ = [
    "Atom",
    "Bond",
    "BondOrder",
    "BondStereo",
    "MolecularGraph",
    "Element",
    "IsotopeEntry",
    "DescriptorSpecification",
    "DescriptorValue",
    "DoubleArrayResult",
    "DoubleResult",
]
