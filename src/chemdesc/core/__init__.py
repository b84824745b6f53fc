"""Core domain models, interfaces and services for molecular descriptors."""

from .domain.models.molecular_graph import MolecularGraph
from .domain.interfaces.descriptor import AtomicDescriptor, BondDescriptor, MolecularDescriptor
from .domain.interfaces.classifier import ClassifierModel
from .services.isotope_registry import IsotopeRegistry
from .services.class_value_lookup import ClassValueLookup
from .services.classifier_bridge import ClassifierBridge, ClassifierConfig
from .services.feature_composer import PiSystemFeatureComposer
from .services.descriptor_service import DescriptorService

__all__ = [
    "MolecularGraph",
    "AtomicDescriptor",
    "BondDescriptor",
    "MolecularDescriptor",
    "ClassifierModel",
    "IsotopeRegistry",
    "ClassValueLookup",
    "ClassifierBridge",
    "ClassifierConfig",
    "PiSystemFeatureComposer",
    "DescriptorService",
]
