"""Core services."""

from .isotope_registry import IsotopeRegistry
from .class_value_lookup import ClassValueLookup, generate_class_values
from .classifier_bridge import ClassifierBridge, ClassifierConfig
from .feature_composer import FeatureVector, PiSystemFeatureComposer
from .descriptor_service import DescriptorService

__all__ = [
    "IsotopeRegistry",
    "ClassValueLookup",
    "generate_class_values",
    "ClassifierBridge",
    "ClassifierConfig",
    "FeatureVector",
    "PiSystemFeatureComposer",
    "DescriptorService",
]
