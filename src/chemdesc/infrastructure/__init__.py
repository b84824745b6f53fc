"""Infrastructure implementations of core interfaces and adapters."""

from .repositories.isotope_table_repository import IsotopeTableRepository
from .repositories.training_data_repository import TrainingDataRepository
from .adapters.rdkit_adapter import RDKitAdapter

__all__ = [
    "IsotopeTableRepository",
    "TrainingDataRepository",
    "RDKitAdapter",
]
