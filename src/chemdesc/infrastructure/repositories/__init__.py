"""Repositories for bundled reference data."""

from .isotope_table_repository import IsotopeTableRepository
from .training_data_repository import TrainingDataRepository

__all__ = [
    "IsotopeTableRepository",
    "TrainingDataRepository",
]
