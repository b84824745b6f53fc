"""Domain model for labelled classifier training data."""

from dataclasses import dataclass
from typing import Tuple

import numpy as np


@dataclass(frozen=True)
class TrainingDataset:
    """Numeric attribute matrix with one nominal class label per row."""

    name: str
    attribute_names: Tuple[str, ...]
    class_values: Tuple[str, ...]
    features: np.ndarray
    labels: np.ndarray

    @property
    def n_attributes(self) -> int:
        return len(self.attribute_names)

    def __len__(self) -> int:
        return int(self.features.shape[0])
