# src/chemdesc/infrastructure/repositories/training_data_repository.py
"""Repository for labelled training datasets stored as ARFF files."""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

import numpy as np
import pandas as pd
from scipy.io import arff

from ...core.domain.models.training_dataset import TrainingDataset
from ...core.interfaces.repository import Repository
from ...exceptions import TrainingDataError

logger = logging.getLogger(__name__)

ARFF_DIR = Path(__file__).resolve().parents[2] / "data" / "arff"


class TrainingDataRepository(Repository[TrainingDataset]):
    """
    Loads ARFF datasets with numeric attributes followed by a nominal class.

    A dataset identifier is either the stem of a file in the data directory
    (``"PySystWithoutHetero"``) or a path to an ``.arff`` file.
    """

    def __init__(self, data_dir: Optional[Union[str, Path]] = None):
        self._data_dir = Path(data_dir) if data_dir is not None else ARFF_DIR
        self._cache: Dict[Path, TrainingDataset] = {}

    def resolve(self, id: Union[str, Path]) -> Path:
        """Map a dataset identifier to the ARFF file it names."""
        candidate = Path(id)
        if candidate.suffix == ".arff" and candidate.is_file():
            return candidate
        path = self._data_dir / f"{candidate.name}.arff"
        if candidate.suffix == ".arff":
            path = self._data_dir / candidate.name
        if not path.is_file():
            raise TrainingDataError(f"Training dataset {str(id)!r} not found")
        return path

    def get(self, id: Union[str, Path]) -> TrainingDataset:
        """
        Load a training dataset.

        Args:
            id: Dataset name or path to an ARFF file

        Returns:
            TrainingDataset with a float feature matrix and string labels

        Raises:
            TrainingDataError: If the dataset is missing or does not have
                numeric attributes followed by a nominal class attribute
        """
        path = self.resolve(id)
        if path in self._cache:
            return self._cache[path]

        try:
            data, meta = arff.loadarff(str(path))
        # a file without an @data section ends the header reader with StopIteration
        except (arff.ArffError, ValueError, UnicodeDecodeError, StopIteration) as exc:
            raise TrainingDataError(f"Could not parse training dataset {path}: {exc}") from exc

        names = list(meta.names())
        types = list(meta.types())
        if len(names) < 2:
            raise TrainingDataError(f"{path} needs at least one attribute and a class")
        if types[-1] != "nominal":
            raise TrainingDataError(f"Last attribute of {path} must be the nominal class")
        if any(kind != "numeric" for kind in types[:-1]):
            raise TrainingDataError(f"All attributes of {path} except the class must be numeric")

        frame = pd.DataFrame(data)
        if frame.empty:
            raise TrainingDataError(f"Training dataset {path} has no instances")

        class_name = names[-1]
        labels = frame[class_name].map(_decode)
        if (labels == "?").any():
            raise TrainingDataError(f"Training dataset {path} has instances without a class")
        features = frame[names[:-1]].to_numpy(dtype=float)
        if np.isnan(features).any():
            raise TrainingDataError(f"Training dataset {path} has missing attribute values")

        _, class_values = meta[class_name]
        dataset = TrainingDataset(
            name=path.stem,
            attribute_names=tuple(names[:-1]),
            class_values=tuple(class_values),
            features=features,
            labels=labels.to_numpy(dtype=object),
        )
        logger.info(
            f"Loaded training dataset {dataset.name}: {len(dataset)} instances, "
            f"{dataset.n_attributes} attributes"
        )
        self._cache[path] = dataset
        return dataset

    def list(self) -> List[str]:
        return sorted(path.stem for path in self._data_dir.glob("*.arff"))


def _decode(value) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return str(value)
