# src/chemdesc/core/services/classifier_bridge.py
"""Bridge between composite descriptors and a trained decision tree."""

import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Union

import numpy as np
from sklearn.tree import DecisionTreeClassifier

from ..domain.interfaces.classifier import ClassifierModel
from ..domain.models.training_dataset import TrainingDataset
from ..interfaces.repository import Repository
from ...exceptions import InvalidParameterError, ModelNotTrainedError

logger = logging.getLogger(__name__)

# Cost-complexity pruning strength per unit of confidence below 0.5
PRUNING_SCALE = 0.02


@dataclass(frozen=True)
class ClassifierConfig:
    """
    Hyperparameters of the decision tree.

    Attributes:
        confidence_threshold: Pruning confidence in (0, 0.5]; lower values
            prune more aggressively, 0.5 disables pruning
        min_instances_per_leaf: Minimum number of training instances per leaf
        unpruned: Skip pruning regardless of the confidence threshold
    """

    confidence_threshold: float = 0.25
    min_instances_per_leaf: int = 2
    unpruned: bool = False

    def __post_init__(self):
        if isinstance(self.confidence_threshold, bool) or not (
            0.0 < float(self.confidence_threshold) <= 0.5
        ):
            raise InvalidParameterError(
                f"confidence_threshold must be in (0, 0.5], got {self.confidence_threshold!r}"
            )
        if (
            isinstance(self.min_instances_per_leaf, bool)
            or not isinstance(self.min_instances_per_leaf, int)
            or self.min_instances_per_leaf < 1
        ):
            raise InvalidParameterError(
                f"min_instances_per_leaf must be a positive integer, "
                f"got {self.min_instances_per_leaf!r}"
            )

    @property
    def ccp_alpha(self) -> float:
        if self.unpruned:
            return 0.0
        return PRUNING_SCALE * (0.5 - float(self.confidence_threshold))

    @classmethod
    def from_options(cls, options: Sequence[str]) -> "ClassifierConfig":
        """
        Parse command-line style flags.

        Recognised flags are ``-C <confidence>``, ``-M <min instances>`` and
        ``-U`` (unpruned), e.g. ``["-C", "0.25", "-M", "2"]``.
        """
        values = {}
        options = list(options)
        i = 0
        while i < len(options):
            flag = options[i]
            if flag == "-U":
                values["unpruned"] = True
                i += 1
                continue
            if flag not in ("-C", "-M"):
                raise InvalidParameterError(f"Unknown classifier option {flag!r}")
            if i + 1 >= len(options):
                raise InvalidParameterError(f"Classifier option {flag} needs a value")
            raw = options[i + 1]
            try:
                if flag == "-C":
                    values["confidence_threshold"] = float(raw)
                else:
                    values["min_instances_per_leaf"] = int(raw)
            except (TypeError, ValueError):
                raise InvalidParameterError(
                    f"Invalid value {raw!r} for classifier option {flag}"
                ) from None
            i += 2
        return cls(**values)

    def to_options(self) -> List[str]:
        options = [
            "-C",
            str(self.confidence_threshold),
            "-M",
            str(self.min_instances_per_leaf),
        ]
        if self.unpruned:
            options.append("-U")
        return options


class ClassifierBridge(ClassifierModel):
    """
    Decision tree classifier trained from a named reference dataset.

    The tree is trained once by ``build()`` and reused for every prediction.
    ``build()`` must not run concurrently with ``predict()`` on the same
    instance; concurrent ``build()`` calls are serialised and only the first
    one trains. Bound features are per-instance state, so callers predicting
    concurrently should use separate bridges.
    """

    def __init__(
        self,
        dataset: Union[str, Path],
        build_now: bool = False,
        options: Optional[Sequence[str]] = None,
        repository: Optional[Repository[TrainingDataset]] = None,
    ):
        """
        Initialize the bridge.

        Args:
            dataset: Training dataset identifier or ARFF path
            build_now: Train immediately instead of waiting for ``build()``
            options: Classifier flags, see ``ClassifierConfig.from_options``
            repository: Source of training datasets, defaults to the
                bundled ARFF repository
        """
        if repository is None:
            from ...infrastructure.repositories.training_data_repository import (
                TrainingDataRepository,
            )

            repository = TrainingDataRepository()
        self.dataset = dataset
        self._repository = repository
        self._config = ClassifierConfig()
        self._model: Optional[DecisionTreeClassifier] = None
        self._training_data: Optional[TrainingDataset] = None
        self._build_lock = threading.Lock()
        self._features: Optional[np.ndarray] = None
        self._predicted: List[str] = []

        if options is not None:
            self.set_options(options)
        if build_now:
            self.build()

    @property
    def config(self) -> ClassifierConfig:
        return self._config

    @property
    def is_built(self) -> bool:
        return self._model is not None

    @property
    def class_values(self) -> tuple:
        """Class labels declared by the training dataset."""
        if self._training_data is None:
            raise ModelNotTrainedError("Classifier has not been built")
        return self._training_data.class_values

    def set_options(self, options: Sequence[str]) -> None:
        """Set classifier flags; the model must not have been built yet."""
        config = ClassifierConfig.from_options(options)
        if self.is_built and config != self._config:
            raise InvalidParameterError("Options cannot change after the classifier was built")
        self._config = config

    def get_options(self) -> List[str]:
        return self._config.to_options()

    def build(self) -> None:
        """
        Train the decision tree from the dataset, once.

        Raises:
            TrainingDataError: If the dataset cannot be loaded
        """
        if self._model is not None:
            return
        with self._build_lock:
            if self._model is not None:
                return
            data = self._repository.get(self.dataset)
            model = DecisionTreeClassifier(
                criterion="entropy",
                min_samples_leaf=self._config.min_instances_per_leaf,
                ccp_alpha=self._config.ccp_alpha,
                random_state=0,
            )
            model.fit(data.features, data.labels.astype(str))
            self._training_data = data
            self._model = model
            logger.info(
                f"Built decision tree from {data.name} "
                f"({len(data)} instances, {model.get_n_leaves()} leaves, "
                f"options {' '.join(self.get_options())})"
            )

    def set_parameters(self, features: Sequence) -> None:
        """
        Bind the feature vectors to classify.

        Args:
            features: A single vector or a 2-D batch of vectors

        Raises:
            InvalidParameterError: If the features are not numeric, empty, or
                have a different width than the training attributes
        """
        try:
            matrix = np.asarray(features, dtype=float)
        except (TypeError, ValueError) as exc:
            raise InvalidParameterError(f"Features must be numeric: {exc}") from exc
        if matrix.ndim == 1:
            matrix = matrix.reshape(1, -1)
        if matrix.ndim != 2 or matrix.shape[0] == 0 or matrix.shape[1] == 0:
            raise InvalidParameterError(
                f"Features must be a vector or a non-empty 2-D batch, got shape {matrix.shape}"
            )
        if not np.all(np.isfinite(matrix)):
            raise InvalidParameterError("Features must be finite numbers")
        if self._training_data is not None and matrix.shape[1] != self._training_data.n_attributes:
            raise InvalidParameterError(
                f"Expected {self._training_data.n_attributes} features per instance, "
                f"got {matrix.shape[1]}"
            )
        self._features = matrix

    def predict(self) -> List[str]:
        """
        Classify the bound feature vectors.

        Returns:
            One predicted class label per bound vector

        Raises:
            ModelNotTrainedError: If ``build()`` has not completed
            InvalidParameterError: If no features are bound
        """
        if self._model is None:
            raise ModelNotTrainedError("Classifier must be built before predicting")
        if self._features is None:
            raise InvalidParameterError("No feature vectors bound; call set_parameters first")
        if self._features.shape[1] != self._training_data.n_attributes:
            raise InvalidParameterError(
                f"Expected {self._training_data.n_attributes} features per instance, "
                f"got {self._features.shape[1]}"
            )
        self._predicted = [str(label) for label in self._model.predict(self._features)]
        return list(self._predicted)

    def get_predicted(self) -> List[str]:
        """Labels produced by the most recent ``predict()`` call."""
        return list(self._predicted)
