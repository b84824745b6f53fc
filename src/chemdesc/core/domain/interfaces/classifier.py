"""Interface for trainable classifiers used by composite descriptors."""

from abc import ABC, abstractmethod
from typing import List, Sequence


class ClassifierModel(ABC):
    """
    Bind-then-predict protocol of a trainable discrete classifier.

    ``build()`` trains once; each prediction binds features with
    ``set_parameters()`` and then calls ``predict()``.
    """

    @abstractmethod
    def build(self) -> None:
        """Train the model."""
        pass

    @property
    @abstractmethod
    def is_built(self) -> bool:
        pass

    @abstractmethod
    def set_parameters(self, features: Sequence) -> None:
        """Bind one feature vector or a batch of feature vectors."""
        pass

    @abstractmethod
    def predict(self) -> List[str]:
        """Return one predicted class label per bound feature vector."""
        pass
