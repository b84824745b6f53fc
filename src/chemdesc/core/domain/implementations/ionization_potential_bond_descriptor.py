"""Ionization potential of a bond predicted by a decision tree."""

import logging
import threading
from typing import Optional

from ..interfaces.classifier import ClassifierModel
from ..interfaces.descriptor import BondDescriptor
from ..models.bond import Bond
from ..models.descriptor_value import DescriptorValue, DoubleResult
from ..models.molecular_graph import MolecularGraph
from ...services.class_value_lookup import ClassValueLookup
from ...services.classifier_bridge import ClassifierBridge, ClassifierConfig

logger = logging.getLogger(__name__)

NOT_COMPUTED = -1.0


class IonizationPotentialBondDescriptor(BondDescriptor):
    """
    Ionization potential (eV) of a carbon-carbon double bond.

    The bond's feature vector is classified by a decision tree trained on
    experimental ionization potentials of pi systems without heteroatoms,
    and the predicted class is mapped back to eV. Bonds that are not C=C
    double bonds, or whose features cannot be computed, yield -1.0 and the
    reason is kept in ``DescriptorValue.exception``: a NotApplicableError for
    ineligible bonds, a CalculationError when a sub-descriptor failed.

    Parameters:
        confidence_threshold: Pruning confidence of the tree (default 0.25)
        min_instances_per_leaf: Minimum instances per leaf (default 2)
    """

    DICTIONARY_REFERENCE = "ionizationPotential"
    PARAMETER_NAMES = ("confidence_threshold", "min_instances_per_leaf")
    PARAMETER_TYPES = {"confidence_threshold": float, "min_instances_per_leaf": int}
    DEFAULT_PARAMETERS = (0.25, 2)
    DATASET = "PySystWithoutHetero"

    def __init__(self, classifier: Optional[ClassifierModel] = None, composer=None, lookup=None):
        """
        Initialize the descriptor.

        Args:
            classifier: Classifier to use instead of a tree trained on
                ``DATASET``; an injected classifier is never rebuilt
            composer: Feature composer, defaults to PiSystemFeatureComposer
            lookup: Class label to value table, defaults to ClassValueLookup
        """
        from ...services.feature_composer import PiSystemFeatureComposer

        super().__init__()
        self._classifier = classifier
        self._owns_classifier = classifier is None
        self._composer = composer or PiSystemFeatureComposer()
        self._lookup = lookup or ClassValueLookup()
        self._lock = threading.Lock()

    def _validate_parameters(self, values):
        ClassifierConfig(confidence_threshold=values[0], min_instances_per_leaf=values[1])

    def _parameters_changed(self):
        if self._owns_classifier:
            with self._lock:
                self._classifier = None

    def _get_classifier(self) -> ClassifierModel:
        if self._classifier is None:
            config = ClassifierConfig(
                confidence_threshold=self._parameter("confidence_threshold"),
                min_instances_per_leaf=self._parameter("min_instances_per_leaf"),
            )
            self._classifier = ClassifierBridge(self.DATASET, options=config.to_options())
        return self._classifier

    def calculate(self, bond: Bond, graph: MolecularGraph) -> DescriptorValue:
        """
        Predict the ionization potential of ``bond``.

        Raises:
            TrainingDataError: If the classifier cannot be trained
            UnknownClassLabelError: If the classifier predicts a label
                outside the class-value table
        """
        features = self._composer.compose(bond, graph)
        if not features.is_complete:
            logger.debug(f"Ionization potential not computed for {bond!r}: {features.error}")
            return self._make_value(DoubleResult(NOT_COMPUTED), exception=features.error)

        with self._lock:
            classifier = self._get_classifier()
            classifier.build()
            classifier.set_parameters(features.values)
            label = classifier.predict()[0]

        value = self._lookup.value_of(label)
        logger.debug(f"Predicted class {label} ({value:.2f} eV) for {bond!r}")
        return self._make_value(DoubleResult(value))
