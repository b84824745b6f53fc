"""Exception types raised by descriptor calculations and their collaborators."""


class ChemDescError(Exception):
    """Base class for all chemdesc errors."""


class InvalidParameterError(ChemDescError, ValueError):
    """Raised when descriptor or classifier parameters have the wrong arity or type."""


class NotFoundError(ChemDescError, LookupError):
    """Raised when a reference-data lookup has no matching entry."""


class ReferenceDataError(ChemDescError):
    """Raised when the reference isotope table cannot be loaded or parsed."""


class CalculationError(ChemDescError):
    """Raised when a descriptor cannot produce a value for its input."""


class TrainingDataError(ChemDescError):
    """Raised when a training dataset is missing or malformed."""


class ModelNotTrainedError(ChemDescError):
    """Raised when a prediction is requested before the model was built."""


class UnknownClassLabelError(ChemDescError, KeyError):
    """Raised when a class label is not part of the generated label table."""


class NotApplicableError(ChemDescError):
    """Recorded, never raised, when a descriptor's target is outside its domain."""
