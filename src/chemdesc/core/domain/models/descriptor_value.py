"""Domain models for descriptor provenance and results."""

from dataclasses import dataclass
from typing import Any, Optional, Sequence, Tuple


@dataclass(frozen=True)
class DescriptorSpecification:
    """Provenance of a descriptor: dictionary reference, implementation and vendor."""

    reference: str
    implementation_title: str
    implementation_identifier: str
    implementation_vendor: str


@dataclass(frozen=True)
class DoubleResult:
    """A single floating point result."""

    value: float

    def __len__(self) -> int:
        return 1


@dataclass(frozen=True, init=False)
class DoubleArrayResult:
    """An indexed sequence of floating point results."""

    values: Tuple[float, ...]

    def __init__(self, values: Sequence[float]):
        object.__setattr__(self, "values", tuple(float(v) for v in values))

    def get(self, index: int) -> float:
        return self.values[index]

    def __len__(self) -> int:
        return len(self.values)


@dataclass(frozen=True)
class DescriptorValue:
    """
    Outcome of a descriptor calculation together with its provenance.

    ``parameters`` is the snapshot of the descriptor parameters at calculation
    time. ``exception`` records why a value could not be computed when the
    descriptor returned its not-computed sentinel instead of raising.
    """

    specification: DescriptorSpecification
    parameter_names: Tuple[str, ...]
    parameters: Tuple[Any, ...]
    value: Any
    exception: Optional[BaseException] = None

    @property
    def is_computed(self) -> bool:
        return self.exception is None
