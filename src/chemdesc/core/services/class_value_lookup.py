"""Mapping from discretised class labels back to continuous values."""

from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Sequence, Tuple

from ...exceptions import UnknownClassLabelError

DEFAULT_BINS: Tuple[int, ...] = tuple(range(5, 15))
DEFAULT_SUBBINS: Tuple[int, ...] = tuple(range(10))
DEFAULT_BASE = 5.05
DEFAULT_STEP = 0.1


def format_class_label(bin_index: int, subbin: int) -> str:
    """Format a label as ``"<two digit bin>_<subbin digit>"``, e.g. ``"10_5"``."""
    return f"{bin_index:02d}_{subbin}"


def generate_class_values(
    bins: Iterable[int] = DEFAULT_BINS,
    subbins: Sequence[int] = DEFAULT_SUBBINS,
    base: float = DEFAULT_BASE,
    step: float = DEFAULT_STEP,
) -> Iterator[Tuple[str, float]]:
    """
    Enumerate ``(label, value)`` pairs bin by bin, sub-bin by sub-bin.

    The label at ordinal position ``k`` maps to ``base + step * k``. Values
    are computed from the ordinal rather than accumulated, so the table is
    identical on every run.
    """
    ordinal = 0
    for bin_index in bins:
        for subbin in subbins:
            yield format_class_label(bin_index, subbin), base + step * ordinal
            ordinal += 1


class ClassValueLookup(Mapping[str, float]):
    """Immutable table from class label to continuous value."""

    def __init__(
        self,
        bins: Iterable[int] = DEFAULT_BINS,
        subbins: Sequence[int] = DEFAULT_SUBBINS,
        base: float = DEFAULT_BASE,
        step: float = DEFAULT_STEP,
    ):
        table = {}
        for label, value in generate_class_values(bins, subbins, base, step):
            if label in table:
                raise ValueError(f"Duplicate class label {label!r}")
            table[label] = value
        self._table = MappingProxyType(table)
        self._labels = tuple(table)

    @property
    def labels(self) -> Tuple[str, ...]:
        """All labels in enumeration order."""
        return self._labels

    def value_of(self, label: str) -> float:
        try:
            return self._table[label]
        except KeyError:
            raise UnknownClassLabelError(f"Unknown class label {label!r}") from None

    def __getitem__(self, label: str) -> float:
        return self.value_of(label)

    def __iter__(self) -> Iterator[str]:
        return iter(self._labels)

    def __len__(self) -> int:
        return len(self._labels)

    def __contains__(self, label: object) -> bool:
        return label in self._table
