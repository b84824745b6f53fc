"""Interfaces shared by atomic, bond and molecular descriptors."""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, List, Optional, Sequence, Tuple

from ....exceptions import InvalidParameterError
from ..models.atom import Atom
from ..models.bond import Bond
from ..models.descriptor_value import DescriptorSpecification, DescriptorValue
from ..models.molecular_graph import MolecularGraph

DICTIONARY_BASE = "http://www.blueobelisk.org/ontologies/chemoinformatics-algorithms/#"
VENDOR = "chemdesc"


class Descriptor(ABC):
    """
    Parameter and provenance contract common to every descriptor.

    Subclasses declare ``PARAMETER_NAMES`` with one type per name in
    ``PARAMETER_TYPES`` and the initial values in ``DEFAULT_PARAMETERS``.
    A default of ``None`` means the parameter is unbound until set.
    """

    DICTIONARY_REFERENCE: ClassVar[str] = ""
    PARAMETER_NAMES: ClassVar[Tuple[str, ...]] = ()
    PARAMETER_TYPES: ClassVar[Dict[str, type]] = {}
    DEFAULT_PARAMETERS: ClassVar[Tuple[Any, ...]] = ()

    def __init__(self):
        self._parameters: List[Any] = list(self.DEFAULT_PARAMETERS)
        self._parameter_container: type = list

    def get_specification(self) -> DescriptorSpecification:
        cls = type(self)
        return DescriptorSpecification(
            reference=DICTIONARY_BASE + self.DICTIONARY_REFERENCE,
            implementation_title=f"{cls.__module__}.{cls.__qualname__}",
            implementation_identifier=_version(),
            implementation_vendor=VENDOR,
        )

    def get_parameter_names(self) -> Tuple[str, ...]:
        return tuple(self.PARAMETER_NAMES)

    def get_parameter_type(self, name: str) -> type:
        try:
            return self.PARAMETER_TYPES[name]
        except KeyError:
            raise InvalidParameterError(
                f"{type(self).__name__} has no parameter named {name!r}"
            ) from None

    def get_parameters(self) -> Sequence[Any]:
        """Return the bound values as a list, or as a tuple if they were set from one."""
        return self._parameter_container(self._parameters)

    def set_parameters(self, values: Sequence[Any]) -> None:
        """
        Bind parameter values in declaration order.

        Raises:
            InvalidParameterError: If the number of values or any value type
                does not match the declared parameters
        """
        container = tuple if isinstance(values, tuple) else list
        values = list(values)
        if len(values) != len(self.PARAMETER_NAMES):
            raise InvalidParameterError(
                f"{type(self).__name__} expects {len(self.PARAMETER_NAMES)} "
                f"parameter(s) {list(self.PARAMETER_NAMES)}, got {len(values)}"
            )
        for name, value in zip(self.PARAMETER_NAMES, values):
            expected = self.PARAMETER_TYPES[name]
            if not _matches_type(value, expected):
                raise InvalidParameterError(
                    f"Parameter {name!r} of {type(self).__name__} must be "
                    f"{expected.__name__}, got {type(value).__name__}"
                )
        self._validate_parameters(values)
        self._parameters = values
        self._parameter_container = container
        self._parameters_changed()

    def _validate_parameters(self, values: List[Any]) -> None:
        """Hook for value range checks; raise InvalidParameterError to reject."""

    def _parameters_changed(self) -> None:
        """Hook invoked after new parameters were accepted."""

    def _parameter(self, name: str) -> Any:
        return self._parameters[self.PARAMETER_NAMES.index(name)]

    def _make_value(
        self, value: Any, exception: Optional[BaseException] = None
    ) -> DescriptorValue:
        return DescriptorValue(
            specification=self.get_specification(),
            parameter_names=self.get_parameter_names(),
            parameters=tuple(self._parameters),
            value=value,
            exception=exception,
        )


class AtomicDescriptor(Descriptor):
    """Descriptor computing a property of one atom within its graph."""

    @abstractmethod
    def calculate(self, atom: Atom, graph: MolecularGraph) -> DescriptorValue:
        """
        Calculate the descriptor for ``atom``.

        Args:
            atom: Target atom, must belong to ``graph``
            graph: Molecular graph containing the atom

        Returns:
            DescriptorValue with the result and provenance
        """
        pass


class BondDescriptor(Descriptor):
    """Descriptor computing a property of one bond within its graph."""

    @abstractmethod
    def calculate(self, bond: Bond, graph: MolecularGraph) -> DescriptorValue:
        """
        Calculate the descriptor for ``bond``.

        Args:
            bond: Target bond, must belong to ``graph``
            graph: Molecular graph containing the bond

        Returns:
            DescriptorValue with the result and provenance
        """
        pass


class MolecularDescriptor(Descriptor):
    """Descriptor computing a property of a whole graph."""

    @abstractmethod
    def calculate(self, graph: MolecularGraph) -> DescriptorValue:
        pass


def _matches_type(value: Any, expected: type) -> bool:
    if isinstance(value, bool) and expected is not bool:
        return False
    if expected is float:
        return isinstance(value, (int, float))
    return isinstance(value, expected)


def _version() -> str:
    from .... import __version__

    return __version__
