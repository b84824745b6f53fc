"""Reference records for elements and their isotopes."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Element:
    """A chemical element."""

    symbol: str
    atomic_number: int


@dataclass(frozen=True)
class IsotopeEntry:
    """Physical constants of a single isotope."""

    symbol: str
    atomic_number: int
    mass_number: int
    exact_mass: float
    natural_abundance: float

    @property
    def element(self) -> Element:
        return Element(symbol=self.symbol, atomic_number=self.atomic_number)
