# src/chemdesc/core/services/isotope_registry.py
"""Process-wide registry of isotope and element reference data."""

import logging
import threading
from typing import Dict, List, Optional, Tuple, Union

from ..domain.models.atom import Atom
from ..domain.models.isotope import Element, IsotopeEntry
from ..interfaces.repository import Repository
from ...exceptions import NotFoundError

logger = logging.getLogger(__name__)


class IsotopeRegistry:
    """
    Read-only lookup of isotopes by element symbol or atomic number.

    ``get_instance()`` returns the shared registry loaded from the bundled
    isotope table. The table is loaded once, under a lock, the first time any
    caller asks for the instance; afterwards the registry is never modified
    and may be read from any thread. Registries built directly from a
    repository are independent of the shared one.
    """

    _instance: Optional["IsotopeRegistry"] = None
    _instance_lock = threading.Lock()

    def __init__(self, repository: Repository, table: str = "isotopes"):
        """
        Load the registry from a repository.

        Args:
            repository: Repository returning the isotope table as a DataFrame
            table: Name of the table to load

        Raises:
            NotFoundError: If the table does not exist
            ReferenceDataError: If the table is malformed
        """
        frame = repository.get(table)

        by_symbol: Dict[str, List[IsotopeEntry]] = {}
        for row in frame.itertuples(index=False):
            entry = IsotopeEntry(
                symbol=row.symbol,
                atomic_number=int(row.atomic_number),
                mass_number=int(row.mass_number),
                exact_mass=float(row.exact_mass),
                natural_abundance=float(row.natural_abundance),
            )
            by_symbol.setdefault(entry.symbol, []).append(entry)

        self._isotopes: Dict[str, Tuple[IsotopeEntry, ...]] = {
            symbol: tuple(sorted(entries, key=lambda e: e.mass_number))
            for symbol, entries in by_symbol.items()
        }
        # Ties in abundance go to the lighter isotope so the choice is stable
        self._major_by_symbol: Dict[str, IsotopeEntry] = {
            symbol: max(entries, key=lambda e: (e.natural_abundance, -e.mass_number))
            for symbol, entries in self._isotopes.items()
        }
        self._major_by_number: Dict[int, IsotopeEntry] = {
            entry.atomic_number: entry for entry in self._major_by_symbol.values()
        }
        self._size = sum(len(entries) for entries in self._isotopes.values())

    @classmethod
    def get_instance(cls) -> "IsotopeRegistry":
        """Return the shared registry, loading it on first use."""
        instance = cls._instance
        if instance is None:
            with cls._instance_lock:
                instance = cls._instance
                if instance is None:
                    from ...infrastructure.repositories.isotope_table_repository import (
                        IsotopeTableRepository,
                    )

                    instance = cls(IsotopeTableRepository())
                    logger.info(f"Initialized isotope registry with {instance.size()} entries")
                    cls._instance = instance
        return instance

    def size(self) -> int:
        """Number of isotope entries loaded."""
        return self._size

    def __len__(self) -> int:
        return self._size

    def get_entry_by_symbol(self, symbol: str) -> IsotopeEntry:
        """Return the most abundant isotope of the element ``symbol``."""
        try:
            return self._major_by_symbol[symbol]
        except KeyError:
            raise NotFoundError(f"No isotope data for element symbol {symbol!r}") from None

    def get_entry_by_atomic_number(self, atomic_number: int) -> IsotopeEntry:
        """Return the most abundant isotope of the element with ``atomic_number``."""
        try:
            return self._major_by_number[atomic_number]
        except KeyError:
            raise NotFoundError(f"No isotope data for atomic number {atomic_number}") from None

    def get_major_isotope(self, key: Union[str, int]) -> IsotopeEntry:
        """
        Return the most abundant isotope for a symbol or an atomic number.

        Repeated calls with the same key return the same entry object.
        """
        if isinstance(key, bool):
            raise TypeError("Isotope key must be a symbol or an atomic number")
        if isinstance(key, int):
            return self.get_entry_by_atomic_number(key)
        if isinstance(key, str):
            return self.get_entry_by_symbol(key)
        raise TypeError(f"Isotope key must be a symbol or an atomic number, got {key!r}")

    def get_isotopes(self, symbol: str) -> Tuple[IsotopeEntry, ...]:
        """Return all isotopes of an element ordered by mass number."""
        try:
            return self._isotopes[symbol]
        except KeyError:
            raise NotFoundError(f"No isotope data for element symbol {symbol!r}") from None

    def get_element(self, symbol: str) -> Element:
        return self.get_entry_by_symbol(symbol).element

    def configure(self, atom: Atom) -> Atom:
        """
        Fill in atomic number and exact mass of ``atom`` from its major isotope.

        Fields that are already set are left untouched.
        """
        entry = self.get_entry_by_symbol(atom.symbol)
        if atom.atomic_number is None:
            atom.atomic_number = entry.atomic_number
        if atom.exact_mass is None:
            atom.exact_mass = entry.exact_mass
        return atom
