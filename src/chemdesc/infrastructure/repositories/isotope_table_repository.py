# src/chemdesc/infrastructure/repositories/isotope_table_repository.py
"""Repository for the bundled isotope reference tables."""

import logging
from pathlib import Path
from typing import List, Optional, Union

import pandas as pd

from ...core.interfaces.repository import Repository
from ...exceptions import NotFoundError, ReferenceDataError

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parents[2] / "data"

REQUIRED_COLUMNS = (
    "symbol",
    "atomic_number",
    "mass_number",
    "exact_mass",
    "natural_abundance",
)


class IsotopeTableRepository(Repository[pd.DataFrame]):
    """Loads isotope tables stored as CSV files in a data directory."""

    def __init__(self, data_dir: Optional[Union[str, Path]] = None):
        """
        Initialize repository with data directory.

        Args:
            data_dir: Directory containing ``<name>.csv`` tables, defaults to
                the tables shipped with the package
        """
        self._data_dir = Path(data_dir) if data_dir is not None else DATA_DIR

    def get(self, id: str = "isotopes") -> pd.DataFrame:
        """
        Load and validate an isotope table.

        Args:
            id: Table name without extension

        Returns:
            DataFrame with one row per isotope

        Raises:
            NotFoundError: If no table with that name exists
            ReferenceDataError: If the table is malformed
        """
        path = self._data_dir / f"{id}.csv"
        if not path.is_file():
            raise NotFoundError(f"Isotope table {id!r} not found in {self._data_dir}")

        try:
            # round_trip parsing keeps the tabulated masses bit-exact
            table = pd.read_csv(path, float_precision="round_trip")
        except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as exc:
            raise ReferenceDataError(f"Could not parse isotope table {path}: {exc}") from exc

        missing = [column for column in REQUIRED_COLUMNS if column not in table.columns]
        if missing:
            raise ReferenceDataError(f"Isotope table {path} lacks columns {missing}")
        if table.empty:
            raise ReferenceDataError(f"Isotope table {path} has no rows")

        table = table[list(REQUIRED_COLUMNS)]
        if table.isna().any().any():
            raise ReferenceDataError(f"Isotope table {path} has missing values")
        try:
            table = table.astype(
                {
                    "symbol": str,
                    "atomic_number": int,
                    "mass_number": int,
                    "exact_mass": float,
                    "natural_abundance": float,
                }
            )
        except (TypeError, ValueError) as exc:
            raise ReferenceDataError(f"Isotope table {path} has invalid values: {exc}") from exc

        logger.info(f"Loaded {len(table)} isotopes from {path}")
        return table

    def list(self) -> List[str]:
        return sorted(path.stem for path in self._data_dir.glob("*.csv"))
