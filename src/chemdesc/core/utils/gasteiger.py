"""Gasteiger-Marsili partial equalization of orbital electronegativity (PEOE)."""

import math
from typing import Dict, Optional, Tuple

import numpy as np
from rdkit import Chem
from rdkit.Chem import rdPartialCharges

from ...exceptions import CalculationError

# Orbital electronegativity chi(q) = a + b*q + c*q**2 in eV, from
# Gasteiger & Marsili, Tetrahedron 36 (1980) 3219. A hybridization of None
# applies to every hybridization of that element.
GASTEIGER_PARAMETERS: Dict[Tuple[str, Optional[str]], Tuple[float, float, float]] = {
    ("H", None): (7.17, 6.24, -0.56),
    ("C", "sp3"): (7.98, 9.18, 1.88),
    ("C", "sp2"): (8.79, 9.32, 1.51),
    ("C", "sp"): (10.39, 9.45, 0.73),
    ("N", "sp3"): (11.54, 10.82, 1.36),
    ("N", "sp2"): (12.87, 11.15, 0.85),
    ("N", "sp"): (15.68, 11.70, -0.27),
    ("O", "sp3"): (14.18, 12.92, 1.39),
    ("O", "sp2"): (17.07, 13.79, 0.47),
    ("F", None): (14.66, 13.85, 2.31),
    ("Cl", None): (11.00, 9.69, 1.35),
    ("Br", None): (10.08, 8.47, 1.16),
    ("I", None): (9.90, 7.96, 0.96),
    ("S", None): (10.14, 9.13, 1.38),
}

_HYBRIDIZATIONS = {
    Chem.HybridizationType.SP: "sp",
    Chem.HybridizationType.SP2: "sp2",
    Chem.HybridizationType.SP3: "sp3",
}


def hybridization_of(rd_atom: Chem.Atom) -> Optional[str]:
    return _HYBRIDIZATIONS.get(rd_atom.GetHybridization())


def electronegativity_parameters(symbol: str, hybridization: Optional[str]) -> Tuple[float, float, float]:
    """
    Return the (a, b, c) coefficients for an element and hybridization.

    Raises:
        CalculationError: If the combination is not parameterised
    """
    for key in ((symbol, hybridization), (symbol, None)):
        if key in GASTEIGER_PARAMETERS:
            return GASTEIGER_PARAMETERS[key]
    raise CalculationError(
        f"No Gasteiger-Marsili parameters for {symbol} ({hybridization or 'unknown'} hybridization)"
    )


def sigma_electronegativity(symbol: str, hybridization: Optional[str], charge: float) -> float:
    a, b, c = electronegativity_parameters(symbol, hybridization)
    return a + b * charge + c * charge * charge


def sigma_charges(mol: Chem.Mol, max_iterations: int) -> np.ndarray:
    """
    Compute Gasteiger-Marsili charges of the heavy atoms of ``mol``.

    The molecule is copied, so its properties are left untouched.

    Raises:
        CalculationError: If RDKit lacks parameters for an atom or the
            iteration produces non-finite charges
    """
    mol = Chem.Mol(mol)
    try:
        rdPartialCharges.ComputeGasteigerCharges(
            mol, nIter=max_iterations, throwOnParamFailure=True
        )
    except (RuntimeError, ValueError) as exc:
        raise CalculationError(f"Gasteiger charges unavailable: {exc}") from exc

    charges = np.array(
        [atom.GetDoubleProp("_GasteigerCharge") for atom in mol.GetAtoms()], dtype=float
    )
    if not all(math.isfinite(q) for q in charges):
        raise CalculationError("Gasteiger charge iteration did not converge")
    return charges
