"""Command-line interface for bond ionization potential prediction."""

import argparse
import logging
import sys
from typing import List, Optional

from ...core.domain.implementations.ionization_potential_bond_descriptor import (
    IonizationPotentialBondDescriptor,
)
from ...core.services.descriptor_service import DescriptorService
from ...exceptions import ChemDescError
from ...infrastructure.adapters.rdkit_adapter import RDKitAdapter


def setup_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Predict ionization potentials of C=C double bonds"
    )
    parser.add_argument("smiles", help="SMILES of the molecule")
    parser.add_argument(
        "--all-bonds",
        action="store_true",
        help="Also list bonds without a prediction (-1.0)",
    )
    parser.add_argument(
        "--confidence",
        type=float,
        default=0.25,
        help="Decision tree pruning confidence",
    )
    parser.add_argument(
        "--min-leaf",
        type=int,
        default=2,
        help="Minimum training instances per leaf",
    )
    parser.add_argument("--progress", action="store_true", help="Show progress bar")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    return parser


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the bond ionization potential CLI."""
    parser = setup_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        graph = RDKitAdapter().from_smiles(args.smiles, kekulize=True)
        descriptor = IonizationPotentialBondDescriptor()
        descriptor.set_parameters([args.confidence, args.min_leaf])
        results = DescriptorService().calculate_bonds(graph, descriptor, progress=args.progress)
    except (ChemDescError, ValueError) as exc:
        logging.error(f"{exc}")
        return 1

    for index, (bond, result) in enumerate(zip(graph.bonds, results)):
        if not result.is_computed and not args.all_bonds:
            continue
        atoms = "-".join(f"{atom.symbol}{graph.atom_number(atom)}" for atom in bond.atoms)
        print(f"{index}\t{atoms}\t{bond.order.name}\t{result.value.value:.2f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
