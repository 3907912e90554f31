"""Command-line interface for estimating the symmetry order of a structure."""

import argparse
import logging
import os
import sys
from typing import List, Optional

from ...core.domain.implementations.peak_counting_order_detector import (
    PeakCountingOrderDetector,
)
from ...core.domain.implementations.superposition import superposition_axis
from ...core.domain.models.detector_config import METRIC_NAMES, DetectorConfig
from ...core.domain.models.rotation_axis import RotationAxis
from ...core.exceptions import SymmetryOrderError
from ...infrastructure.repositories.structure_repository import StructureRepository


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """Configure logging."""
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def add_config_arguments(parser: argparse.ArgumentParser) -> None:
    """Add one flag per DetectorConfig parameter, defaulting to its defaults."""
    defaults = DetectorConfig()
    group = parser.add_argument_group("detector")
    group.add_argument("--max-order", type=int, default=defaults.max_order)
    group.add_argument(
        "--degree-sampling",
        type=float,
        default=defaults.degree_sampling,
        help="Angular step between samples (degrees)",
    )
    group.add_argument("--epsilon", type=float, default=defaults.epsilon)
    group.add_argument(
        "--bandwidth",
        type=float,
        default=defaults.bandwidth,
        help="Fraction of samples in each LOESS fit",
    )
    group.add_argument(
        "--robustness-iterations", type=int, default=defaults.robustness_iterations
    )
    group.add_argument("--loess-accuracy", type=float, default=defaults.loess_accuracy)
    group.add_argument("--metric", choices=METRIC_NAMES, default=defaults.metric)


def config_from_args(args: argparse.Namespace) -> DetectorConfig:
    return DetectorConfig(
        max_order=args.max_order,
        degree_sampling=args.degree_sampling,
        epsilon=args.epsilon,
        bandwidth=args.bandwidth,
        robustness_iterations=args.robustness_iterations,
        loess_accuracy=args.loess_accuracy,
        metric=args.metric,
    )


def setup_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Estimate the rotational symmetry order of a structure"
    )
    parser.add_argument("pdb_file", help="PDB file of the structure")
    parser.add_argument(
        "--chains",
        nargs="+",
        help="Chains whose CA atoms are rotated (default: all chains)",
    )
    axis = parser.add_mutually_exclusive_group(required=True)
    axis.add_argument(
        "--axis-chains",
        nargs=2,
        metavar=("REFERENCE", "MOBILE"),
        help="Derive the axis by superimposing MOBILE onto REFERENCE",
    )
    axis.add_argument(
        "--axis-direction",
        nargs=3,
        type=float,
        metavar=("X", "Y", "Z"),
        help="Explicit axis direction",
    )
    parser.add_argument(
        "--axis-point",
        nargs=3,
        type=float,
        default=[0.0, 0.0, 0.0],
        metavar=("X", "Y", "Z"),
        help="Point on an explicit axis",
    )
    add_config_arguments(parser)
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("--log-file", help="Also write log messages to this file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for order detection CLI."""
    parser = setup_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose, args.log_file)

    try:
        config = config_from_args(args)
        data_dir, file_name = os.path.split(os.path.abspath(args.pdb_file))
        structure_id = os.path.splitext(file_name)[0]
        repository = StructureRepository(data_dir)

        coords = repository.get_chain_coordinates(structure_id, args.chains)
        if args.axis_chains:
            reference_id, mobile_id = args.axis_chains
            axis = superposition_axis(
                repository.get_chain_coordinates(structure_id, [reference_id]),
                repository.get_chain_coordinates(structure_id, [mobile_id]),
            )
        else:
            axis = RotationAxis(args.axis_point, args.axis_direction)

        order = PeakCountingOrderDetector(config).calculate_order(coords, coords, axis)
    except (SymmetryOrderError, FileNotFoundError) as e:
        logging.error(str(e))
        return 1

    print(f"{structure_id}\t{order}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
