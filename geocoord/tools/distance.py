"""Measure the distance between two coordinates from the command line.

Usage:
    python -m geocoord.tools.distance 1 1 5 5
    python -m geocoord.tools.distance 1 1 5 5 --formula vincenty
    python -m geocoord.tools.distance 1 1 5 5 --radius 6371000
"""

from __future__ import annotations

import argparse
import logging
import sys

from geocoord.application.use_cases.measure_distance import MeasureDistanceUseCase
from geocoord.config import settings
from geocoord.domain.exceptions import VincentyConvergenceError
from geocoord.domain.value_objects.coordinate import Coordinate
from geocoord.domain.value_objects.enums import DistanceFormula

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Distance in meters between two coordinates")
    parser.add_argument("lat1", type=float, help="Latitude of the first point (degrees)")
    parser.add_argument("lon1", type=float, help="Longitude of the first point (degrees)")
    parser.add_argument("lat2", type=float, help="Latitude of the second point (degrees)")
    parser.add_argument("lon2", type=float, help="Longitude of the second point (degrees)")
    parser.add_argument(
        "--formula", type=DistanceFormula, default=DistanceFormula.HAVERSINE,
        choices=list(DistanceFormula), metavar="{" + ",".join(f.value for f in DistanceFormula) + "}",
        help="Distance formula (default: haversine)",
    )
    parser.add_argument(
        "--radius", type=float, default=settings.earth_radius_m,
        help=f"Earth radius / semi-major axis in meters (default: {settings.earth_radius_m:g})",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log at DEBUG level",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s | %(message)s",
    )

    uc = MeasureDistanceUseCase(
        earth_radius_m=args.radius,
        vincenty_max_iterations=settings.vincenty_max_iterations,
        vincenty_tolerance=settings.vincenty_tolerance,
    )
    try:
        origin = Coordinate(args.lat1, args.lon1)
        destination = Coordinate(args.lat2, args.lon2)
        result = uc.execute(origin, destination, args.formula)
    except (ValueError, VincentyConvergenceError) as e:
        logger.error("%s", e)
        return 1

    print(f"{result.distance_m:.6f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
