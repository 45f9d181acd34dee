"""MeasureDistanceUseCase — distance between two coordinates with the configured Earth model."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from geocoord.domain.exceptions import VincentyConvergenceError
from geocoord.domain.policies.distance import (
    EARTH_RADIUS_M,
    VINCENTY_MAX_ITERATIONS,
    VINCENTY_TOLERANCE,
    distance,
)
from geocoord.domain.value_objects.coordinate import Coordinate
from geocoord.domain.value_objects.enums import DistanceFormula

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DistanceMeasurement:
    """Result of a single distance measurement."""

    origin: Coordinate
    destination: Coordinate
    formula: DistanceFormula
    distance_m: float


class MeasureDistanceUseCase:
    """Runs the distance policy with radius and Vincenty limits fixed at construction."""

    def __init__(
        self,
        earth_radius_m: float = EARTH_RADIUS_M,
        vincenty_max_iterations: int = VINCENTY_MAX_ITERATIONS,
        vincenty_tolerance: float = VINCENTY_TOLERANCE,
    ):
        self._earth_radius_m = earth_radius_m
        self._max_iterations = vincenty_max_iterations
        self._tolerance = vincenty_tolerance

    def execute(
        self,
        origin: Coordinate,
        destination: Coordinate,
        formula: DistanceFormula = DistanceFormula.HAVERSINE,
    ) -> DistanceMeasurement:
        """Measure the distance from ``origin`` to ``destination``.

        Args:
            origin: starting coordinate.
            destination: target coordinate.
            formula: distance kernel to use.

        Returns:
            DistanceMeasurement with the distance in meters.

        Raises:
            UnknownPositionError: if either coordinate has no 2D position.
            VincentyConvergenceError: if Vincenty does not converge.
        """
        try:
            meters = distance(
                origin,
                destination,
                formula,
                radius=self._earth_radius_m,
                max_iterations=self._max_iterations,
                tolerance=self._tolerance,
            )
        except (ValueError, VincentyConvergenceError) as e:
            logger.warning("Distance %s → %s via %s failed: %s", origin, destination, formula, e)
            raise

        logger.info("Distance %s → %s via %s: %.3f m", origin, destination, formula, meters)
        return DistanceMeasurement(
            origin=origin,
            destination=destination,
            formula=DistanceFormula(formula),
            distance_m=meters,
        )
