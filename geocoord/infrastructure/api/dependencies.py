"""FastAPI dependency injection — wires settings into use cases."""

from __future__ import annotations

from geocoord.application.use_cases.measure_distance import MeasureDistanceUseCase
from geocoord.config import settings


def get_measure_distance_uc() -> MeasureDistanceUseCase:
    return MeasureDistanceUseCase(
        earth_radius_m=settings.earth_radius_m,
        vincenty_max_iterations=settings.vincenty_max_iterations,
        vincenty_tolerance=settings.vincenty_tolerance,
    )
