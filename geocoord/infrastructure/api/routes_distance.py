"""Distance endpoint — measure the distance between two coordinates."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from geocoord.application.use_cases.measure_distance import MeasureDistanceUseCase
from geocoord.domain.exceptions import (
    CoordinateOutOfRangeError,
    UnknownPositionError,
    VincentyConvergenceError,
)
from geocoord.domain.value_objects.coordinate import Coordinate
from geocoord.domain.value_objects.enums import DistanceFormula
from geocoord.infrastructure.api.dependencies import get_measure_distance_uc

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/distance", tags=["distance"])

# ── Request / Response schemas ──────────────────────────────────────

class CoordinateIn(BaseModel):
    latitude: float | None = None
    longitude: float | None = None
    altitude: float | None = None


class DistanceRequest(BaseModel):
    origin: CoordinateIn
    destination: CoordinateIn
    formula: DistanceFormula = DistanceFormula.HAVERSINE


class DistanceResponse(BaseModel):
    origin: str
    destination: str
    formula: DistanceFormula
    distance_m: float


# ── Routes ──────────────────────────────────────────────────────────

@router.post("", response_model=DistanceResponse)
async def measure_distance(
    body: DistanceRequest,
    uc: MeasureDistanceUseCase = Depends(get_measure_distance_uc),
):
    """Distance in meters between ``origin`` and ``destination``."""
    try:
        origin = _to_coordinate(body.origin)
        destination = _to_coordinate(body.destination)
    except CoordinateOutOfRangeError as e:
        raise HTTPException(status_code=422, detail=str(e))

    try:
        result = uc.execute(origin, destination, body.formula)
    except UnknownPositionError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except VincentyConvergenceError as e:
        logger.exception("Vincenty did not converge for %s → %s", origin, destination)
        raise HTTPException(status_code=422, detail=str(e))

    return DistanceResponse(
        origin=str(result.origin),
        destination=str(result.destination),
        formula=result.formula,
        distance_m=result.distance_m,
    )


def _to_coordinate(point: CoordinateIn) -> Coordinate:
    return Coordinate(
        latitude=point.latitude,
        longitude=point.longitude,
        altitude=point.altitude,
    )
