"""Distance policy — great-circle and ellipsoidal distance between two coordinates.

Every function here is pure: it reads the two coordinates and returns meters.
Nothing is cached or shared, so callers may use them from any thread.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from geocoord.domain.exceptions import UnknownPositionError, VincentyConvergenceError
from geocoord.domain.value_objects.enums import DistanceFormula

if TYPE_CHECKING:
    from geocoord.domain.value_objects.coordinate import Coordinate

logger = logging.getLogger(__name__)

# Sphere radius / ellipsoid semi-major axis, in meters
EARTH_RADIUS_M = 637100.0
# WGS-84 flattening
FLATTENING = 1 / 298.257223563

VINCENTY_TOLERANCE = 1e-12
VINCENTY_MAX_ITERATIONS = 1000


def distance(
    a: Coordinate,
    b: Coordinate,
    formula: DistanceFormula,
    *,
    radius: float = EARTH_RADIUS_M,
    max_iterations: int = VINCENTY_MAX_ITERATIONS,
    tolerance: float = VINCENTY_TOLERANCE,
) -> float:
    """Distance in meters between two coordinates using the selected formula.

    Args:
        a: first coordinate.
        b: second coordinate.
        formula: which kernel to run.
        radius: sphere radius (Haversine, law of cosines) or semi-major
            axis (Vincenty), in meters.
        max_iterations: Vincenty iteration cap.
        tolerance: Vincenty convergence threshold on the longitude change.

    Raises:
        UnknownPositionError: if either latitude or longitude of either point is NaN.
        ValueError: if ``radius`` is not a positive number.
        NotImplementedError: if ``formula`` is not a DistanceFormula member.
        VincentyConvergenceError: if Vincenty does not converge within ``max_iterations``.
    """
    if not (a.has_position() and b.has_position()):
        raise UnknownPositionError("Argument latitude or longitude is not a number")
    if not radius > 0:
        raise ValueError(f"radius must be a positive number of meters (got {radius!r})")

    if formula == DistanceFormula.HAVERSINE:
        return haversine_m(a, b, radius)
    if formula == DistanceFormula.SPHERICAL_LAW_OF_COSINES:
        return spherical_law_of_cosines_m(a, b, radius)
    if formula == DistanceFormula.VINCENTY:
        return vincenty_m(a, b, radius, max_iterations=max_iterations, tolerance=tolerance)

    raise NotImplementedError(f"Unsupported distance formula: {formula!r}")


def haversine_m(a: Coordinate, b: Coordinate, radius: float = EARTH_RADIUS_M) -> float:
    """Great-circle distance on a sphere using the Haversine formula."""
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    dlon = math.radians(b.longitude) - math.radians(a.longitude)

    h = (
        math.sin((lat2 - lat1) / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    )
    return radius * (2 * math.atan2(math.sqrt(h), math.sqrt(1 - h)))


def spherical_law_of_cosines_m(
    a: Coordinate, b: Coordinate, radius: float = EARTH_RADIUS_M
) -> float:
    """Great-circle distance on a sphere using the spherical law of cosines.

    Loses precision for points a few meters apart; prefer Haversine there.
    """
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    dlon = math.radians(b.longitude - a.longitude)

    cos_c = math.sin(lat1) * math.sin(lat2) + math.cos(lat1) * math.cos(lat2) * math.cos(dlon)
    # Rounding can push coincident points just past 1
    cos_c = max(-1.0, min(1.0, cos_c))
    return math.acos(cos_c) * radius


def vincenty_m(
    a: Coordinate,
    b: Coordinate,
    radius: float = EARTH_RADIUS_M,
    *,
    max_iterations: int = VINCENTY_MAX_ITERATIONS,
    tolerance: float = VINCENTY_TOLERANCE,
) -> float:
    """Geodesic distance on an oblate spheroid using Vincenty's inverse formula.

    ``radius`` is the semi-major axis; the polar radius is derived from
    ``FLATTENING``. Two deviations from the published algorithm are kept
    because recorded distances depend on them:

    - sigma is ``atan(sin_sigma / cos_sigma)`` rather than ``atan2``, so arcs
      longer than a quarter circle land in the wrong quadrant. Results past a
      quarter circle are not meaningful: they can come out negative, or
      lambda can oscillate until ``VincentyConvergenceError`` is raised;
    - the third-order ``B / 6`` term of delta-sigma is not applied.

    Raises:
        VincentyConvergenceError: if lambda has not settled after ``max_iterations``.
    """
    rpol = (1 - FLATTENING) * radius

    u1 = math.atan((1 - FLATTENING) * math.tan(math.radians(b.latitude)))
    u2 = math.atan((1 - FLATTENING) * math.tan(math.radians(a.latitude)))
    sin_u1, cos_u1 = math.sin(u1), math.cos(u1)
    sin_u2, cos_u2 = math.sin(u2), math.cos(u2)

    lon = math.radians(a.longitude) - math.radians(b.longitude)
    lam = lon
    delta = math.inf

    for iteration in range(1, max_iterations + 1):
        sin_lam, cos_lam = math.sin(lam), math.cos(lam)
        sin_sigma = math.sqrt(
            (cos_u2 * sin_lam) ** 2 + (cos_u1 * sin_u2 - sin_u1 * cos_u2 * cos_lam) ** 2
        )
        if sin_sigma == 0:
            # Coincident points
            return 0.0

        cos_sigma = sin_u1 * sin_u2 + cos_u1 * cos_u2 * cos_lam
        sigma = math.atan(sin_sigma / cos_sigma) if cos_sigma else math.pi / 2
        sin_alpha = (cos_u1 * cos_u2 * sin_lam) / sin_sigma
        cos_sq_alpha = 1 - sin_alpha ** 2
        if cos_sq_alpha:
            cos_2sigma_m = cos_sigma - (2 * sin_u1 * sin_u2) / cos_sq_alpha
        else:
            # Both points on the equator
            cos_2sigma_m = 0.0
        c = (FLATTENING / 16) * cos_sq_alpha * (4 + FLATTENING * (4 - 3 * cos_sq_alpha))

        lam_prev = lam
        lam = lon + (1 - c) * FLATTENING * sin_alpha * (
            sigma + c * sin_sigma * (cos_2sigma_m + c * cos_sigma * (2 * cos_2sigma_m ** 2 - 1))
        )
        delta = abs(lam_prev - lam)
        if delta <= tolerance:
            logger.debug("Vincenty converged after %d iterations", iteration)
            break
    else:
        raise VincentyConvergenceError(max_iterations, delta)

    u_sq = cos_sq_alpha * ((radius ** 2 - rpol ** 2) / rpol ** 2)
    big_a = 1 + (u_sq / 16384) * (4096 + u_sq * (-768 + u_sq * (320 - 175 * u_sq)))
    big_b = (u_sq / 1024) * (256 + u_sq * (-128 + u_sq * (74 - 47 * u_sq)))
    delta_sigma = big_b * sin_sigma * (
        cos_2sigma_m + 0.25 * big_b * (cos_sigma * (-1 + 2 * cos_2sigma_m ** 2))
    )

    return rpol * big_a * (sigma - delta_sigma)
