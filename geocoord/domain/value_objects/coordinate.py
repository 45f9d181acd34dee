"""Coordinate value object — immutable latitude / longitude / altitude.

NaN in any field means "unset". ``None`` is accepted wherever NaN is and is
stored as NaN, so ``Coordinate(latitude=None, longitude=None)`` is unknown.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from geocoord.domain.exceptions import CoordinateOutOfRangeError
from geocoord.domain.policies import distance as distance_policy
from geocoord.domain.value_objects.enums import DistanceFormula

LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)
# Dead Sea shore to the summit of Everest, in meters
ALTITUDE_RANGE = (-153.0, 8850.0)
COURSE_RANGE = (0.0, 360.0)


@dataclass(frozen=True, eq=False)
class Coordinate:
    latitude: float = math.nan
    longitude: float = math.nan
    altitude: float = math.nan
    horizontal_accuracy: float = math.nan
    vertical_accuracy: float = math.nan
    speed: float = math.nan
    course: float = math.nan

    def __post_init__(self) -> None:
        for name in (
            "latitude",
            "longitude",
            "altitude",
            "horizontal_accuracy",
            "vertical_accuracy",
            "speed",
            "course",
        ):
            value = getattr(self, name)
            object.__setattr__(self, name, math.nan if value is None else float(value))

        _check_range("latitude", self.latitude, *LATITUDE_RANGE)
        _check_range("longitude", self.longitude, *LONGITUDE_RANGE)
        _check_range("altitude", self.altitude, *ALTITUDE_RANGE)
        _check_range("horizontal_accuracy", self.horizontal_accuracy, 0.0)
        _check_range("vertical_accuracy", self.vertical_accuracy, 0.0)
        _check_range("speed", self.speed, 0.0)
        _check_range("course", self.course, *COURSE_RANGE)

    def has_position(self) -> bool:
        """True when both latitude and longitude are set."""
        return not math.isnan(self.latitude) and not math.isnan(self.longitude)

    def has_3d_position(self) -> bool:
        """True when latitude, longitude and altitude are all set."""
        return self.has_position() and not math.isnan(self.altitude)

    @property
    def is_unknown(self) -> bool:
        return self == UNKNOWN

    def distance_to(
        self,
        other: Coordinate,
        formula: DistanceFormula = DistanceFormula.HAVERSINE,
    ) -> float:
        """Distance in meters from this coordinate to ``other``.

        Raises:
            UnknownPositionError: if either coordinate lacks latitude or longitude.
        """
        return distance_policy.distance(self, other, formula)

    def __eq__(self, other: object) -> bool:
        """2D equality: altitude and motion fields are ignored, NaN equals NaN."""
        if not isinstance(other, Coordinate):
            return NotImplemented
        return _same(self.latitude, other.latitude) and _same(self.longitude, other.longitude)

    def __hash__(self) -> int:
        return hash((_hash_key(self.latitude), _hash_key(self.longitude)))

    def __str__(self) -> str:
        if self == UNKNOWN:
            return "Unknown"
        return (
            f"{_format_fixed(self.latitude, 6)}, "
            f"{_format_fixed(self.longitude, 6)}, "
            f"{_format_fixed(self.altitude, 2)}"
        )


def _check_range(name: str, value: float, lower: float, upper: float | None = None) -> None:
    # NaN fails both comparisons, so unset fields always pass
    if value < lower or (upper is not None and value > upper):
        raise CoordinateOutOfRangeError(name, value, lower, upper)


def _same(x: float, y: float) -> bool:
    return x == y or (math.isnan(x) and math.isnan(y))


def _hash_key(value: float) -> float | None:
    return None if math.isnan(value) else value


def _format_fixed(value: float, decimals: int) -> str:
    """Format with at least two zero-padded integer digits, e.g. ``-05.10``."""
    if math.isnan(value):
        return "NaN"
    sign = "-" if value < 0 else ""
    return f"{sign}{abs(value):0{decimals + 3}.{decimals}f}"


UNKNOWN = Coordinate()
