"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class DistanceFormula(str, Enum):
    HAVERSINE = "haversine"
    SPHERICAL_LAW_OF_COSINES = "spherical_law_of_cosines"
    VINCENTY = "vincenty"
