"""Pytest configuration and shared fixtures."""

import pytest

from geocoord.domain.value_objects.coordinate import Coordinate


@pytest.fixture
def start():
    return Coordinate(1, 1)


@pytest.fixture
def end():
    return Coordinate(5, 5)


@pytest.fixture
def almaty():
    return Coordinate(latitude=43.238949, longitude=76.945465)


@pytest.fixture
def astana():
    return Coordinate(latitude=51.128207, longitude=71.430411)
