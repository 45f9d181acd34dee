"""Tests for Settings environment mapping."""

import pytest
from pydantic import ValidationError

from geocoord.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("GEOCOORD_EARTH_RADIUS_M", raising=False)
    s = Settings(_env_file=None)
    assert s.earth_radius_m == 637100.0
    assert s.vincenty_max_iterations == 1000
    assert s.vincenty_tolerance == 1e-12


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("GEOCOORD_EARTH_RADIUS_M", "6371000")
    monkeypatch.setenv("GEOCOORD_VINCENTY_MAX_ITERATIONS", "200")
    s = Settings(_env_file=None)
    assert s.earth_radius_m == 6371000.0
    assert s.vincenty_max_iterations == 200


def test_non_positive_radius_rejected(monkeypatch):
    monkeypatch.setenv("GEOCOORD_EARTH_RADIUS_M", "0")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
