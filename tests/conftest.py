"""Shared fixtures: a scripted geodesic engine for deterministic azimuths."""

import pytest


class FakeGeodesic:
    """Engine returning a fixed inverse result and recording direct calls."""

    def __init__(self, azimuth=0.0, distance=0.0):
        self.azimuth = azimuth
        self.distance = distance
        self.inverse_calls = []
        self.direct_calls = []

    def Inverse(self, lat1, lon1, lat2, lon2):
        self.inverse_calls.append((lat1, lon1, lat2, lon2))
        return {"azi1": self.azimuth, "s12": self.distance}

    def Direct(self, lat1, lon1, azi1, s12):
        self.direct_calls.append((lat1, lon1, azi1, s12))
        return {"lat2": lat1 + 1.0, "lon2": lon1 + 2.0}


@pytest.fixture()
def fake_geod():
    """Factory for FakeGeodesic instances."""
    return FakeGeodesic
