"""perpendicular_snap.core.geometry.geodesic

Thin boundary around the geodesic engine.

Conventions:
  - Points: (latitude, longitude) in degrees
  - Azimuth: degrees, North = 0, clockwise positive
  - Distance: meters on the engine's ellipsoid

The engine is anything shaped like ``geographiclib.geodesic.Geodesic``:
``Inverse`` returns a mapping with ``azi1`` and ``s12``, ``Direct`` returns a
mapping with ``lat2`` and ``lon2``. Engine failures propagate unchanged.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Mapping, Optional, Protocol, Sequence, Tuple

from geographiclib.geodesic import Geodesic

from ..models.coordinate import Coordinate
from ..models.options import SnapOptions


logger = logging.getLogger(__name__)


class GeodesicEngine(Protocol):
    """Inverse and direct geodesic problems on one fixed ellipsoid."""

    def Inverse(self, lat1: float, lon1: float, lat2: float, lon2: float) -> Mapping[str, Any]:
        ...

    def Direct(self, lat1: float, lon1: float, azi1: float, s12: float) -> Mapping[str, Any]:
        ...


@lru_cache(maxsize=8)
def _build_geodesic(a: float, f: float) -> Geodesic:
    logger.debug("Building geodesic engine for a=%s f=%s", a, f)
    return Geodesic(a, f)


def get_geodesic(options: Optional[SnapOptions] = None) -> GeodesicEngine:
    """Return the engine for the configured ellipsoid.

    WGS84 (the default) reuses ``Geodesic.WGS84``; other ellipsoids are
    built once and cached.
    """
    if options is None or options.is_wgs84:
        return Geodesic.WGS84
    return _build_geodesic(options.semi_major_axis, options.flattening)


def geodesic_inverse(
    geod: GeodesicEngine,
    p1: Sequence[float],
    p2: Sequence[float],
) -> Tuple[float, float]:
    """Forward azimuth at ``p1`` and distance from ``p1`` to ``p2``."""
    r = geod.Inverse(p1[0], p1[1], p2[0], p2[1])
    return r["azi1"], r["s12"]


def geodesic_direct(
    geod: GeodesicEngine,
    p: Sequence[float],
    azimuth: float,
    distance: float,
) -> Coordinate:
    """Point reached from ``p`` after ``distance`` meters along ``azimuth``.

    ``azimuth`` may lie outside (-180, 180]; the engine normalizes it.
    """
    r = geod.Direct(p[0], p[1], azimuth, distance)
    return (r["lat2"], r["lon2"])


def normalize_azimuth(azimuth: float) -> float:
    """Normalize azimuth to (-180, 180]."""
    a = (azimuth + 180.0) % 360.0 - 180.0
    # Force +180 instead of -180 for deterministic behavior.
    if a <= -180.0:
        a += 360.0
    return a
