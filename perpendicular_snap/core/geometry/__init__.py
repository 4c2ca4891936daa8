"""Perpendicular geometry on the ellipsoid (map-free)."""

from .geodesic import (
    GeodesicEngine,
    get_geodesic,
    geodesic_inverse,
    geodesic_direct,
    normalize_azimuth,
)
from .fallback import estimate_fallback_path
from .azimuth import resolve_perpendicular_azimuth
from .destination import resolve_perpendicular_destination

__all__ = [
    "GeodesicEngine",
    "get_geodesic",
    "geodesic_inverse",
    "geodesic_direct",
    "normalize_azimuth",
    "estimate_fallback_path",
    "resolve_perpendicular_azimuth",
    "resolve_perpendicular_destination",
]
