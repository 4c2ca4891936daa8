"""
Core module for perpendicular snapping.

This module contains pure functions with no map or UI dependencies.
It can be used standalone for testing or wired into any drawing tool.
"""

from .models import (
    Coordinate,
    Quadrant,
    QuadrantRule,
    QUADRANT_RULES,
    SnapOptions,
)

from .geometry import (
    GeodesicEngine,
    get_geodesic,
    geodesic_inverse,
    geodesic_direct,
    normalize_azimuth,
    estimate_fallback_path,
    resolve_perpendicular_azimuth,
    resolve_perpendicular_destination,
)

from .projection import (
    to_geodetic_convention,
    from_geodetic_convention,
    to_geodetic_path,
    from_geodetic_path,
)

from .snapping import SnapResult, snap_perpendicular

__all__ = [
    # Models
    "Coordinate",
    "Quadrant",
    "QuadrantRule",
    "QUADRANT_RULES",
    "SnapOptions",

    # Geodesic engine
    "GeodesicEngine",
    "get_geodesic",
    "geodesic_inverse",
    "geodesic_direct",
    "normalize_azimuth",

    # Resolvers
    "estimate_fallback_path",
    "resolve_perpendicular_azimuth",
    "resolve_perpendicular_destination",

    # Projection
    "to_geodetic_convention",
    "from_geodetic_convention",
    "to_geodetic_path",
    "from_geodetic_path",

    # Snapping
    "SnapResult",
    "snap_perpendicular",
]
