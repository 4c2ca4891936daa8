"""
Perpendicular Snap - geodesic right-angle snapping for line sketches

Computes where a new sketch segment should end so that it meets the
previously drawn segment at a right angle, using ellipsoidal (geodesic)
math rather than planar geometry.

Conventions:
- Azimuth: Degrees, North = 0, clockwise positive
- Distance: Meters on the reference ellipsoid
- Projected points: (x, y) in the host map CRS (EPSG:3857 by default)
- Geodetic points: (latitude, longitude) in degrees (EPSG:4326 by default)
- Points carry no convention tag; callers track which one is in effect
"""

__version__ = "1.0.0"
__author__ = "Perpendicular Snap"

from .core.models import Quadrant, QuadrantRule, QUADRANT_RULES, SnapOptions
from .core.geometry import (
    estimate_fallback_path,
    resolve_perpendicular_azimuth,
    resolve_perpendicular_destination,
)
from .core.projection import to_geodetic_convention, from_geodetic_convention
from .core.snapping import SnapResult, snap_perpendicular

__all__ = [
    # Version
    "__version__",

    # Models
    "Quadrant",
    "QuadrantRule",
    "QUADRANT_RULES",
    "SnapOptions",

    # Geometry
    "estimate_fallback_path",
    "resolve_perpendicular_azimuth",
    "resolve_perpendicular_destination",

    # Projection
    "to_geodetic_convention",
    "from_geodetic_convention",

    # Snapping
    "SnapResult",
    "snap_perpendicular",
]
