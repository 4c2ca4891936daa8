"""
Data models for perpendicular snapping.

This module provides the core data structures:
- Coordinate: Plain (float, float) pair, convention tracked by the caller
- Quadrant: Direction class of a drawn segment plus its resolver rule
- SnapOptions: CRS and ellipsoid configuration
"""

from .coordinate import Coordinate, as_coordinate
from .quadrant import Quadrant, QuadrantRule, QUADRANT_RULES
from .options import SnapOptions, WGS84_SEMI_MAJOR_AXIS, WGS84_FLATTENING

__all__ = [
    # Coordinate
    "Coordinate",
    "as_coordinate",

    # Quadrant
    "Quadrant",
    "QuadrantRule",
    "QUADRANT_RULES",

    # Options
    "SnapOptions",
    "WGS84_SEMI_MAJOR_AXIS",
    "WGS84_FLATTENING",
]
