"""
Snapping options.

This module defines the configuration for perpendicular snapping: the
coordinate reference systems on both sides of the reprojection boundary and
the reference ellipsoid used by the geodesic engine.
"""

from dataclasses import dataclass
from typing import Any, Dict


WGS84_SEMI_MAJOR_AXIS = 6378137.0  # meters
WGS84_FLATTENING = 1 / 298.257223563


@dataclass
class SnapOptions:
    """
    Configuration options for perpendicular snapping.

    Attributes:
        projected_crs: CRS of the host map's working coordinates (default: EPSG:3857)
        geographic_crs: CRS expected by the geodesic engine (default: EPSG:4326)
        semi_major_axis: Ellipsoid equatorial radius in meters (default: WGS84)
        flattening: Ellipsoid flattening (default: WGS84)
    """

    projected_crs: str = "EPSG:3857"
    geographic_crs: str = "EPSG:4326"
    semi_major_axis: float = WGS84_SEMI_MAJOR_AXIS
    flattening: float = WGS84_FLATTENING

    def __post_init__(self):
        """Validate options after initialization."""
        if not self.projected_crs:
            raise ValueError("projected_crs cannot be empty")

        if not self.geographic_crs:
            raise ValueError("geographic_crs cannot be empty")

        self.semi_major_axis = float(self.semi_major_axis)
        self.flattening = float(self.flattening)

        if not self.semi_major_axis > 0:
            raise ValueError("semi_major_axis must be positive")

        if not 0 <= self.flattening < 1:
            raise ValueError("flattening must be in [0, 1)")

    @property
    def is_wgs84(self) -> bool:
        """Check if the configured ellipsoid is WGS84."""
        return (
            self.semi_major_axis == WGS84_SEMI_MAJOR_AXIS
            and self.flattening == WGS84_FLATTENING
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize options to dictionary."""
        return {
            "projected_crs": self.projected_crs,
            "geographic_crs": self.geographic_crs,
            "semi_major_axis": self.semi_major_axis,
            "flattening": self.flattening,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SnapOptions":
        """
        Create options from a dictionary.

        Missing keys fall back to the defaults.
        """
        defaults = cls()
        return cls(
            projected_crs=data.get("projected_crs", defaults.projected_crs),
            geographic_crs=data.get("geographic_crs", defaults.geographic_crs),
            semi_major_axis=data.get("semi_major_axis", defaults.semi_major_axis),
            flattening=data.get("flattening", defaults.flattening),
        )
