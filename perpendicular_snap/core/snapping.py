"""
Perpendicular snapping for a sketch in progress.

Wires the fallback estimator, the coordinate adapters and the geodesic
resolvers together the way a drawing tool needs them:

- one anchor placed: bend toward the cursor with an axis-aligned leg,
  entirely in projected coordinates
- two or more anchors: reproject the last two anchors and the cursor,
  resolve the perpendicular destination on the ellipsoid and reproject
  the result back

Deciding whether snapping is active at all is left to the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple

from .models.coordinate import Coordinate, as_coordinate
from .models.options import SnapOptions
from .geometry import (
    estimate_fallback_path,
    get_geodesic,
    geodesic_inverse,
    resolve_perpendicular_destination,
)
from .projection import from_geodetic_convention, to_geodetic_convention


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SnapResult:
    """
    Outcome of one snap request.

    Attributes:
        path: Projected points from the last anchor to the snapped end point
        bootstrap: True when only one anchor existed and the fallback bend was used
        azimuth: Geodesic azimuth (degrees) from the last anchor to the end point,
            None for bootstrap results
        distance: Geodesic distance (meters) from the last anchor to the end point,
            None for bootstrap results
    """

    path: Tuple[Coordinate, ...]
    bootstrap: bool
    azimuth: Optional[float] = None
    distance: Optional[float] = None

    @property
    def end_point(self) -> Coordinate:
        """Snapped end point in projected coordinates."""
        return self.path[-1]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize result to dictionary."""
        return {
            "path": [list(p) for p in self.path],
            "bootstrap": self.bootstrap,
            "azimuth": self.azimuth,
            "distance": self.distance,
        }


def snap_perpendicular(
    anchors: Sequence[Sequence[float]],
    current_point: Sequence[float],
    options: Optional[SnapOptions] = None,
) -> SnapResult:
    """
    Snap the cursor so the next segment meets the last one at a right angle.

    Args:
        anchors: Already placed points in ``options.projected_crs``, oldest first
        current_point: Cursor position in the same CRS
        options: CRS and ellipsoid configuration (default: EPSG:3857 on WGS84)

    Returns:
        SnapResult with the projected path

    Raises:
        ValueError: If no anchor has been placed yet
    """
    if len(anchors) == 0:
        raise ValueError("Cannot snap without at least one placed point")

    if options is None:
        options = SnapOptions()

    if len(anchors) == 1:
        logger.debug("Single anchor, using fallback bend")
        return SnapResult(
            path=estimate_fallback_path(anchors[0], current_point),
            bootstrap=True,
        )

    last = to_geodetic_convention(anchors[-1], options)
    penultimate = to_geodetic_convention(anchors[-2], options)
    current = to_geodetic_convention(current_point, options)

    geod = get_geodesic(options)
    destination = resolve_perpendicular_destination(last, penultimate, current, geod=geod)
    azimuth, distance = geodesic_inverse(geod, last, destination)

    logger.debug("Snapped to azimuth %.6f at %.3f m", azimuth, distance)
    return SnapResult(
        path=(as_coordinate(anchors[-1]), from_geodetic_convention(destination, options)),
        bootstrap=False,
        azimuth=azimuth,
        distance=distance,
    )
