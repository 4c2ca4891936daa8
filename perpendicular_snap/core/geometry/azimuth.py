"""perpendicular_snap.core.geometry.azimuth

Bearing of the line through the last placed point at a right angle to the
last drawn segment, on the side of the segment where the cursor is.

All three points share one convention; index 0 goes to the engine as
latitude and index 1 as longitude.

The drawn azimuth is measured from the last point back toward the
penultimate point. Every sign in ``QUADRANT_RULES`` assumes that direction.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..models.quadrant import Quadrant
from .geodesic import GeodesicEngine, get_geodesic, geodesic_inverse


logger = logging.getLogger(__name__)


def resolve_perpendicular_azimuth(
    last_point: Sequence[float],
    penultimate_point: Sequence[float],
    current_point: Sequence[float],
    geod: Optional[GeodesicEngine] = None,
) -> float:
    """
    Azimuth of the perpendicular through ``last_point``.

    Diagonal segments return ``drawn azimuth +/- 90`` (possibly outside
    (-180, 180]). Axis-aligned segments return one of 0, 90, 180 or -90.
    If nothing decides the side, the drawn azimuth is returned unchanged.

    Args:
        last_point: Last placed point
        penultimate_point: Point placed before it
        current_point: Cursor position
        geod: Geodesic engine (default: WGS84)

    Returns:
        Azimuth in degrees
    """
    if geod is None:
        geod = get_geodesic()

    drawn_azimuth, _ = geodesic_inverse(geod, last_point, penultimate_point)
    quadrant = Quadrant.classify(last_point, penultimate_point)

    if quadrant is not None:
        if quadrant.is_axis_aligned:
            return quadrant.axis_azimuth(last_point, current_point)

        offset = quadrant.rule.offset(drawn_azimuth, last_point, current_point)
        if offset is not None:
            return drawn_azimuth + offset

    # Not expected for well-formed input.
    logger.debug(
        "No perpendicular side for quadrant %s, keeping drawn azimuth %s",
        quadrant, drawn_azimuth,
    )
    return drawn_azimuth
