"""Snapped point on the perpendicular, at the cursor's distance."""

from __future__ import annotations

from typing import Optional, Sequence

from ..models.coordinate import Coordinate
from .azimuth import resolve_perpendicular_azimuth
from .geodesic import GeodesicEngine, get_geodesic, geodesic_direct, geodesic_inverse


def resolve_perpendicular_destination(
    last_point: Sequence[float],
    penultimate_point: Sequence[float],
    current_point: Sequence[float],
    geod: Optional[GeodesicEngine] = None,
) -> Coordinate:
    """
    Point on the perpendicular through ``last_point``.

    The cursor's geodesic distance from ``last_point`` is kept; only its
    direction is snapped. All points are (latitude, longitude) degrees.

    Returns:
        (latitude, longitude) of the snapped point
    """
    if geod is None:
        geod = get_geodesic()

    _, distance = geodesic_inverse(geod, last_point, current_point)
    azimuth = resolve_perpendicular_azimuth(
        last_point, penultimate_point, current_point, geod=geod
    )
    return geodesic_direct(geod, last_point, azimuth, distance)
