"""
Quadrant classification of a drawn segment.

Points are in the geodetic convention, index 0 latitude and index 1
longitude. A segment is classified by comparing its end point (the last
placed point) with its start point (the penultimate point), one axis at a
time:

    NE: lat greater, lon greater      N: lon equal, lat greater or equal
    NW: lat greater, lon smaller      S: lon equal, lat smaller
    SE: lat smaller, lon greater      E: lat equal, lon greater
    SW: lat smaller, lon smaller      W: lat equal, lon smaller

Diagonal quadrants resolve the perpendicular as ``drawn azimuth +/- 90``.
Which sign applies depends on the side of the segment the cursor is on, and
on whether the back azimuth has wrapped across +/-180 degrees. The bearing
threshold of each quadrant marks that wrap. Past the threshold latitude no
longer separates the two sides reliably, so longitude decides instead.

Axis-aligned quadrants skip the bearing entirely and snap to a fixed
azimuth.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Sequence


@dataclass(frozen=True)
class QuadrantRule:
    """
    Sign table for one diagonal quadrant.

    Attributes:
        threshold: Drawn azimuth limit in degrees
        above: If True the primary rule applies when azimuth > threshold,
            otherwise when azimuth < threshold
        lat_greater: Offset when the cursor latitude is greater than the last point's
        lat_smaller: Offset when the cursor latitude is smaller
        lon_greater: Offset when the cursor longitude is greater (secondary rule)
        lon_smaller: Offset when the cursor longitude is smaller (secondary rule)
    """

    threshold: float
    above: bool
    lat_greater: float
    lat_smaller: float
    lon_greater: float
    lon_smaller: float

    def primary_applies(self, drawn_azimuth: float) -> bool:
        """Check whether the latitude rule is usable for this azimuth."""
        if self.above:
            return drawn_azimuth > self.threshold
        return drawn_azimuth < self.threshold

    def offset(
        self,
        drawn_azimuth: float,
        last_point: Sequence[float],
        current_point: Sequence[float],
    ) -> Optional[float]:
        """
        Pick the +/-90 offset for the cursor position.

        Returns:
            The offset in degrees, or None when neither axis tells the
            cursor side apart.
        """
        if self.primary_applies(drawn_azimuth):
            if current_point[0] > last_point[0]:
                return self.lat_greater
            if current_point[0] < last_point[0]:
                return self.lat_smaller

        if current_point[1] > last_point[1]:
            return self.lon_greater
        if current_point[1] < last_point[1]:
            return self.lon_smaller

        return None


class Quadrant(Enum):
    """Direction class of the segment penultimate point -> last point."""
    NE = "ne"
    NW = "nw"
    SE = "se"
    SW = "sw"
    N = "n"
    S = "s"
    E = "e"
    W = "w"

    @classmethod
    def classify(
        cls,
        last_point: Sequence[float],
        penultimate_point: Sequence[float],
    ) -> Optional["Quadrant"]:
        """
        Classify the last point relative to the penultimate point.

        Coincident points classify as N. Returns None only when no
        comparison holds, which happens with NaN coordinates.
        """
        last_lat, last_lon = last_point[0], last_point[1]
        prev_lat, prev_lon = penultimate_point[0], penultimate_point[1]

        if last_lat > prev_lat and last_lon > prev_lon:
            return cls.NE
        if last_lat > prev_lat and last_lon < prev_lon:
            return cls.NW
        if last_lat < prev_lat and last_lon > prev_lon:
            return cls.SE
        if last_lat < prev_lat and last_lon < prev_lon:
            return cls.SW

        if last_lon == prev_lon:
            if last_lat >= prev_lat:
                return cls.N
            if last_lat < prev_lat:
                return cls.S
        if last_lat == prev_lat:
            if last_lon > prev_lon:
                return cls.E
            if last_lon < prev_lon:
                return cls.W

        return None

    @property
    def is_axis_aligned(self) -> bool:
        """True for N, S, E and W."""
        return self in (Quadrant.N, Quadrant.S, Quadrant.E, Quadrant.W)

    @property
    def rule(self) -> Optional[QuadrantRule]:
        """Sign table for diagonal quadrants, None for axis-aligned ones."""
        return QUADRANT_RULES.get(self)

    def axis_azimuth(
        self,
        last_point: Sequence[float],
        current_point: Sequence[float],
    ) -> float:
        """
        Fixed azimuth for an axis-aligned segment.

        N/S segments snap to 90 when the cursor longitude is greater, else -90.
        E/W segments snap to 0 when the cursor latitude is greater, else 180.

        Raises:
            ValueError: If called on a diagonal quadrant
        """
        if self in (Quadrant.N, Quadrant.S):
            return 90.0 if current_point[1] > last_point[1] else -90.0
        if self in (Quadrant.E, Quadrant.W):
            return 0.0 if current_point[0] > last_point[0] else 180.0
        raise ValueError(f"{self.name} is not an axis-aligned quadrant")


QUADRANT_RULES: Dict[Quadrant, QuadrantRule] = {
    Quadrant.NE: QuadrantRule(
        threshold=-130.0, above=True,
        lat_greater=90.0, lat_smaller=-90.0,
        lon_greater=-90.0, lon_smaller=90.0,
    ),
    Quadrant.NW: QuadrantRule(
        threshold=130.0, above=False,
        lat_greater=-90.0, lat_smaller=90.0,
        lon_greater=-90.0, lon_smaller=90.0,
    ),
    Quadrant.SE: QuadrantRule(
        threshold=-50.0, above=False,
        lat_greater=90.0, lat_smaller=-90.0,
        lon_greater=90.0, lon_smaller=-90.0,
    ),
    Quadrant.SW: QuadrantRule(
        threshold=50.0, above=True,
        lat_greater=-90.0, lat_smaller=90.0,
        lon_greater=90.0, lon_smaller=-90.0,
    ),
}
