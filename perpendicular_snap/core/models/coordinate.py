"""Plain coordinate pairs.

A coordinate is an ordered ``(float, float)`` tuple. Two conventions are in
use and nothing at runtime tells them apart:

- projected: ``(x, y)`` in the host map CRS
- geodetic: ``(latitude, longitude)`` in degrees
"""

from typing import Sequence, Tuple

Coordinate = Tuple[float, float]


def as_coordinate(point: Sequence[float]) -> Coordinate:
    """Copy any two-item sequence into a float tuple.

    NaN and infinities pass through unchanged.
    """
    return (float(point[0]), float(point[1]))
