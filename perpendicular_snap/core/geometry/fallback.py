"""Right-angle guess for a sketch with a single anchor (no direction yet)."""

from __future__ import annotations

from typing import Sequence, Tuple

from ..models.coordinate import Coordinate, as_coordinate


def estimate_fallback_path(
    last_point: Sequence[float],
    current_point: Sequence[float],
) -> Tuple[Coordinate, Coordinate]:
    """
    Bend the path from the anchor toward the cursor into an axis-aligned leg.

    The cursor is compared with the anchor on each axis independently:

        x greater, y smaller -> (last.x, current.y)
        x greater, y greater -> (current.x, last.y)
        x smaller, y greater -> (last.x, current.y)
        x smaller, y smaller -> (current.x, last.y)

    When the two points share a coordinate (or a comparison involves NaN)
    no bend is applied and the cursor is returned as-is.

    Args:
        last_point: The only placed point
        current_point: Cursor position, same convention as ``last_point``

    Returns:
        ``(last_point, corner)`` as float tuples
    """
    last = as_coordinate(last_point)
    current = as_coordinate(current_point)
    lx, ly = last
    cx, cy = current

    if cx > lx and cy < ly:
        return last, (lx, cy)
    if cx > lx and cy > ly:
        return last, (cx, ly)
    if cx < lx and cy > ly:
        return last, (lx, cy)
    if cx < lx and cy < ly:
        return last, (cx, ly)

    return last, current
