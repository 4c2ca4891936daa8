"""
Reprojection between the host map CRS and the geodetic convention.

The host works in projected ``(x, y)`` (easting-like, northing-like). The
geodesic engine wants ``(latitude, longitude)``. Converting therefore means
reprojecting and then swapping the axis order, and the reverse on the way
back.

Transformers are built with ``always_xy=True`` so pyproj always speaks
``(x, y)`` / ``(lon, lat)``; the swap happens here and only here.
pyproj errors (unknown CRS and the like) propagate unchanged.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional, Sequence

import numpy as np
from pyproj import Transformer

from ..models.coordinate import Coordinate
from ..models.options import SnapOptions


logger = logging.getLogger(__name__)


@lru_cache(maxsize=16)
def _transformer(source_crs: str, target_crs: str) -> Transformer:
    logger.debug("Building transformer %s -> %s", source_crs, target_crs)
    return Transformer.from_crs(source_crs, target_crs, always_xy=True)


def _options(options: Optional[SnapOptions]) -> SnapOptions:
    return options if options is not None else SnapOptions()


def to_geodetic_convention(
    point: Sequence[float],
    options: Optional[SnapOptions] = None,
) -> Coordinate:
    """
    Convert a projected ``(x, y)`` point to ``(latitude, longitude)``.

    Args:
        point: Point in ``options.projected_crs``
        options: CRS configuration (default: EPSG:3857 -> EPSG:4326)

    Returns:
        ``(lat, lon)`` in ``options.geographic_crs``
    """
    opts = _options(options)
    lon, lat = _transformer(opts.projected_crs, opts.geographic_crs).transform(
        point[0], point[1]
    )
    return (lat, lon)


def from_geodetic_convention(
    point: Sequence[float],
    options: Optional[SnapOptions] = None,
) -> Coordinate:
    """
    Convert a ``(latitude, longitude)`` point back to projected ``(x, y)``.

    Inverse of :func:`to_geodetic_convention` up to pyproj's round-trip
    tolerance.
    """
    opts = _options(options)
    x, y = _transformer(opts.geographic_crs, opts.projected_crs).transform(
        point[1], point[0]
    )
    return (x, y)


def to_geodetic_path(points, options: Optional[SnapOptions] = None) -> np.ndarray:
    """Vectorized :func:`to_geodetic_convention` for an ``(n, 2)`` array.

    Returns:
        ``(n, 2)`` array of ``(lat, lon)`` rows
    """
    opts = _options(options)
    arr = np.asarray(points, dtype=float).reshape(-1, 2)
    lon, lat = _transformer(opts.projected_crs, opts.geographic_crs).transform(
        arr[:, 0], arr[:, 1]
    )
    return np.column_stack((lat, lon))


def from_geodetic_path(points, options: Optional[SnapOptions] = None) -> np.ndarray:
    """Vectorized :func:`from_geodetic_convention` for an ``(n, 2)`` array.

    Returns:
        ``(n, 2)`` array of projected ``(x, y)`` rows
    """
    opts = _options(options)
    arr = np.asarray(points, dtype=float).reshape(-1, 2)
    x, y = _transformer(opts.geographic_crs, opts.projected_crs).transform(
        arr[:, 1], arr[:, 0]
    )
    return np.column_stack((x, y))
