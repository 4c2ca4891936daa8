"""Projected <-> geodetic coordinate adapters."""

from .adapters import (
    to_geodetic_convention,
    from_geodetic_convention,
    to_geodetic_path,
    from_geodetic_path,
)

__all__ = [
    "to_geodetic_convention",
    "from_geodetic_convention",
    "to_geodetic_path",
    "from_geodetic_path",
]
