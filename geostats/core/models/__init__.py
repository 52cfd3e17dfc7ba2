"""
Value types and configuration for geostats.

This module provides:
- GeoPoint / BoundingBox: geographic coordinate structures
- EARTH_RADII / validate_earth_radius: unit-to-radius table
- Ellipsoid / ELLIPSOIDS and WGS84 constants
- DistanceOptions: configuration for great-circle distances
"""

from .point import GeoPoint, BoundingBox, PointLike, coerce_point
from .units import EARTH_RADII, UnknownUnitError, validate_earth_radius
from .ellipsoid import (
    Ellipsoid,
    ELLIPSOIDS,
    WGS84_MEAN_RADIUS,
    WGS84_RADIUS_MAJOR,
    WGS84_RADIUS_MINOR,
    WGS84_FLATTENING,
    WGS84_ECC_SQUARED,
    WGS84_EQUATORIAL_CIRCUMFERENCE,
    WGS84_RADIUS_FACTOR,
    GOOGLE_MEAN_RADIUS_KM,
    TURFJS_MEAN_RADIUS_KM,
    NASA_MEAN_RADIUS_KM,
)
from .options import DistanceOptions, DistanceMethod

__all__ = [
    # Points
    "GeoPoint",
    "BoundingBox",
    "PointLike",
    "coerce_point",

    # Units
    "EARTH_RADII",
    "UnknownUnitError",
    "validate_earth_radius",

    # Ellipsoids
    "Ellipsoid",
    "ELLIPSOIDS",
    "WGS84_MEAN_RADIUS",
    "WGS84_RADIUS_MAJOR",
    "WGS84_RADIUS_MINOR",
    "WGS84_FLATTENING",
    "WGS84_ECC_SQUARED",
    "WGS84_EQUATORIAL_CIRCUMFERENCE",
    "WGS84_RADIUS_FACTOR",
    "GOOGLE_MEAN_RADIUS_KM",
    "TURFJS_MEAN_RADIUS_KM",
    "NASA_MEAN_RADIUS_KM",

    # Options
    "DistanceOptions",
    "DistanceMethod",
]
