"""Geodesy utilities for geostats (spherical Earth)."""

from .angles import to_radians, to_degrees
from .distance import haversine_distance, vincenty_distance, vincenty_distance_km, distance
from .coords import coords_from

__all__ = [
    "to_radians",
    "to_degrees",
    "haversine_distance",
    "vincenty_distance",
    "vincenty_distance_km",
    "distance",
    "coords_from",
]
