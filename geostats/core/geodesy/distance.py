"""geostats.core.geodesy.distance

Great-circle distances on a spherical Earth.

Conventions:
  - Arguments are (lon, lat) in decimal degrees, GeoJSON order
  - The result is in the unit of ``earth_radius`` (meters by default)

Both formulas treat the Earth as a sphere. Haversine is well conditioned for
short distances; the Vincenty (sphere) form uses ``atan2`` and stays accurate
up to antipodal points.
"""

from __future__ import annotations

import math
from typing import Optional

from ..models.ellipsoid import WGS84_MEAN_RADIUS
from ..models.options import DistanceMethod, DistanceOptions
from ..models.point import PointLike, coerce_point
from .angles import to_radians


def haversine_distance(
    lon1: float,
    lat1: float,
    lon2: float,
    lat2: float,
    earth_radius: float = WGS84_MEAN_RADIUS,
) -> float:
    """Great-circle distance by the haversine formula.

    Uses hav(theta) = (1 - cos(dlat)) / 2 + cos(lat1) cos(lat2) (1 - cos(dlon)) / 2
    and d = 2 R asin(sqrt(hav)).

    Args:
        lon1, lat1: first point (degrees)
        lon2, lat2: second point (degrees)
        earth_radius: sphere radius; the result uses the same unit

    Returns:
        distance
    """
    lon1 = to_radians(lon1)
    lat1 = to_radians(lat1)
    lon2 = to_radians(lon2)
    lat2 = to_radians(lat2)

    diam = 2.0 * earth_radius
    d_lon = lon2 - lon1
    d_lat = lat2 - lat1

    a = ((1.0 - math.cos(d_lat)) + (1.0 - math.cos(d_lon)) * math.cos(lat1) * math.cos(lat2)) / 2.0
    # rounding can leave `a` just outside [0, 1] near antipodal points
    a = min(max(a, 0.0), 1.0)
    return diam * math.asin(math.sqrt(a))


def vincenty_distance(
    lon1: float,
    lat1: float,
    lon2: float,
    lat2: float,
    earth_radius: float = WGS84_MEAN_RADIUS,
) -> float:
    """Great-circle distance by the Vincenty formula for a sphere.

    The central angle is ``atan2(num, den)`` with
      num = sqrt((cos(lat2) sin(dlon))^2 + (cos(lat1) sin(lat2) - sin(lat1) cos(lat2) cos(dlon))^2)
      den = sin(lat1) sin(lat2) + cos(lat1) cos(lat2) cos(dlon)

    Args:
        lon1, lat1: first point (degrees)
        lon2, lat2: second point (degrees)
        earth_radius: sphere radius; the result uses the same unit

    Returns:
        distance
    """
    lon1 = to_radians(lon1)
    lat1 = to_radians(lat1)
    lon2 = to_radians(lon2)
    lat2 = to_radians(lat2)

    d_lon = abs(lon1 - lon2)

    a = (math.cos(lat2) * math.sin(d_lon)) ** 2
    b = math.cos(lat1) * math.sin(lat2)
    c = math.sin(lat1) * math.cos(lat2) * math.cos(d_lon)
    numerator = math.sqrt(a + (b - c) ** 2)

    denominator = math.sin(lat1) * math.sin(lat2) + math.cos(lat1) * math.cos(lat2) * math.cos(d_lon)

    return earth_radius * math.atan2(numerator, denominator)


def vincenty_distance_km(
    lon1: float,
    lat1: float,
    lon2: float,
    lat2: float,
    earth_radius: float = WGS84_MEAN_RADIUS,
) -> float:
    """Vincenty distance in kilometers for a radius given in meters."""
    return vincenty_distance(lon1, lat1, lon2, lat2, earth_radius / 1000.0)


def distance(a: PointLike, b: PointLike, options: Optional[DistanceOptions] = None) -> float:
    """Great-circle distance between two (lon, lat) points.

    Args:
        a: first point (GeoPoint or (lon, lat))
        b: second point
        options: method and unit; defaults to haversine in meters

    Returns:
        distance in the unit selected by ``options``
    """
    if options is None:
        options = DistanceOptions()
    lon1, lat1 = coerce_point(a)
    lon2, lat2 = coerce_point(b)
    if options.method is DistanceMethod.VINCENTY:
        return vincenty_distance(lon1, lat1, lon2, lat2, options.earth_radius)
    return haversine_distance(lon1, lat1, lon2, lat2, options.earth_radius)
