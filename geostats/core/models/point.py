"""
Geographic and planar point types.

Conventions:
- Axis order: (x, y) == (longitude, latitude), the GeoJSON order
- Units: Decimal degrees for geographic points
- Planar points reuse the same type; range checks are opt-in via ``validate``
"""

from dataclasses import dataclass
from typing import Any, Dict, Sequence, Tuple, Union

import numpy as np


@dataclass(frozen=True)
class GeoPoint:
    """
    A (longitude, latitude) pair in decimal degrees.

    Attributes:
        lon: Longitude in degrees, expected in [-180, 180]
        lat: Latitude in degrees, expected in [-90, 90]
    """

    lon: float
    lat: float

    def __post_init__(self):
        """Normalize coordinates to float."""
        object.__setattr__(self, "lon", float(self.lon))
        object.__setattr__(self, "lat", float(self.lat))

    def validate(self) -> "GeoPoint":
        """
        Check the point lies on the globe.

        Returns:
            The point itself, so calls can be chained

        Raises:
            ValueError: If longitude or latitude is out of range or not finite
        """
        if not (np.isfinite(self.lon) and np.isfinite(self.lat)):
            raise ValueError(f"Coordinates must be finite, got ({self.lon}, {self.lat})")
        if not -180.0 <= self.lon <= 180.0:
            raise ValueError(f"Longitude must be in [-180, 180], got {self.lon}")
        if not -90.0 <= self.lat <= 90.0:
            raise ValueError(f"Latitude must be in [-90, 90], got {self.lat}")
        return self

    def as_tuple(self) -> Tuple[float, float]:
        """Return the point as a ``(lon, lat)`` tuple."""
        return (self.lon, self.lat)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize point to dictionary.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return {"lon": self.lon, "lat": self.lat}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GeoPoint":
        """
        Create a GeoPoint from a dictionary.

        Accepts ``lon``/``lng``/``long``/``longitude`` and ``lat``/``latitude``.

        Raises:
            KeyError: If longitude or latitude is missing
        """
        for key in ("lon", "lng", "long", "longitude"):
            if key in data:
                lon = data[key]
                break
        else:
            raise KeyError("longitude")
        lat = data["lat"] if "lat" in data else data["latitude"]
        return cls(lon=float(lon), lat=float(lat))

    def __repr__(self) -> str:
        """Return string representation of the point."""
        return f"GeoPoint(lon={self.lon:.6f}, lat={self.lat:.6f})"


PointLike = Union[GeoPoint, Sequence[float], np.ndarray]


def coerce_point(value: PointLike) -> Tuple[float, float]:
    """
    Convert a point-like value to an ``(x, y)`` float tuple.

    Args:
        value: GeoPoint, 2-sequence or numpy array of shape (2,)

    Returns:
        (x, y) tuple

    Raises:
        ValueError: If the value does not hold exactly two coordinates
    """
    if isinstance(value, GeoPoint):
        return value.as_tuple()
    arr = np.asarray(value, dtype=float).ravel()
    if arr.shape != (2,):
        raise ValueError(f"A point needs exactly two coordinates, got {arr.size}")
    return (float(arr[0]), float(arr[1]))


@dataclass(frozen=True)
class BoundingBox:
    """
    Axis-aligned geographic box given by its bottom-left and top-right corners.

    When ``bottom_left.lon > top_right.lon`` the box crosses the antimeridian.

    Attributes:
        bottom_left: South-west corner
        top_right: North-east corner
    """

    bottom_left: GeoPoint
    top_right: GeoPoint

    def __post_init__(self):
        """Validate box corners after initialization."""
        if not isinstance(self.bottom_left, GeoPoint):
            object.__setattr__(self, "bottom_left", GeoPoint(*coerce_point(self.bottom_left)))
        if not isinstance(self.top_right, GeoPoint):
            object.__setattr__(self, "top_right", GeoPoint(*coerce_point(self.top_right)))
        if self.bottom_left.lat > self.top_right.lat:
            raise ValueError(
                f"bottom_left latitude {self.bottom_left.lat} is north of "
                f"top_right latitude {self.top_right.lat}"
            )

    @property
    def crosses_antimeridian(self) -> bool:
        """True when the longitude band wraps around +/-180 degrees."""
        return self.top_right.lon < self.bottom_left.lon

    def contains(self, point: PointLike) -> bool:
        """Test whether ``point`` lies inside the box (edges inclusive)."""
        from ..geometry.bbox import point_in_bounding_box

        return point_in_bounding_box(self.bottom_left, self.top_right, point)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the box to a dictionary."""
        return {
            "bottom_left": self.bottom_left.to_dict(),
            "top_right": self.top_right.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BoundingBox":
        """Create a BoundingBox from a dictionary made by ``to_dict``."""
        return cls(
            bottom_left=GeoPoint.from_dict(data["bottom_left"]),
            top_right=GeoPoint.from_dict(data["top_right"]),
        )
