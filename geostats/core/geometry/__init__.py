"""Planar geometry utilities for geostats."""

from .bbox import point_in_bounding_box
from .polygon import (
    is_left,
    point_in_polygon,
    point_in_polygon_winding_number,
    point_in_polygon_ray_cast,
)

__all__ = [
    "point_in_bounding_box",
    "is_left",
    "point_in_polygon",
    "point_in_polygon_winding_number",
    "point_in_polygon_ray_cast",
]
