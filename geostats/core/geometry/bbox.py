"""Bounding-box containment that understands the antimeridian."""

from __future__ import annotations

from ..models.point import PointLike, coerce_point


def point_in_bounding_box(bottom_left: PointLike, top_right: PointLike, point: PointLike) -> bool:
    """
    Test whether a (lon, lat) point lies inside a box. Edges are inclusive.

    If ``top_right`` lies west of ``bottom_left`` the box is taken to cross
    the antimeridian, so the longitude band wraps through +/-180 degrees.

    Args:
        bottom_left: South-west corner (lon, lat)
        top_right: North-east corner (lon, lat)
        point: Point to test (lon, lat)

    Returns:
        True if the point is inside the box
    """
    bl_lon, bl_lat = coerce_point(bottom_left)
    tr_lon, tr_lat = coerce_point(top_right)
    lon, lat = coerce_point(point)

    if tr_lon < bl_lon:
        lon_in_range = lon >= bl_lon or lon <= tr_lon
    else:
        lon_in_range = bl_lon <= lon <= tr_lon

    return bl_lat <= lat <= tr_lat and lon_in_range
