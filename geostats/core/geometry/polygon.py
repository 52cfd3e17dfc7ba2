"""Point-in-polygon tests (QGIS-free).

Polygons are sequences of (x, y) vertices. The ring does not need to repeat
its first vertex at the end; closure is implied.

Two algorithms are provided:
- Winding number (default): counts how many times the boundary winds around
  the point. Handles concave and self-intersecting rings.
- Ray casting: even-odd rule on a horizontal ray. Kept for comparison; it
  disagrees with the winding number inside self-overlapping regions.

Boundary convention (winding number): edges are half-open in y, so a point on
a left or bottom edge of a ring counts as inside and a point on a right or
top edge counts as outside. Adjacent polygons sharing an edge therefore never
both claim the point.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from ..models.point import PointLike, coerce_point


def _ring(polygon: Sequence[PointLike]) -> List[Tuple[float, float]]:
    return [coerce_point(v) for v in polygon]


def is_left(p0: PointLike, p1: PointLike, p2: PointLike) -> float:
    """Position of ``p2`` relative to the infinite line through ``p0`` and ``p1``.

    Returns:
        > 0 if p2 is left of the line, < 0 if right, 0 if on the line
    """
    x0, y0 = coerce_point(p0)
    x1, y1 = coerce_point(p1)
    x2, y2 = coerce_point(p2)
    return (x1 - x0) * (y2 - y0) - (x2 - x0) * (y1 - y0)


def point_in_polygon_winding_number(point: PointLike, polygon: Sequence[PointLike]) -> bool:
    """
    Winding-number point-in-polygon test.

    Args:
        point: (x, y) to test
        polygon: ring vertices, implicitly closed

    Returns:
        True if the winding number is non-zero. An empty polygon contains
        nothing.
    """
    ring = _ring(polygon)
    if not ring:
        return False

    px, py = coerce_point(point)
    ring.append(ring[0])

    wn = 0
    for i in range(len(ring) - 1):
        (x0, y0), (x1, y1) = ring[i], ring[i + 1]
        if y0 <= py:
            # upward crossing
            if y1 > py and is_left((x0, y0), (x1, y1), (px, py)) > 0:
                wn += 1
        elif y1 <= py:
            # downward crossing
            if is_left((x0, y0), (x1, y1), (px, py)) < 0:
                wn -= 1

    return wn != 0


def point_in_polygon_ray_cast(point: PointLike, polygon: Sequence[PointLike]) -> bool:
    """
    Even-odd (ray casting) point-in-polygon test.

    A horizontal ray is cast from the point towards +x; each edge it crosses
    toggles the inside flag.
    """
    ring = _ring(polygon)
    x, y = coerce_point(point)

    inside = False
    j = len(ring) - 1
    for i in range(len(ring)):
        xi, yi = ring[i]
        xj, yj = ring[j]
        if (yi > y) != (yj > y) and x < (xj - xi) * (y - yi) / (yj - yi) + xi:
            inside = not inside
        j = i
    return inside


point_in_polygon = point_in_polygon_winding_number
