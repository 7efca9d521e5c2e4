"""Point-in-polygon test by summation of angles."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Union

from planegeom.common import Rotation
from planegeom.polygon import Polygon
from planegeom.primitives import Point


class PointPosition(Enum):
    """Position of a point relative to a polygon."""

    INSIDE = "inside"
    OUTSIDE = "outside"
    BOUNDARY = "boundary"


def signed_angle(a: Point, b: Point, c: Point, precision: float) -> float:
    """Signed angle in degrees from the vector ab to the vector ac.

    Returns 180 when the three points are collinear with a between b and c,
    or when a coincides with b or c.
    """
    angle_ab = (b - a).polar_angle(precision)
    angle_ac = (c - a).polar_angle(precision)
    if angle_ab == -1.0 or angle_ac == -1.0:
        return 180.0

    diff = angle_ac - angle_ab
    if diff in (180.0, -180.0):
        return 180.0
    if diff < -180.0:
        diff += 360.0
    elif diff > 180.0:
        diff -= 360.0
    return diff


def angle_point_in_polygon(
    point: Point,
    polygon: Union[Polygon, Iterable[Point]],
    precision: float = 1e-9,
) -> PointPosition:
    """Locate a point relative to a polygon by summing the subtended angles."""
    walker = polygon.copy() if isinstance(polygon, Polygon) else Polygon(polygon)

    total = 0.0
    on_boundary = False
    for _ in range(len(walker)):
        edge = walker.get_edge()
        walker.advance(Rotation.CLOCKWISE)
        angle = signed_angle(point, edge.origin, edge.destination, precision)
        if angle == 180.0:
            on_boundary = True
        total += angle

    if on_boundary:
        return PointPosition.BOUNDARY
    return PointPosition.INSIDE if abs(total) > 180.0 else PointPosition.OUTSIDE