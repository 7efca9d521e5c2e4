"""Orientation of three points."""

from planegeom.primitives import Point


def orientation(pt0: Point, pt1: Point, pt2: Point, precision: float) -> int:
    """Orientation of the vectors (pt1 - pt0) and (pt2 - pt0).

    Returns 1 for a positive (counter-clockwise) turn, -1 for a negative
    one and 0 when the points are collinear within the precision.
    """
    a = pt1 - pt0
    b = pt2 - pt0
    sa = a.x * b.y - b.x * a.y

    if sa > precision:
        return 1
    if sa < -precision:
        return -1
    return 0