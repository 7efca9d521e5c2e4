"""Convex hull by a monotone-chain Graham scan."""

from __future__ import annotations

from typing import Iterable, List

from planegeom.primitives import Point


def cross_product(a: Point, b: Point, c: Point) -> float:
    """Cross product of (b - a) and (c - a); positive for a left turn."""
    return (b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x)


def graham_scan(points: Iterable[Point]) -> List[Point]:
    """Convex hull vertices in counter-clockwise order.

    Collinear points on the hull boundary are dropped.
    """
    pts = sorted(points)
    if len(pts) <= 1:
        return pts

    hull: List[Point] = []
    for p in pts:
        while len(hull) >= 2 and cross_product(hull[-2], hull[-1], p) <= 0:
            hull.pop()
        hull.append(p)

    lower_size = len(hull)
    for p in reversed(pts[:-1]):
        while len(hull) > lower_size and cross_product(hull[-2], hull[-1], p) <= 0:
            hull.pop()
        hull.append(p)

    hull.pop()
    return hull