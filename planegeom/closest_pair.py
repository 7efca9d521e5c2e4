"""Closest pair of points by divide and conquer."""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Iterable, List, Optional, Sequence, Tuple

from planegeom.primitives import Point

_Y_TOLERANCE = 1e-10

_Pair = Optional[Tuple[Point, Point]]


@dataclass(frozen=True)
class ClosestPairResult:
    """The two closest points and the distance between them."""

    point1: Point
    point2: Point
    distance: float


def _compare_by_y(a: Point, b: Point) -> int:
    def before(p: Point, q: Point) -> bool:
        return p.y < q.y or (abs(p.y - q.y) < _Y_TOLERANCE and p.x < q.x)

    if before(a, b):
        return -1
    if before(b, a):
        return 1
    return 0


def _check_strip(
    strip: Sequence[Point], delta: float, best: _Pair
) -> Tuple[float, _Pair]:
    min_dist = delta
    for i, p in enumerate(strip):
        for q in strip[i + 1:]:
            if q.y - p.y >= min_dist:
                break
            dist = math.hypot(p.x - q.x, p.y - q.y)
            if dist < min_dist:
                min_dist = dist
                best = (p, q)
    return min_dist, best


def _closest_recursive(
    by_x: Sequence[Point], by_y: Sequence[Point]
) -> Tuple[float, _Pair]:
    if len(by_x) <= 1:
        return math.inf, None

    mid = len(by_x) // 2
    x_mid = by_x[mid].x
    left_y = [p for p in by_y if p.x < x_mid]
    right_y = [p for p in by_y if not p.x < x_mid]

    d_left, left = _closest_recursive(by_x[:mid], left_y)
    d_right, right = _closest_recursive(by_x[mid:], right_y)

    delta = min(d_left, d_right)
    best = left if d_left <= d_right else right

    strip = [p for p in by_y if abs(p.x - x_mid) < delta]
    d_strip, best = _check_strip(strip, delta, best)
    return min(delta, d_strip), best


def closest_pair(points: Iterable[Point]) -> ClosestPairResult:
    """Find the two closest points of a set.

    Raises ValueError when fewer than two points are given.
    """
    pts: List[Point] = list(points)
    if len(pts) < 2:
        raise ValueError("at least 2 points are required")

    by_x = sorted(pts, key=lambda p: p.x)
    by_y = sorted(pts, key=cmp_to_key(_compare_by_y))

    distance, pair = _closest_recursive(by_x, by_y)
    if pair is None:
        pair = (Point(), Point())
    return ClosestPairResult(pair[0], pair[1], distance)