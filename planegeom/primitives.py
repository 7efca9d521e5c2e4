"""Points and edges in the plane."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple

from planegeom.common import Intersection, Position


@dataclass(frozen=True, order=True)
class Point:
    """A point (or vector) in the plane, ordered lexicographically by (x, y)."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, value: float) -> Point:
        if isinstance(value, Point) or not isinstance(value, (int, float)):
            return NotImplemented
        return Point(value * self.x, value * self.y)

    __rmul__ = __mul__

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y)[index]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def dot(self, other: Point) -> float:
        """Euclidean scalar product."""
        return self.x * other.x + self.y * other.y

    @staticmethod
    def is_equal(left: Point, right: Point, precision: float) -> bool:
        """Whether two points coincide within a relative precision."""
        return (
            abs(left.x - right.x) <= precision * max(abs(left.x), abs(right.x))
            and abs(left.y - right.y) <= precision * max(abs(left.y), abs(right.y))
        )

    def classify(self, p0: Point, p1: Point, precision: float) -> Position:
        """Position of this point relative to the directed line (p0, p1)."""
        a = p1 - p0
        b = self - p0
        sa = a.x * b.y - b.x * a.y

        if sa > precision:
            return Position.LEFT
        if sa < -precision:
            return Position.RIGHT
        if a.x * b.x < 0 or a.y * b.y < 0:
            return Position.BEHIND
        if a.length() < b.length():
            return Position.BEYOND
        if Point.is_equal(p0, self, precision):
            return Position.ORIGIN
        if Point.is_equal(p1, self, precision):
            return Position.DESTINATION
        return Position.BETWEEN

    def classify_edge(self, edge: Edge, precision: float) -> Position:
        """Position of this point relative to the line through an edge."""
        return self.classify(edge.origin, edge.destination, precision)

    def polar_angle(self, precision: float) -> float:
        """Polar angle in degrees, or -1 for a point at the origin."""
        if abs(self.x) < precision and abs(self.y) < precision:
            return -1.0
        if abs(self.x) < precision:
            return 90.0 if self.y > 0 else 270.0

        theta = math.degrees(math.atan(self.y / self.x))
        if self.x > 0:
            return theta if self.y > 0 else 360.0 + theta
        return 180.0 + theta

    def length(self) -> float:
        """Distance from the origin."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def distance(self, edge: Edge, precision: float) -> float:
        """Signed distance from this point to the line through an edge."""
        rotated = Edge(edge.origin, edge.destination).flip().rotate()
        normal = rotated.destination - rotated.origin
        normal = (1.0 / normal.length()) * normal
        normal_edge = Edge(self, self + normal)
        _, t = normal_edge.intersect(edge, precision)
        return 0.0 if t is None else t


@dataclass
class Edge:
    """A directed segment from origin to destination."""

    origin: Point = field(default_factory=lambda: Point(0.0, 0.0))
    destination: Point = field(default_factory=lambda: Point(1.0, 0.0))

    def rotate(self) -> Edge:
        """Rotate the edge 90 degrees clockwise about its midpoint."""
        middle = 0.5 * (self.origin + self.destination)
        direction = self.destination - self.origin
        normal = Point(direction.y, -direction.x)
        self.origin = middle - 0.5 * normal
        self.destination = middle + 0.5 * normal
        return self

    def flip(self) -> Edge:
        """Reverse the edge."""
        self.origin, self.destination = self.destination, self.origin
        return self

    def value(self, t: float) -> Point:
        """Point of the supporting line at parameter t."""
        return self.origin + t * (self.destination - self.origin)

    def intersect(
        self, edge: Edge, precision: float
    ) -> Tuple[Intersection, Optional[float]]:
        """Intersect the lines through two edges.

        Returns the kind of intersection and, for skew lines, the parameter
        of the intersection point on this edge.
        """
        direction = self.destination - self.origin
        other_direction = edge.destination - edge.origin
        other_normal = Point(other_direction.y, -other_direction.x)

        denominator = other_normal.dot(direction)
        if abs(denominator) < precision:
            kind = self.origin.classify_edge(edge, precision)
            if kind in (Position.LEFT, Position.RIGHT):
                return Intersection.PARALLEL, None
            return Intersection.COLLINEAR, None

        numerator = other_normal.dot(self.origin - edge.origin)
        return Intersection.SKEW, -numerator / denominator

    def cross(
        self, edge: Edge, precision: float
    ) -> Tuple[Intersection, Optional[float]]:
        """Intersect two segments.

        Returns the kind of intersection and the parameter on this edge when
        it could be computed.
        """
        kind, s = edge.intersect(self, precision)
        if kind in (Intersection.COLLINEAR, Intersection.PARALLEL):
            return kind, None
        if s < 0.0 or s > 1.0:
            return Intersection.SKEW_NO_CROSS, None

        _, t = self.intersect(edge, precision)
        if t is not None and 0.0 <= t <= 1.0:
            return Intersection.SKEW_CROSS, t
        return Intersection.SKEW_NO_CROSS, t

    def is_vertical(self, precision: float) -> bool:
        """Whether the edge is vertical within a relative precision."""
        ox, dx = self.origin.x, self.destination.x
        return abs(ox - dx) <= precision * max(abs(ox), abs(dx))

    def slope(self, precision: float) -> float:
        """Slope of the edge, or the largest float for a vertical edge."""
        ox, dx = self.origin.x, self.destination.x
        if abs(ox - dx) > precision * max(abs(ox), abs(dx)):
            return (self.destination.y - self.origin.y) / (dx - ox)
        return sys.float_info.max

    def y(self, x: float, precision: float) -> float:
        """Y coordinate of the supporting line at the given x."""
        return self.slope(precision) * (x - self.origin.x) + self.origin.y