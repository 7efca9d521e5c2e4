"""A polygon with a movable current vertex."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Tuple

from planegeom.common import Rotation
from planegeom.primitives import Edge, Point


class Polygon:
    """A polygon whose vertices are stored in clockwise order.

    Positions are indices into the vertex sequence. The polygon keeps a
    current position; an index equal to the number of vertices marks the
    end of the sequence, as for an empty polygon.
    """

    def __init__(self, vertices: Iterable[Point] = (), position: int = 0) -> None:
        self._vertices = list(vertices)
        self._check_position(position)
        self._current = position

    def _check_position(self, position: int) -> None:
        if not 0 <= position <= len(self._vertices):
            raise IndexError(
                f"position {position} is outside 0..{len(self._vertices)}"
            )

    @property
    def vertices(self) -> Tuple[Point, ...]:
        """The vertices in clockwise order."""
        return tuple(self._vertices)

    @property
    def current(self) -> int:
        """Index of the current vertex."""
        return self._current

    @current.setter
    def current(self, position: int) -> None:
        self._check_position(position)
        self._current = position

    @property
    def current_vertex(self) -> Point:
        """The current vertex."""
        return self[self._current]

    def __len__(self) -> int:
        return len(self._vertices)

    def __getitem__(self, index: int) -> Point:
        return self._vertices[index]

    def __iter__(self) -> Iterator[Point]:
        return iter(self._vertices)

    def __repr__(self) -> str:
        return f"Polygon({self._vertices!r}, position={self._current})"

    def copy(self) -> Polygon:
        """An independent polygon with the same vertices and position."""
        return Polygon(self._vertices, self._current)

    def get_edge(self) -> Edge:
        """Edge from the current vertex to its clockwise neighbour."""
        if not 0 <= self._current < len(self._vertices):
            raise IndexError("polygon has no current vertex")
        return Edge(self._vertices[self._current], self._vertices[self.clockwise()])

    def clockwise(self) -> Optional[int]:
        """Index of the clockwise neighbour, or None for an empty polygon."""
        if not self._vertices:
            return None
        following = self._current + 1
        if following < len(self._vertices):
            return following
        return 0

    def counter_clockwise(self) -> Optional[int]:
        """Index of the counter-clockwise neighbour, or None if empty."""
        if not self._vertices:
            return None
        if self._current != 0:
            return self._current - 1
        return len(self._vertices) - 1

    def neighbor(self, rotation: Rotation) -> Optional[int]:
        """Index of the neighbour in the given direction."""
        if rotation is Rotation.CLOCKWISE:
            return self.clockwise()
        if rotation is Rotation.COUNTER_CLOCKWISE:
            return self.counter_clockwise()
        raise ValueError(f"unknown rotation: {rotation!r}")

    def advance(self, rotation: Rotation) -> Optional[int]:
        """Move the current position to the neighbour and return it."""
        position = self.neighbor(rotation)
        self._current = len(self._vertices) if position is None else position
        return position

    def insert(self, point: Point) -> int:
        """Insert a vertex after the current one and make it current."""
        if self._current != len(self._vertices):
            self._current += 1
        self._vertices.insert(self._current, point)
        return self._current

    def remove(self, position: int) -> None:
        """Remove a vertex; its counter-clockwise neighbour becomes current."""
        if not 0 <= position < len(self._vertices):
            raise IndexError(f"no vertex at position {position}")
        del self._vertices[position]
        self._current = position
        self.advance(Rotation.COUNTER_CLOCKWISE)

    def split(self, position: int) -> Polygon:
        """Cut the polygon between the current vertex and ``position``.

        The vertices strictly between them (clockwise) move to the returned
        polygon, which also holds both cut vertices and whose current vertex
        is the one at ``position``. In this polygon the vertex at
        ``position`` becomes the clockwise neighbour of the current one.
        """
        if not 0 <= self._current < len(self._vertices):
            raise IndexError("polygon has no current vertex")
        if not 0 <= position < len(self._vertices):
            raise IndexError(f"no vertex at position {position}")

        other = [self._vertices[self._current]]
        if self._current == position:
            return Polygon(other, len(other) - 1)

        index = self._current + 1
        while index != position:
            if index == len(self._vertices):
                index = 0
                continue
            other.append(self._vertices.pop(index))
            if index < position:
                position -= 1
            if index < self._current:
                self._current -= 1

        other.append(self._vertices[position])
        return Polygon(other, len(other) - 1)