"""Diagonals of a monotone polygon triangulation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from planegeom.graham_scan import cross_product


@dataclass(frozen=True)
class Vertex:
    """A polygon vertex carrying an identifier."""

    x: float = 0.0
    y: float = 0.0
    id: int = -1


def is_polygon_edge(polygon: Sequence[Vertex], id1: int, id2: int) -> bool:
    """Whether the vertices with the given ids are adjacent on the polygon."""
    n = len(polygon)
    for i, vertex in enumerate(polygon):
        following = polygon[(i + 1) % n]
        if {vertex.id, following.id} == {id1, id2} and (
            (vertex.id == id1 and following.id == id2)
            or (vertex.id == id2 and following.id == id1)
        ):
            return True
    return False


def _chains(polygon: Sequence[Vertex]) -> Tuple[List[Vertex], List[Vertex]]:
    n = len(polygon)
    top = bottom = 0
    for i, vertex in enumerate(polygon):
        if vertex.y > polygon[top].y:
            top = i
        if vertex.y < polygon[bottom].y:
            bottom = i

    left = [polygon[top]]
    current = (top + 1) % n
    stop = (bottom + 1) % n
    while current != stop:
        left.append(polygon[current])
        current = (current + 1) % n

    right = []
    current = top
    while current != bottom:
        right.append(polygon[current])
        current = n - 1 if current == 0 else current - 1
    right.append(polygon[bottom])
    return left, right


def _merge(left: Sequence[Vertex], right: Sequence[Vertex]) -> List[Vertex]:
    merged: List[Vertex] = []
    li = ri = 0
    while li < len(left) and ri < len(right):
        if left[li].y >= right[ri].y:
            merged.append(left[li])
            li += 1
        else:
            merged.append(right[ri])
            ri += 1
    merged.extend(left[li:])
    merged.extend(right[ri:])
    return merged


def triangulate_monotone_polygon(polygon: Sequence[Vertex]) -> List[Tuple[int, int]]:
    """Diagonals, as pairs of vertex ids, triangulating a y-monotone polygon."""
    diagonals: List[Tuple[int, int]] = []
    if len(polygon) < 3:
        return diagonals

    left, right = _chains(polygon)
    left_ids = {v.id for v in left}
    merged = _merge(left, right)

    stack = [merged[0], merged[1]]
    for current in merged[2:]:
        top = stack[-1]
        current_in_left = current.id in left_ids
        top_in_left = top.id in left_ids

        if current_in_left != top_in_left:
            while stack:
                following = stack.pop()
                if not is_polygon_edge(polygon, current.id, following.id):
                    diagonals.append((current.id, following.id))
        else:
            while stack:
                following = stack[-1]
                cross = cross_product(top, following, current)
                if (current_in_left and cross > 0) or (not current_in_left and cross < 0):
                    if not is_polygon_edge(polygon, current.id, following.id):
                        diagonals.append((current.id, following.id))
                    stack.pop()
                else:
                    break
        stack.append(current)

    if stack:
        last = merged[-1]
        stack.pop()
        while stack:
            if len(stack) != 1:
                diagonals.append((last.id, stack[-1].id))
            stack.pop()

    return diagonals