"""JSON-level entry points for the geometric algorithms.

Each method takes decoded JSON data and returns a JSON-ready dictionary.
Invalid input raises MethodError carrying a message and a numeric code.
"""

from __future__ import annotations

from typing import Any, Dict, List

from planegeom.closest_pair import closest_pair
from planegeom.graham_scan import graham_scan
from planegeom.point_in_polygon import angle_point_in_polygon
from planegeom.primitives import Point
from planegeom.triangulation import (
    Vertex,
    is_polygon_edge,
    triangulate_monotone_polygon,
)

_ALGORITHM_ERRORS = (ValueError, ArithmeticError, IndexError)


class MethodError(Exception):
    """Rejected input or a failure inside an algorithm."""

    def __init__(self, message: str, code: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.code = code


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _has_number(obj: Any, key: str) -> bool:
    return isinstance(obj, dict) and key in obj and _is_number(obj[key])


def _array(data: Any, key: str, message: str) -> List[Any]:
    if not isinstance(data, dict) or not isinstance(data.get(key), list):
        raise MethodError(message, 1)
    return data[key]


def _xy(point: Point) -> Dict[str, float]:
    return {"x": point.x, "y": point.y}


def closest_pair_method(data: Any) -> Dict[str, Any]:
    """Find the closest pair among the points of ``data["points"]``."""
    items = _array(data, "points", "Input must contain 'points' array")

    points = []
    for item in items:
        if not (_has_number(item, "x") and _has_number(item, "y")):
            raise MethodError(
                "Each point must be an object with numeric 'x' and 'y'", 2
            )
        points.append(Point(float(item["x"]), float(item["y"])))

    if len(points) < 2:
        raise MethodError("At least 2 points are required", 3)

    try:
        result = closest_pair(points)
    except _ALGORITHM_ERRORS as exc:
        raise MethodError(f"Exception: {exc}", -1) from exc

    return {
        "point1": _xy(result.point1),
        "point2": _xy(result.point2),
        "distance": result.distance,
        "input_size": len(points),
    }


def graham_scan_method(data: Any) -> Dict[str, Any]:
    """Convex hull of the points of ``data["points"]``."""
    items = _array(data, "points", "Input must contain 'points' array")

    points = []
    for item in items:
        if not _has_number(item, "x"):
            raise MethodError("Each point must have 'x' numeric field", 2)
        if not _has_number(item, "y"):
            raise MethodError("Each point must have 'y' numeric field", 2)
        points.append(Point(float(item["x"]), float(item["y"])))

    try:
        hull = graham_scan(points)
    except _ALGORITHM_ERRORS as exc:
        raise MethodError(f"Exception: {exc}", -1) from exc

    return {
        "convex_hull": [_xy(p) for p in hull],
        "hull_size": len(hull),
        "original_size": len(points),
    }


def angle_point_in_polygon_method(data: Any) -> Dict[str, Any]:
    """Locate ``data["point"]`` relative to the polygon ``data["polygon"]``."""
    if not isinstance(data, dict) or not isinstance(data.get("point"), dict):
        raise MethodError("Input must contain 'point' object", 1)
    if not isinstance(data.get("polygon"), list):
        raise MethodError("Input must contain 'polygon' array", 2)

    raw_point = data["point"]
    if not _has_number(raw_point, "x"):
        raise MethodError("Point must have 'x' numeric field", 3)
    if not _has_number(raw_point, "y"):
        raise MethodError("Point must have 'y' numeric field", 4)
    point = Point(float(raw_point["x"]), float(raw_point["y"]))

    vertices = []
    for item in data["polygon"]:
        if not (_has_number(item, "x") and _has_number(item, "y")):
            raise MethodError("Each polygon point must have 'x' & 'y'", 5)
        vertices.append(Point(float(item["x"]), float(item["y"])))

    try:
        position = angle_point_in_polygon(point, vertices, 1e-9)
    except _ALGORITHM_ERRORS as exc:
        raise MethodError(f"Exception: {exc}", -1) from exc

    return {
        "position": position.value,
        "point": _xy(point),
        "polygon_size": len(vertices),
    }


def monotone_polygon_triangulation_method(data: Any) -> Dict[str, Any]:
    """Diagonals triangulating the monotone polygon ``data["polygon"]``."""
    items = _array(data, "polygon", "Input must contain 'polygon' array")

    polygon = []
    for index, item in enumerate(items):
        if not _has_number(item, "x"):
            raise MethodError("Each point must have 'x' numeric field", 2)
        if not _has_number(item, "y"):
            raise MethodError("Each point must have 'y' numeric field", 2)
        polygon.append(Vertex(float(item["x"]), float(item["y"]), index))

    if len(polygon) < 3:
        raise MethodError("Polygon must have at least 3 points", 3)

    try:
        diagonals = triangulate_monotone_polygon(polygon)
    except _ALGORITHM_ERRORS as exc:
        raise MethodError(f"Exception: {exc}", -1) from exc

    result = [
        {"from": start, "to": end}
        for start, end in diagonals
        if not is_polygon_edge(polygon, start, end)
    ]
    return {
        "diagonals": result,
        "diagonals_count": len(result),
        "vertices_count": len(polygon),
    }