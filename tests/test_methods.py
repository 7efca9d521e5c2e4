import math
import random

import pytest

from planegeom.methods import (
    MethodError,
    angle_point_in_polygon_method,
    closest_pair_method,
    graham_scan_method,
    monotone_polygon_triangulation_method,
)

SQUARE = [
    {"x": 0.0, "y": 0.0},
    {"x": 1.0, "y": 0.0},
    {"x": 1.0, "y": 1.0},
    {"x": 0.0, "y": 1.0},
]


# Closest pair


def test_closest_pair_simple():
    data = {
        "points": [
            {"x": 0.0, "y": 0.0},
            {"x": 3.0, "y": 4.0},
            {"x": 1.0, "y": 1.0},
        ]
    }
    output = closest_pair_method(data)
    assert abs(output["distance"] - math.sqrt(2.0)) < 1e-5
    assert output["input_size"] == 3
    pair = {(output["point1"]["x"], output["point1"]["y"]),
            (output["point2"]["x"], output["point2"]["y"])}
    assert pair == {(0.0, 0.0), (1.0, 1.0)}


def test_closest_pair_random_with_tiny_gap():
    rng = random.Random(12345)
    for _ in range(10):
        points = [{"x": rng.uniform(0, 100), "y": rng.uniform(0, 100)}
                  for _ in range(98)]
        base_x, base_y = rng.uniform(0, 100), rng.uniform(0, 100)
        points.append({"x": base_x, "y": base_y})
        points.append({"x": base_x + 1e-10, "y": base_y})
        output = closest_pair_method({"points": points})
        assert abs(output["distance"] - 1e-10) < 1e-9
        assert output["input_size"] == 100


def test_closest_pair_collinear():
    points = [{"x": float(i), "y": 0.0} for i in range(11)]
    output = closest_pair_method({"points": points})
    assert abs(output["distance"] - 1.0) < 1e-6


def test_closest_pair_tiny_distance():
    data = {
        "points": [
            {"x": 0.0, "y": 0.0},
            {"x": 1e-9, "y": 0.0},
            {"x": 100.0, "y": 100.0},
        ]
    }
    assert closest_pair_method(data)["distance"] < 1e-8


def test_closest_pair_accepts_integers():
    output = closest_pair_method({"points": [{"x": 0, "y": 0}, {"x": 3, "y": 4}]})
    assert output["distance"] == pytest.approx(5.0)


@pytest.mark.parametrize(
    "data, code",
    [
        ({}, 1),
        ({"points": "nope"}, 1),
        ([1, 2], 1),
        ({"points": [{"x": 1.0}]}, 2),
        ({"points": [{"x": "1", "y": 2.0}]}, 2),
        ({"points": [{"x": True, "y": 2.0}]}, 2),
        ({"points": [5]}, 2),
        ({"points": [{"x": 1.0, "y": 2.0}]}, 3),
        ({"points": []}, 3),
    ],
)
def test_closest_pair_errors(data, code):
    with pytest.raises(MethodError) as info:
        closest_pair_method(data)
    assert info.value.code == code


def test_closest_pair_error_messages():
    with pytest.raises(MethodError, match="Input must contain 'points' array"):
        closest_pair_method({})
    with pytest.raises(MethodError, match="At least 2 points are required"):
        closest_pair_method({"points": [{"x": 0, "y": 0}]})


# Graham scan


def _hull_set(output):
    return {(p["x"], p["y"]) for p in output["convex_hull"]}


def test_graham_scan_simple_convex():
    data = {
        "points": [
            {"x": 0.0, "y": 0.0},
            {"x": 1.0, "y": 1.0},
            {"x": 2.0, "y": 0.0},
            {"x": 1.0, "y": -1.0},
        ]
    }
    output = graham_scan_method(data)
    assert output["hull_size"] == 4
    assert output["original_size"] == 4
    assert _hull_set(output) <= {(0.0, 0.0), (1.0, 1.0), (2.0, 0.0), (1.0, -1.0)}


def test_graham_scan_collinear_points():
    data = {
        "points": [
            {"x": 0.0, "y": 0.0},
            {"x": 1.0, "y": 1.0},
            {"x": 2.0, "y": 2.0},
            {"x": 3.0, "y": 1.0},
            {"x": 2.0, "y": 0.0},
            {"x": 1.0, "y": 0.0},
        ]
    }
    output = graham_scan_method(data)
    assert output["hull_size"] == 4
    assert output["original_size"] == 6
    assert _hull_set(output) <= {(0.0, 0.0), (2.0, 2.0), (3.0, 1.0), (2.0, 0.0)}


def test_graham_scan_random_convexity():
    rng = random.Random(2024)
    eps = 1e-9
    for _ in range(50):
        size = rng.randint(5, 100)
        points = [{"x": rng.uniform(-100, 100), "y": rng.uniform(-100, 100)}
                  for _ in range(size)]
        output = graham_scan_method({"points": points})
        assert output["original_size"] == size
        assert output["hull_size"] <= size
        hull = output["convex_hull"]
        n = len(hull)
        assert n == output["hull_size"]
        assert n >= 3
        for i in range(n):
            a, b, c = hull[i], hull[(i + 1) % n], hull[(i + 2) % n]
            cross = ((b["x"] - a["x"]) * (c["y"] - a["y"])
                     - (b["y"] - a["y"]) * (c["x"] - a["x"]))
            assert cross > -eps


def test_graham_scan_empty_points():
    output = graham_scan_method({"points": []})
    assert output == {"convex_hull": [], "hull_size": 0, "original_size": 0}


@pytest.mark.parametrize(
    "data, message",
    [
        ({}, "Input must contain 'points' array"),
        ({"points": [{"y": 1.0}]}, "Each point must have 'x' numeric field"),
        ({"points": [{"x": 1.0}]}, "Each point must have 'y' numeric field"),
    ],
)
def test_graham_scan_errors(data, message):
    with pytest.raises(MethodError) as info:
        graham_scan_method(data)
    assert info.value.message == message


# Angle point in polygon


def test_angle_simple_inside():
    output = angle_point_in_polygon_method(
        {"point": {"x": 0.5, "y": 0.5}, "polygon": SQUARE})
    assert output["position"] == "inside"
    assert output["polygon_size"] == 4
    assert output["point"] == {"x": 0.5, "y": 0.5}


def test_angle_simple_outside():
    output = angle_point_in_polygon_method(
        {"point": {"x": 1.5, "y": 0.5}, "polygon": SQUARE})
    assert output["position"] == "outside"
    assert output["polygon_size"] == 4


def test_angle_boundary():
    output = angle_point_in_polygon_method(
        {"point": {"x": 0.5, "y": 0.0}, "polygon": SQUARE})
    assert output["position"] == "boundary"
    assert output["polygon_size"] == 4


def test_angle_vertex_is_boundary():
    output = angle_point_in_polygon_method(
        {"point": {"x": 1.0, "y": 1.0}, "polygon": SQUARE})
    assert output["position"] == "boundary"


def test_angle_random_regular_polygons():
    rng = random.Random(777)
    for _ in range(50):
        size = rng.randint(3, 20)
        cx, cy = rng.uniform(-100, 100), rng.uniform(-100, 100)
        radius = abs(rng.uniform(-100, 100)) / 2.0 + 1.0
        polygon = [
            {"x": cx + radius * math.cos(2 * math.pi * i / size),
             "y": cy + radius * math.sin(2 * math.pi * i / size)}
            for i in range(size)
        ]
        px = cx + rng.uniform(-1, 1) * radius
        py = cy + rng.uniform(-1, 1) * radius
        output = angle_point_in_polygon_method(
            {"point": {"x": px, "y": py}, "polygon": polygon})
        assert output["polygon_size"] == size
        distance = math.hypot(px - cx, py - cy)
        inradius = radius * math.cos(math.pi / size)
        if distance < inradius * 0.99:
            assert output["position"] == "inside"
        elif distance > radius * 1.01:
            assert output["position"] == "outside"
        else:
            assert output["position"] in {"inside", "outside", "boundary"}


@pytest.mark.parametrize(
    "data, code",
    [
        ({"polygon": SQUARE}, 1),
        ({"point": [0, 0], "polygon": SQUARE}, 1),
        ({"point": {"x": 0, "y": 0}}, 2),
        ({"point": {"y": 0}, "polygon": SQUARE}, 3),
        ({"point": {"x": 0}, "polygon": SQUARE}, 4),
        ({"point": {"x": 0, "y": 0}, "polygon": [{"x": 1}]}, 5),
    ],
)
def test_angle_errors(data, code):
    with pytest.raises(MethodError) as info:
        angle_point_in_polygon_method(data)
    assert info.value.code == code


# Monotone polygon triangulation


def test_triangulation_triangle_vertices_count():
    data = {"polygon": [{"x": 0.0, "y": 0.0}, {"x": 1.0, "y": 2.0},
                        {"x": 2.0, "y": 0.0}]}
    output = monotone_polygon_triangulation_method(data)
    assert output["vertices_count"] == 3
    assert output["diagonals_count"] == len(output["diagonals"])
    for diagonal in output["diagonals"]:
        assert 0 <= diagonal["from"] < 3
        assert 0 <= diagonal["to"] < 3


def test_triangulation_square():
    data = {"polygon": [{"x": 0.0, "y": 2.0}, {"x": 2.0, "y": 0.0},
                        {"x": 0.0, "y": -2.0}, {"x": -2.0, "y": 0.0}]}
    output = monotone_polygon_triangulation_method(data)
    assert output["diagonals_count"] == 1
    assert output["vertices_count"] == 4
    pairs = {frozenset((d["from"], d["to"])) for d in output["diagonals"]}
    assert pairs & {frozenset((0, 2)), frozenset((1, 3))}


def test_triangulation_random_ids_in_range():
    rng = random.Random(99)
    for _ in range(20):
        size = rng.randint(3, 50)
        xs = sorted(rng.uniform(-100, 100) for _ in range(size))
        polygon = []
        for i in range(size):
            if i < size // 2:
                polygon.append({"x": xs[i], "y": rng.uniform(-100, 100) + 50.0})
            else:
                polygon.append({"x": xs[size - 1 - (i - size // 2)],
                                "y": rng.uniform(-100, 100) - 50.0})
        output = monotone_polygon_triangulation_method({"polygon": polygon})
        assert output["vertices_count"] == size
        assert output["diagonals_count"] == len(output["diagonals"])
        for diagonal in output["diagonals"]:
            assert 0 <= diagonal["from"] < size
            assert 0 <= diagonal["to"] < size


@pytest.mark.parametrize(
    "data, code, message",
    [
        ({}, 1, "Input must contain 'polygon' array"),
        ({"polygon": [{"y": 0}]}, 2, "Each point must have 'x' numeric field"),
        ({"polygon": [{"x": 0}]}, 2, "Each point must have 'y' numeric field"),
        ({"polygon": [{"x": 0, "y": 0}, {"x": 1, "y": 1}]}, 3,
         "Polygon must have at least 3 points"),
    ],
)
def test_triangulation_errors(data, code, message):
    with pytest.raises(MethodError) as info:
        monotone_polygon_triangulation_method(data)
    assert info.value.code == code
    assert info.value.message == message