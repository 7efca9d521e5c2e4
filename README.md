# planegeom

Planar computational geometry in plain Python, with no dependencies outside
the standard library.

## What is in the package

- `planegeom.common`: the enumerations `Position`, `Intersection` and
  `Rotation`.
- `planegeom.primitives`: `Point` is an immutable point or vector. It is
  ordered lexicographically by `(x, y)` and supports `+`, `-`, scaling by a
  number, indexing, `dot`, `length`, `polar_angle` (in degrees, `-1` at the
  origin), `classify` / `classify_edge` (the position relative to a line) and
  `distance` (the signed distance to the line through an edge). `Edge` is a
  directed segment with `rotate`, `flip`, `value`, `intersect`, `cross`,
  `is_vertical`, `slope` and `y`. `intersect` and `cross` return a pair made
  of an `Intersection` and the parameter of the crossing point, or `None`
  when there is no such parameter.
- `planegeom.orientation`: `orientation(pt0, pt1, pt2, precision)` returns
  `1`, `-1` or `0`.
- `planegeom.polygon`: `Polygon` stores its vertices in clockwise order and
  keeps a current position, which is an index into the vertices. It has
  `clockwise`, `counter_clockwise`, `neighbor`, `advance`, `get_edge`,
  `insert`, `remove`, `split` and `copy`.
- `planegeom.point_in_polygon`: `angle_point_in_polygon` decides by angle
  summation whether a point is inside a polygon, outside it or on its
  boundary, and returns a `PointPosition`. The polygon may be a `Polygon` or
  any iterable of points. `signed_angle` is also available.
- `planegeom.closest_pair`: `closest_pair(points)` finds the closest pair with
  divide and conquer and returns a `ClosestPairResult` with `point1`, `point2`
  and `distance`. It raises `ValueError` when given fewer than two points.
- `planegeom.graham_scan`: `graham_scan(points)` returns the convex hull in
  counter-clockwise order. Collinear boundary points are dropped.
  `cross_product` is also available.
- `planegeom.triangulation`: `triangulate_monotone_polygon(vertices)` takes a
  sequence of `Vertex(x, y, id)` and returns the triangulation diagonals of a
  y-monotone polygon as pairs of vertex ids. `is_polygon_edge` is also
  available.
- `planegeom.methods`: JSON-level functions `closest_pair_method`,
  `graham_scan_method`, `angle_point_in_polygon_method` and
  `monotone_polygon_triangulation_method`. Each takes decoded JSON and
  returns a JSON-ready dictionary. On invalid input they raise `MethodError`,
  which has `message` and `code`.
- `planegeom.server`: an HTTP server built on `http.server`.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install .[test]
```

## Library use

```python
from planegeom.primitives import Point
from planegeom.polygon import Polygon
from planegeom.point_in_polygon import angle_point_in_polygon, PointPosition
from planegeom.graham_scan import graham_scan
from planegeom.closest_pair import closest_pair

square = Polygon([Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)])
assert angle_point_in_polygon(Point(0.5, 0.5), square, 1e-9) is PointPosition.INSIDE

hull = graham_scan([Point(0, 0), Point(1, 1), Point(2, 0), Point(1, -1)])
# [Point(x=0, y=0), Point(x=1, y=-1), Point(x=2, y=0), Point(x=1, y=1)]

result = closest_pair([Point(0, 0), Point(3, 4), Point(1, 1)])
print(result.distance)  # 1.4142135623730951
```

Using the JSON methods:

```python
from planegeom.methods import MethodError, graham_scan_method

graham_scan_method({"points": [{"x": 0, "y": 0}, {"x": 1, "y": 1}, {"x": 2, "y": 0}]})
# {"convex_hull": [...], "hull_size": 3, "original_size": 3}

try:
    graham_scan_method({"points": [{"x": 0}]})
except MethodError as exc:
    print(exc.code, exc.message)  # 2 Each point must have 'y' numeric field
```

## HTTP server

```
planegeom-server [PORT]
```

The server listens on `0.0.0.0` and uses port 8080 unless you give another
one. It accepts JSON bodies sent with `POST` at these paths:

- `/ClosestPair`: `{"points": [{"x": .., "y": ..}, ...]}` (at least two points)
- `/AnglePointInPolygon`: `{"point": {"x": .., "y": ..}, "polygon": [...]}`

A successful request gets status 200 and the result document. A body that is
not valid JSON, or input the method rejects, gets status 400 and a body of the
form `{"error": "..."}`. Unknown paths get 404. A `GET /stop` request shuts the
server down.

In code, `create_server(host, port)` returns a bound `ThreadingHTTPServer`
that you can run yourself with `serve_forever()`.

## What the package does not do

The HTTP server serves only the closest-pair and point-in-polygon methods.
The convex hull and the monotone triangulation can be used as library
functions or through `graham_scan_method` and
`monotone_polygon_triangulation_method`, but they have no HTTP path. The
package has no HTTP client or remote test runner.

## Tests

```
pytest
```