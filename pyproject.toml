[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "planegeom"
version = "0.1.0"
description = "Planar computational geometry: points, edges, polygons, convex hulls, closest pairs, point-in-polygon and monotone triangulation, with JSON methods and a small HTTP server"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "geometry",
    "computational-geometry",
    "convex-hull",
    "graham-scan",
    "closest-pair",
    "point-in-polygon",
    "triangulation",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
planegeom-server = "planegeom.server:main"

[tool.hatch.build.targets.wheel]
packages = ["planegeom"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
