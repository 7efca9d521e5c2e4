"""Enumerations shared by the geometric primitives and algorithms."""

from enum import Enum


class Position(Enum):
    """Position of a point relative to a directed segment."""

    LEFT = "left"
    RIGHT = "right"
    BEYOND = "beyond"
    BEHIND = "behind"
    BETWEEN = "between"
    ORIGIN = "origin"
    DESTINATION = "destination"


class Intersection(Enum):
    """Mutual arrangement of two segments or of the lines through them."""

    COLLINEAR = "collinear"
    PARALLEL = "parallel"
    SKEW = "skew"
    SKEW_CROSS = "skew_cross"
    SKEW_NO_CROSS = "skew_no_cross"


class Rotation(Enum):
    """Direction of traversal."""

    CLOCKWISE = "clockwise"
    COUNTER_CLOCKWISE = "counter_clockwise"