# Dotgrid
# Copyright 2025 - Ricardo Quesada

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """Represents a point in 2D space, in pixel coordinates.

    Using a frozen dataclass makes instances immutable, hashable, and
    provides an __eq__ method automatically. Equality is exact, which is fine
    since every point that gets compared comes from the same node grid.
    """

    x: float
    y: float


def subtract(p1: Point, p2: Point) -> Point:
    return Point(p1.x - p2.x, p1.y - p2.y)


def magnitude(p: Point) -> float:
    return math.sqrt(p.x * p.x + p.y * p.y)


def distance(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points."""
    return magnitude(subtract(p1, p2))
