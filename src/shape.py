# Dotgrid
# Copyright 2025 - Ricardo Quesada

from collections.abc import Iterable

from geometry import Point


class Shape:
    """Represents a completed path: the sequence of node centers in the order it was drawn.

    Two shapes are equal (==) only if their points are equal in the same order.
    Use is_same_shape() to also consider the reversed order.

    By setting __hash__ = None, shapes are unhashable. They are always compared
    point by point.
    """

    __hash__ = None

    def __init__(self, points: Iterable[Point]):
        """Initializes the Shape with a sequence of points.

        A copy of the points is made to prevent external modifications
        to the list from affecting the Shape.
        """
        self._points = tuple(points)
        if len(self._points) == 0:
            raise ValueError("A shape needs at least one point")

    def __eq__(self, other):
        """Overrides the default '==' behavior."""
        if not isinstance(other, Shape):
            return NotImplemented
        return self._points == other._points

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self):
        return iter(self._points)

    def __repr__(self) -> str:
        return f"Shape({list(self._points)})"

    def is_same_shape(self, other: "Shape") -> bool:
        """Returns True if both shapes have the same points, in the same or in reversed order."""
        if len(self._points) != len(other._points):
            return False
        return self._points == other._points or self._points == other._points[::-1]

    @property
    def points(self) -> list[Point]:
        return list(self._points)
