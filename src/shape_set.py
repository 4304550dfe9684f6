# Dotgrid
# Copyright 2025 - Ricardo Quesada

import logging
from collections.abc import Iterable

from geometry import Point
from shape import Shape

logger = logging.getLogger(__name__)


class ShapeSet:
    """
    The ordered collection of completed shapes.

    Completing a path toggles it: if the same shape (in any direction) is
    already in the set, it is removed. Otherwise it is appended.
    Undo removes the most recent shape. There is only one level of history
    and no redo.
    """

    def __init__(self, shapes: Iterable[Shape] | None = None):
        self._shapes: list[Shape] = list(shapes) if shapes is not None else []

    def complete(self, points: Iterable[Point]) -> bool:
        """
        Adds the path as a new shape, or removes it if it already exists.

        Args:
            points: The finished path. Must not be empty.

        Returns:
            True if the shape was added, False if it was removed.
        """
        new_shape = Shape(points)
        remaining = [shape for shape in self._shapes if not shape.is_same_shape(new_shape)]
        if len(remaining) != len(self._shapes):
            logger.debug(f"Removing shape with {len(new_shape)} points")
            self._shapes = remaining
            return False

        logger.debug(f"Adding shape with {len(new_shape)} points")
        self._shapes.append(new_shape)
        return True

    def undo(self) -> Shape | None:
        """Removes and returns the last shape. Returns None if there are no shapes."""
        if len(self._shapes) == 0:
            return None
        return self._shapes.pop()

    def replace_all(self, shapes: Iterable[Shape]) -> None:
        self._shapes = list(shapes)

    @property
    def shapes(self) -> list[Shape]:
        return list(self._shapes)

    def __len__(self) -> int:
        return len(self._shapes)

    def __iter__(self):
        return iter(list(self._shapes))
