# Dotgrid
# Copyright 2025 - Ricardo Quesada

import logging
from enum import IntEnum, auto

from geometry import Point

logger = logging.getLogger(__name__)


class PathAccumulator:
    """
    Tracks the path being drawn.

    The path starts on a successful capture, grows with every captured node
    that is different from the last one, and is handed over when the capture ends.
    """

    class Mode(IntEnum):
        """The status of the path being drawn."""

        IDLE = auto()
        DRAWING = auto()

    def __init__(self):
        self._mode = PathAccumulator.Mode.IDLE
        self._path: list[Point] = []

    def start(self, center: Point) -> None:
        """Starts a new path with center as its only point. Any previous path is discarded."""
        self._mode = PathAccumulator.Mode.DRAWING
        self._path = [center]

    def extend(self, center: Point) -> bool:
        """
        Appends center to the path, unless it is equal to the last point.

        Returns:
            True if the point was appended.
        """
        if self._mode != PathAccumulator.Mode.DRAWING:
            return False
        if self._path and self._path[-1] == center:
            return False
        self._path.append(center)
        return True

    def finish(self) -> list[Point] | None:
        """
        Ends the path and goes back to idle.

        Returns:
            The finished path, or None if nothing was being drawn.
        """
        was_drawing = self._mode == PathAccumulator.Mode.DRAWING
        path = self._path
        self._mode = PathAccumulator.Mode.IDLE
        self._path = []
        if not was_drawing or len(path) == 0:
            return None
        return path

    def reset(self) -> None:
        """Discards the current path, if any."""
        if self._mode == PathAccumulator.Mode.DRAWING:
            logger.debug(f"Discarding path with {len(self._path)} points")
        self._mode = PathAccumulator.Mode.IDLE
        self._path = []

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def is_drawing(self) -> bool:
        return self._mode == PathAccumulator.Mode.DRAWING

    @property
    def path(self) -> list[Point]:
        return list(self._path)
