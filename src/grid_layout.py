# Dotgrid
# Copyright 2025 - Ricardo Quesada

import logging
import math
from dataclasses import dataclass

from geometry import Point

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Node:
    """A circular anchor in the grid. All nodes in a grid share the same radius."""

    x: float
    y: float
    radius: float

    @property
    def center(self) -> Point:
        return Point(self.x, self.y)


@dataclass(frozen=True)
class GridLayout:
    """
    The nodes of a grid, stored in row-major order.

    The position of a node in `nodes` is its canonical index:
    index = row * cols + col.
    """

    cols: int = 0
    rows: int = 0
    nodes: tuple[Node, ...] = ()

    @property
    def is_empty(self) -> bool:
        return len(self.nodes) == 0

    def node_at(self, col: int, row: int) -> Node | None:
        """Returns the node at (col, row), or None if it falls outside the grid."""
        if col < 0 or col >= self.cols or row < 0 or row >= self.rows:
            return None
        index = row * self.cols + col
        if index < len(self.nodes):
            return self.nodes[index]
        return None


def compute_grid_layout(
    width: float, height: float, diameter: float, gap: float, padding: float
) -> GridLayout:
    """
    Computes the nodes that fit in a viewport of the given size.

    The grid is centered within the viewport minus the padding on each side.
    The centering offsets might be negative when the grid is bigger than the
    padded area. Positions are not clamped.

    Args:
        width: Viewport width in pixels.
        height: Viewport height in pixels.
        diameter: Node diameter in pixels.
        gap: Space between two adjacent nodes in pixels.
        padding: Outer padding in pixels.

    Returns:
        The GridLayout. It is empty if not even one row or column fits.

    Raises:
        ValueError: if diameter + gap is not positive.
    """
    cell_size = diameter + gap
    if cell_size <= 0:
        raise ValueError(f"Invalid cell size {cell_size}: diameter={diameter}, gap={gap}")

    cols = max(0, math.floor(width / cell_size))
    rows = max(0, math.floor(height / cell_size))
    if cols == 0 or rows == 0:
        logger.debug(f"Viewport {width}x{height} too small for a grid")
        return GridLayout(cols, rows, ())

    content_width = cols * diameter + (cols - 1) * gap
    content_height = rows * diameter + (rows - 1) * gap

    container_width = width - padding * 2
    container_height = height - padding * 2

    offset_x = (container_width - content_width) / 2
    offset_y = (container_height - content_height) / 2

    radius = diameter / 2
    nodes = []
    for row in range(rows):
        for col in range(cols):
            x = padding + offset_x + col * cell_size + radius
            y = padding + offset_y + row * cell_size + radius
            nodes.append(Node(x, y, radius))

    logger.debug(f"Grid layout for {width}x{height}: {cols} cols x {rows} rows")
    return GridLayout(cols, rows, tuple(nodes))
