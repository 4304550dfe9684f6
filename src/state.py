# Dotgrid
# Copyright 2025 - Ricardo Quesada

import logging

from PySide6.QtCore import QObject, Signal

from decorations import (
    DEFAULT_GLYPHS,
    DecorationCatalog,
    compute_decorative_shapes,
    load_glyph_catalog,
)
from geometry import Point
from grid_layout import GridLayout, Node, compute_grid_layout
from node_resolver import resolve_node
from path_accumulator import PathAccumulator
from preferences import get_global_preferences
from shape import Shape
from shape_set import ShapeSet
from state_properties import StateChangeFlags, StateProperties

logger = logging.getLogger(__name__)


class State(QObject):
    """
    Everything the canvas draws: the grid, the completed shapes and the path being drawn.

    The state is only mutated by its event handlers (resize, capture_*, undo).
    Each handler runs to completion and then emits state_changed with the
    parts that changed.
    """

    # Triggered after every change. The flags tell which parts changed.
    state_changed = Signal(StateChangeFlags)

    def __init__(self, properties: StateProperties | None = None):
        super().__init__()
        if properties is None:
            properties = get_global_preferences().get_state_properties()
        self._properties = properties
        self._catalog = self._load_catalog(properties)
        self._viewport_size: tuple[float, float] = (0.0, 0.0)
        self._grid = GridLayout()
        self._accumulator = PathAccumulator()
        self._shape_set = ShapeSet()

    #
    # Event handlers
    #
    def resize(self, width: float, height: float) -> None:
        """Regenerates the grid for the new viewport size.

        The shapes are replaced with the decorative ones, and the path being drawn is discarded.
        """
        self._viewport_size = (width, height)
        self._regenerate_grid()

    def capture_start(self, x: float, y: float) -> bool:
        node = self._resolve(x, y)
        if node is None:
            return False
        self._accumulator.start(node.center)
        self.state_changed.emit(StateChangeFlags.CURRENT_PATH)
        return True

    def capture_move(self, x: float, y: float) -> bool:
        if not self._accumulator.is_drawing:
            return False
        node = self._resolve(x, y)
        if node is None:
            return False
        if not self._accumulator.extend(node.center):
            return False
        self.state_changed.emit(StateChangeFlags.CURRENT_PATH)
        return True

    def capture_end(self) -> bool:
        if not self._accumulator.is_drawing:
            return False
        path = self._accumulator.finish()
        if path is None:
            self.state_changed.emit(StateChangeFlags.CURRENT_PATH)
            return True
        added = self._shape_set.complete(path)
        action = "added" if added else "removed"
        logger.info(f"Shape {action}. Total shapes: {len(self._shape_set)}")
        self.state_changed.emit(StateChangeFlags.SHAPES | StateChangeFlags.CURRENT_PATH)
        return True

    def undo(self) -> bool:
        shape = self._shape_set.undo()
        if shape is None:
            logger.debug("Nothing to undo")
            return False
        logger.info(f"Undo. Total shapes: {len(self._shape_set)}")
        self.state_changed.emit(StateChangeFlags.SHAPES)
        return True

    #
    # Properties
    #
    @property
    def properties(self) -> StateProperties:
        return self._properties

    @properties.setter
    def properties(self, properties: StateProperties) -> None:
        if properties == self._properties:
            return
        self._properties = properties
        self._catalog = self._load_catalog(properties)
        self._regenerate_grid()

    @property
    def viewport_size(self) -> tuple[float, float]:
        return self._viewport_size

    @property
    def grid(self) -> GridLayout:
        return self._grid

    @property
    def nodes(self) -> tuple[Node, ...]:
        return self._grid.nodes

    @property
    def shapes(self) -> list[Shape]:
        return self._shape_set.shapes

    @property
    def current_path(self) -> list[Point]:
        return self._accumulator.path

    @property
    def is_drawing(self) -> bool:
        return self._accumulator.is_drawing

    @property
    def catalog(self) -> DecorationCatalog:
        return self._catalog

    #
    # Private methods
    #
    def _resolve(self, x: float, y: float) -> Node | None:
        return resolve_node(Point(x, y), self._grid.nodes, self._properties.capture_slack)

    def _regenerate_grid(self) -> None:
        width, height = self._viewport_size
        props = self._properties
        self._grid = compute_grid_layout(
            width, height, props.node_diameter, props.gap_size, props.grid_padding
        )
        decorative = compute_decorative_shapes(
            self._grid,
            self._catalog.glyphs,
            self._catalog.width_in_cols,
            self._catalog.height_in_rows,
        )
        # User-drawn shapes are discarded together with the previous decorative ones.
        self._shape_set.replace_all(Shape(points) for points in decorative)
        self._accumulator.reset()
        logger.info(
            f"Grid regenerated: {self._grid.cols}x{self._grid.rows}, "
            f"{len(self._shape_set)} decorative shapes"
        )
        self.state_changed.emit(
            StateChangeFlags.GRID | StateChangeFlags.SHAPES | StateChangeFlags.CURRENT_PATH
        )

    @staticmethod
    def _load_catalog(properties: StateProperties) -> DecorationCatalog:
        if properties.decoration_catalog_filename:
            catalog = load_glyph_catalog(properties.decoration_catalog_filename)
            if catalog is not None:
                return catalog
            logger.warning("Using the default glyph catalog")
        return DecorationCatalog(
            glyphs=[list(g) for g in DEFAULT_GLYPHS],
            width_in_cols=properties.decoration_width_in_cols,
            height_in_rows=properties.decoration_height_in_rows,
        )
