# Dotgrid
# Copyright 2025 - Ricardo Quesada

"""Decorative shapes drawn on the grid when it gets created."""

import logging
from dataclasses import dataclass, field

import toml

from geometry import Point
from grid_layout import GridLayout

logger = logging.getLogger(__name__)

# A glyph is a stroke expressed as (col, row) offsets relative to the text anchor.
Glyph = list[tuple[int, int]]

# Spells "LÝCEUM"
DEFAULT_GLYPHS: list[Glyph] = [
    # L
    [(0, 0), (0, 1), (0, 2), (0, 3), (1, 3), (2, 3)],
    # Ý
    [(4, 0), (5, 1)],
    [(8, 0), (7, 1)],
    [(6, 1), (6, 2), (6, 3)],
    [(6, -1)],
    # C
    [(11, 0), (10, 0), (9, 1), (9, 2), (10, 3), (11, 3)],
    # E
    [(15, 0), (14, 0), (13, 0), (13, 1), (13, 2), (13, 3), (14, 3), (15, 3)],
    [(13, 2), (14, 2)],
    # U
    [(17, 0), (17, 1), (17, 2), (18, 3), (19, 3), (20, 2), (20, 1), (20, 0)],
    # M
    [(22, 3), (22, 0), (23, 1), (24, 0), (24, 3)],
]

DEFAULT_WIDTH_IN_COLS = 25
DEFAULT_HEIGHT_IN_ROWS = 5


@dataclass
class DecorationCatalog:
    glyphs: list[Glyph] = field(default_factory=lambda: [list(g) for g in DEFAULT_GLYPHS])
    width_in_cols: int = DEFAULT_WIDTH_IN_COLS
    height_in_rows: int = DEFAULT_HEIGHT_IN_ROWS

    @classmethod
    def from_dict(cls, d: dict) -> "DecorationCatalog":
        glyphs = []
        for glyph in d["glyphs"]:
            glyphs.append([(int(col), int(row)) for col, row in glyph])
        return cls(
            glyphs=glyphs,
            width_in_cols=int(d.get("width_in_cols", DEFAULT_WIDTH_IN_COLS)),
            height_in_rows=int(d.get("height_in_rows", DEFAULT_HEIGHT_IN_ROWS)),
        )


def load_glyph_catalog(filename: str) -> DecorationCatalog | None:
    """
    Loads a decoration catalog from a TOML file.

    The file must have a "glyphs" key: a list of strokes, each one a list
    of [col, row] pairs. "width_in_cols" and "height_in_rows" are optional.

    Returns:
        The catalog, or None if the file could not be loaded.
    """
    logger.info(f"Loading glyph catalog from {filename}")
    try:
        with open(filename, "r", encoding="utf-8") as f:
            d = toml.load(f)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Could not load glyph catalog from {filename}, error: {e}")
        return None
    except toml.TomlDecodeError as e:
        logger.error(f"Invalid glyph catalog {filename}, error: {e}")
        return None

    try:
        return DecorationCatalog.from_dict(d)
    except (KeyError, TypeError, ValueError) as e:
        logger.error(f"Malformed glyph catalog {filename}, error: {e}")
        return None


def compute_decorative_shapes(
    grid: GridLayout,
    glyphs: list[Glyph],
    width_in_cols: int = DEFAULT_WIDTH_IN_COLS,
    height_in_rows: int = DEFAULT_HEIGHT_IN_ROWS,
) -> list[list[Point]]:
    """
    Maps the glyphs to node centers, centering the text in the grid.

    Offsets that fall outside the grid are dropped, and so are the glyphs
    that end up without points. A point equal to the previous one is skipped.
    If the grid is smaller than the text footprint, nothing is drawn.
    """
    if grid.cols < width_in_cols or grid.rows < height_in_rows:
        logger.info(
            f"Grid {grid.cols}x{grid.rows} too small for decorations "
            f"{width_in_cols}x{height_in_rows}"
        )
        return []

    start_col = (grid.cols - width_in_cols) // 2
    # +1 to better center it visually
    start_row = (grid.rows - height_in_rows) // 2 + 1

    shapes = []
    for glyph in glyphs:
        points = []
        for col, row in glyph:
            node = grid.node_at(col + start_col, row + start_row)
            if node is None:
                continue
            if len(points) > 0 and points[-1] == node.center:
                continue
            points.append(node.center)
        if len(points) > 0:
            shapes.append(points)
    return shapes
