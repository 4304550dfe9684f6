# Dotgrid
# Copyright 2025 - Ricardo Quesada

from dataclasses import dataclass
from enum import IntFlag, auto


class StateChangeFlags(IntFlag):
    GRID = auto()
    SHAPES = auto()
    CURRENT_PATH = auto()


@dataclass
class StateProperties:
    node_diameter: float = 40.0
    gap_size: float = 16.0
    grid_padding: float = 32.0
    capture_slack: float = 20.0
    decoration_width_in_cols: int = 25
    decoration_height_in_rows: int = 5
    decoration_catalog_filename: str | None = None
