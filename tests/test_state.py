import os
import sys
import tempfile
import unittest
from dataclasses import replace

# Ensure src is in path
sys.path.append(os.path.join(os.path.dirname(__file__), "../src"))

from decorations import DEFAULT_GLYPHS
from geometry import Point
from grid_layout import Node
from shape import Shape
from state import State
from state_properties import StateChangeFlags, StateProperties

CATALOG_FILENAME = os.path.join(os.path.dirname(__file__), "../catalogs/lyceum.toml")

# Node centers in a 800x600 viewport with the default properties
A = Point(36.0, 48.0)
B = Point(92.0, 48.0)
C = Point(148.0, 48.0)
D = Point(36.0, 104.0)


class TestState(unittest.TestCase):
    def setUp(self):
        self.state = State(StateProperties())
        self.changes = []
        self.state.state_changed.connect(self.changes.append)
        # Too small for the decorations: 14x10
        self.state.resize(800, 600)
        self.changes.clear()

    def draw(self, *points: Point) -> None:
        self.state.capture_start(points[0].x, points[0].y)
        for p in points[1:]:
            self.state.capture_move(p.x, p.y)
        self.state.capture_end()

    def test_initialization(self):
        state = State(StateProperties())
        self.assertTrue(state.grid.is_empty)
        self.assertEqual(state.shapes, [])
        self.assertEqual(state.current_path, [])
        self.assertFalse(state.is_drawing)

    def test_end_to_end_grid(self):
        self.assertEqual(self.state.grid.cols, 14)
        self.assertEqual(self.state.grid.rows, 10)
        self.assertEqual(len(self.state.nodes), 140)
        self.assertEqual(self.state.nodes[0], Node(36.0, 48.0, 20.0))
        self.assertEqual(self.state.shapes, [])
        self.assertEqual(self.state.viewport_size, (800, 600))

    def test_resize_emits_all_flags(self):
        self.state.resize(1000, 700)
        self.assertEqual(
            self.changes,
            [StateChangeFlags.GRID | StateChangeFlags.SHAPES | StateChangeFlags.CURRENT_PATH],
        )

    def test_draw_path(self):
        self.assertTrue(self.state.capture_start(38.0, 50.0))
        self.assertTrue(self.state.is_drawing)
        self.assertEqual(self.state.current_path, [A])

        self.assertTrue(self.state.capture_move(90.0, 45.0))
        # Same node again
        self.assertFalse(self.state.capture_move(93.0, 49.0))
        # Above the grid, out of range
        self.assertFalse(self.state.capture_move(120.0, 0.0))
        self.assertTrue(self.state.capture_move(150.0, 50.0))
        self.assertEqual(self.state.current_path, [A, B, C])

        self.assertTrue(self.state.capture_end())
        self.assertFalse(self.state.is_drawing)
        self.assertEqual(self.state.current_path, [])
        self.assertEqual(self.state.shapes, [Shape([A, B, C])])
        self.assertEqual(self.changes[-1], StateChangeFlags.SHAPES | StateChangeFlags.CURRENT_PATH)

    def test_capture_start_out_of_range(self):
        # The top-left corner is 60 pixels away from the first node
        self.assertFalse(self.state.capture_start(0.0, 0.0))
        self.assertFalse(self.state.is_drawing)
        self.assertFalse(self.state.capture_move(A.x, A.y))
        self.assertFalse(self.state.capture_end())
        self.assertEqual(self.state.shapes, [])
        self.assertEqual(self.changes, [])

    def test_single_point_shape(self):
        self.draw(A)
        self.assertEqual(self.state.shapes, [Shape([A])])

    def test_toggle(self):
        self.draw(D)
        before = self.state.shapes
        self.draw(A, B, C)
        self.draw(A, B, C)
        self.assertEqual(self.state.shapes, before)

    def test_toggle_reversed(self):
        self.draw(A, B, C)
        self.draw(C, B, A)
        self.assertEqual(self.state.shapes, [])

    def test_undo(self):
        self.draw(A, B)
        self.assertEqual(len(self.state.shapes), 1)
        self.draw(C, D)
        self.assertEqual(len(self.state.shapes), 2)

        self.assertTrue(self.state.undo())
        self.assertEqual(self.state.shapes, [Shape([A, B])])
        self.assertTrue(self.state.undo())
        self.assertEqual(self.state.shapes, [])
        self.assertFalse(self.state.undo())
        self.assertEqual(self.state.shapes, [])

    def test_undo_emits_shapes(self):
        self.draw(A)
        self.changes.clear()
        self.state.undo()
        self.assertEqual(self.changes, [StateChangeFlags.SHAPES])
        self.changes.clear()
        self.state.undo()
        self.assertEqual(self.changes, [])

    def test_decorations(self):
        # 26x7 grid
        self.state.resize(1500, 400)
        shapes = self.state.shapes
        self.assertEqual(len(shapes), len(DEFAULT_GLYPHS))
        # start col = 0, start row = 2
        self.assertEqual(shapes[0].points[0], self.state.grid.node_at(0, 2).center)

    def test_resize_discards_user_shapes(self):
        self.draw(A, B)
        self.state.resize(800, 600)
        self.assertEqual(self.state.shapes, [])

        self.state.resize(1500, 400)
        self.draw(A)
        self.assertEqual(len(self.state.shapes), len(DEFAULT_GLYPHS) + 1)
        self.state.resize(1500, 400)
        self.assertEqual(len(self.state.shapes), len(DEFAULT_GLYPHS))

    def test_resize_while_drawing(self):
        self.state.capture_start(A.x, A.y)
        self.state.resize(1000, 700)
        self.assertFalse(self.state.is_drawing)
        self.assertFalse(self.state.capture_end())
        self.assertEqual(self.state.shapes, [])

    def test_resize_to_empty_viewport(self):
        self.draw(A)
        self.state.resize(10, 10)
        self.assertEqual(self.state.nodes, ())
        self.assertEqual(self.state.shapes, [])
        self.assertFalse(self.state.capture_start(5.0, 5.0))

    def test_change_properties(self):
        self.state.properties = replace(self.state.properties, node_diameter=20.0)
        # cell = 36: floor(800 / 36) = 22, floor(600 / 36) = 16
        self.assertEqual(self.state.grid.cols, 22)
        self.assertEqual(self.state.grid.rows, 16)
        self.assertEqual(self.state.nodes[0].radius, 10.0)

    def test_same_properties_do_nothing(self):
        self.draw(A)
        self.changes.clear()
        self.state.properties = StateProperties()
        self.assertEqual(self.changes, [])
        self.assertEqual(len(self.state.shapes), 1)

    def test_capture_slack(self):
        self.state.properties = replace(self.state.properties, capture_slack=0.0)
        self.assertFalse(self.state.capture_start(A.x + 21.0, A.y))
        self.assertTrue(self.state.capture_start(A.x + 19.0, A.y))

    def test_catalog_from_file(self):
        props = StateProperties(decoration_catalog_filename=CATALOG_FILENAME)
        state = State(props)
        state.resize(1500, 400)
        self.assertEqual(state.catalog.glyphs, DEFAULT_GLYPHS)
        self.assertEqual(len(state.shapes), len(DEFAULT_GLYPHS))

    def test_missing_catalog_uses_default(self):
        props = StateProperties(decoration_catalog_filename="/nonexistent/catalog.toml")
        with self.assertLogs("decorations", level="ERROR"):
            state = State(props)
        self.assertEqual(state.catalog.glyphs, DEFAULT_GLYPHS)

    def test_directory_catalog_uses_default(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            props = StateProperties(decoration_catalog_filename=tmp_dir)
            with self.assertLogs("decorations", level="ERROR"):
                state = State(props)
        state.resize(1500, 400)
        self.assertEqual(state.catalog.glyphs, DEFAULT_GLYPHS)
        self.assertEqual(len(state.shapes), len(DEFAULT_GLYPHS))

    def test_decoration_size_from_properties(self):
        props = StateProperties(decoration_width_in_cols=30, decoration_height_in_rows=5)
        state = State(props)
        # 26x7 grid is not wide enough anymore
        state.resize(1500, 400)
        self.assertEqual(state.shapes, [])


if __name__ == "__main__":
    unittest.main()
