import os
import sys
import unittest

# Ensure src is in path
sys.path.append(os.path.join(os.path.dirname(__file__), "../src"))

from geometry import Point
from grid_layout import Node, compute_grid_layout
from node_resolver import find_closest_node, resolve_node


class TestNodeResolver(unittest.TestCase):
    def setUp(self):
        self.node = Node(100.0, 100.0, 20.0)

    def test_capture_threshold(self):
        # radius 20 + slack 20: the boundary is at distance 40
        nodes = [self.node]
        self.assertEqual(resolve_node(Point(139.5, 100.0), nodes, 20), self.node)
        self.assertIsNone(resolve_node(Point(140.5, 100.0), nodes, 20))
        self.assertEqual(resolve_node(Point(100.0, 60.5), nodes, 20), self.node)
        self.assertIsNone(resolve_node(Point(100.0, 59.5), nodes, 20))

    def test_capture_threshold_is_strict(self):
        self.assertIsNone(resolve_node(Point(140.0, 100.0), [self.node], 20))

    def test_closest_is_not_a_capture(self):
        far = Point(500.0, 500.0)
        closest = find_closest_node(far, [self.node])
        self.assertIsNotNone(closest)
        index, node, _ = closest
        self.assertEqual(index, 0)
        self.assertEqual(node, self.node)
        self.assertIsNone(resolve_node(far, [self.node], 20))

    def test_no_nodes(self):
        self.assertIsNone(find_closest_node(Point(0, 0), []))
        self.assertIsNone(resolve_node(Point(0, 0), [], 20))

    def test_closest_node(self):
        grid = compute_grid_layout(800, 600, 40, 16, 32)
        index, node, d = find_closest_node(Point(95.0, 100.0), grid.nodes)
        # (92, 104) is the node at col 1, row 1
        self.assertEqual(index, 15)
        self.assertEqual(node.center, Point(92.0, 104.0))
        self.assertEqual(d, 5.0)

    def test_tie_picks_first(self):
        a = Node(0.0, 0.0, 20.0)
        b = Node(10.0, 0.0, 20.0)
        index, node, _ = find_closest_node(Point(5.0, 0.0), [a, b])
        self.assertEqual(index, 0)
        self.assertEqual(node, a)

    def test_slack_is_independent_of_radius(self):
        small = Node(0.0, 0.0, 5.0)
        self.assertEqual(resolve_node(Point(24.0, 0.0), [small], 20), small)
        self.assertIsNone(resolve_node(Point(26.0, 0.0), [small], 20))
        self.assertIsNone(resolve_node(Point(6.0, 0.0), [small], 0))


if __name__ == "__main__":
    unittest.main()
