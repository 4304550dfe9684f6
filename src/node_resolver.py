# Dotgrid
# Copyright 2025 - Ricardo Quesada

from collections.abc import Sequence

from geometry import Point, distance
from grid_layout import Node

# Pixels added to the node radius. Allows capturing a node slightly outside its circle.
DEFAULT_CAPTURE_SLACK = 20.0


def find_closest_node(point: Point, nodes: Sequence[Node]) -> tuple[int, Node, float] | None:
    """
    Returns the index, node and distance of the node closest to point.

    In case of a tie, the first node in row-major order wins.
    Returns None if there are no nodes.
    """
    closest = None
    min_distance = float("inf")
    for index, node in enumerate(nodes):
        d = distance(node.center, point)
        if d < min_distance:
            min_distance = d
            closest = (index, node, d)
    return closest


def resolve_node(
    point: Point, nodes: Sequence[Node], capture_slack: float = DEFAULT_CAPTURE_SLACK
) -> Node | None:
    """
    Returns the node captured by point, or None.

    The closest node is only captured if it is within its radius plus capture_slack.
    A closest node that is too far away is not a match.
    """
    closest = find_closest_node(point, nodes)
    if closest is None:
        return None
    _, node, d = closest
    if d < node.radius + capture_slack:
        return node
    return None
