"""
Coordinate resolution and endpoint disambiguation.

This module contains no Qt dependencies. Everything here runs on the
drawing path, once per wire end per frame, so it only does dict lookups
and arithmetic.
"""

import logging
import math

from .circuit import CircuitModel
from .errors import BrokenReferenceError
from .interaction import InteractionState, Point
from .node import NodeData
from .wire import WireData, WireEnd

logger = logging.getLogger(__name__)


def absolute_position(model: CircuitModel, node: NodeData) -> Point:
    """
    Resolve a node's canvas-absolute position.

    An orphaned node (parent missing) is treated as already absolute so
    drawing can continue; the broken reference is logged.
    """
    parent = model.find_parent_of(node.node_id)
    if parent is None:
        logger.warning("Broken reference: node %s has no parent element %s",
                       node.node_id, node.parent_id)
        return (node.x, node.y)
    return (node.x + parent.x, node.y + parent.y)


def resolve_node(model: CircuitModel, node_id: str) -> Point:
    """Resolve a node id to an absolute position, raising if it is missing."""
    node = model.find_node(node_id)
    if node is None:
        raise BrokenReferenceError("node", node_id)
    return absolute_position(model, node)


def wire_endpoints(model: CircuitModel, wire: WireData,
                   state: InteractionState) -> tuple[Point, Point]:
    """
    Resolve the two drawn ends of a wire.

    The end currently under edit follows the pointer; the other end (and
    both ends of every other wire) sits on its node.

    Raises:
        BrokenReferenceError: If a referenced node no longer exists.
    """
    editing = state.editing_end(wire.wire_id)
    points = []
    for end in (WireEnd.FROM, WireEnd.TO):
        if end is editing:
            points.append(state.pointer)
            continue
        node_id = wire.endpoint(end)
        node = model.find_node(node_id)
        if node is None:
            raise BrokenReferenceError("node", node_id, f"{end.value} end of {wire.wire_id}")
        points.append(absolute_position(model, node))
    return points[0], points[1]


def distance(a: Point, b: Point) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def disambiguate(click: Point, from_pos: Point, to_pos: Point) -> WireEnd:
    """
    Decide which end of a wire a click on its body means to grab.

    The nearer end wins. An exact tie picks FROM so the result never
    depends on anything but the inputs.
    """
    if distance(click, from_pos) <= distance(click, to_pos):
        return WireEnd.FROM
    return WireEnd.TO


def distance_to_segment(point: Point, a: Point, b: Point) -> float:
    """Distance from point to the line segment a-b."""
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    length_sq = dx * dx + dy * dy
    if length_sq < 1e-12:
        return distance(point, a)

    t = ((point[0] - a[0]) * dx + (point[1] - a[1]) * dy) / length_sq
    t = max(0.0, min(1.0, t))
    return distance(point, (a[0] + t * dx, a[1] + t * dy))
