"""
ElementData - Pure Python data model for placed circuit elements.

This module contains no Qt dependencies. Positions are represented as
tuples (x, y) rather than QPointF.

Element types use display names as canonical identifiers:
'Lightbulb', 'Resistor', 'Capacitor', 'Inductor'
"""

from dataclasses import dataclass, field
from typing import Optional

from .node import NodeData

# Element type definitions using display names (canonical)
ELEMENT_TYPES = [
    "Lightbulb",
    "Resistor",
    "Capacitor",
    "Inductor",
]

# Prefix used when generating element IDs (lightbulb-1, resistor-2, ...)
ID_PREFIXES = {
    "Lightbulb": "lightbulb",
    "Resistor": "resistor",
    "Capacitor": "capacitor",
    "Inductor": "inductor",
}

# Body size per element type, (width, height) with the origin at top-left
ELEMENT_SIZES = {
    "Lightbulb": (40, 40),
    "Resistor": (60, 20),
    "Capacitor": (30, 30),
    "Inductor": (60, 20),
}

# Element colors (hex strings)
ELEMENT_COLORS = {
    "Lightbulb": "#FFC107",
    "Resistor": "#2196F3",
    "Capacitor": "#4CAF50",
    "Inductor": "#FF9800",
}

# Default terminal positions per element type, local to the element origin
TERMINAL_LAYOUTS = {
    "Lightbulb": [(2, 40), (40, 40)],
    "Resistor": [(0, 10), (60, 10)],
    "Capacitor": [(0, 15), (30, 15)],
    "Inductor": [(0, 10), (60, 10)],
}


@dataclass
class ElementData:
    """
    Pure Python data class representing a placed circuit element.

    The element exclusively owns its terminal nodes; every node's
    parent_id equals this element's id.
    """

    element_id: str
    element_type: str
    position: tuple[float, float]
    nodes: list[NodeData] = field(default_factory=list)

    def __post_init__(self):
        if self.element_type not in ELEMENT_TYPES:
            raise ValueError(f"Unknown element type: {self.element_type}")
        for node in self.nodes:
            if node.parent_id != self.element_id:
                raise ValueError(
                    f"Node {node.node_id} belongs to {node.parent_id}, not {self.element_id}"
                )

    @classmethod
    def create(cls, element_id: str, element_type: str,
               position: tuple[float, float],
               terminals: Optional[list[tuple[float, float]]] = None) -> "ElementData":
        """
        Build an element together with its terminal nodes.

        Args:
            element_id: Unique element identifier.
            element_type: One of ELEMENT_TYPES.
            position: Canvas-absolute origin of the element.
            terminals: Local terminal offsets. Defaults to the type's layout.

        Returns:
            A new ElementData whose nodes are named "<element_id>-node-<n>".
        """
        if terminals is None:
            terminals = TERMINAL_LAYOUTS.get(element_type, [])
        nodes = [
            NodeData(node_id=f"{element_id}-node-{i}", x=tx, y=ty, parent_id=element_id)
            for i, (tx, ty) in enumerate(terminals, start=1)
        ]
        return cls(element_id=element_id, element_type=element_type,
                   position=position, nodes=nodes)

    @property
    def x(self) -> float:
        return self.position[0]

    @property
    def y(self) -> float:
        return self.position[1]

    def get_size(self) -> tuple[float, float]:
        return ELEMENT_SIZES.get(self.element_type, (0, 0))

    def get_node(self, node_id: str) -> Optional[NodeData]:
        """Return the owned node with the given id, or None."""
        for node in self.nodes:
            if node.node_id == node_id:
                return node
        return None

    def contains_point(self, point: tuple[float, float]) -> bool:
        """Check if a canvas-absolute point lies on the element body."""
        width, height = self.get_size()
        px, py = point
        return self.x <= px <= self.x + width and self.y <= py <= self.y + height

    def __repr__(self) -> str:
        return f"ElementData({self.element_id}, {self.element_type} @ {self.position}, nodes={len(self.nodes)})"
