"""
NodeData - Pure Python data model for element terminals.

This module contains no Qt dependencies. A node is a connection point
owned by an element. Its coordinates are local to the owning element's
origin, so moving the element moves every terminal (and every wire
ending on it) without touching the node itself.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class NodeData:
    """
    A terminal on an element.

    Attributes:
        node_id: Unique identifier of the terminal.
        x, y: Position relative to the parent element's origin.
        parent_id: ID of the owning element (lookup only, not ownership).
    """

    node_id: str
    x: float
    y: float
    parent_id: str

    @property
    def local_position(self) -> tuple[float, float]:
        return (self.x, self.y)

    def __repr__(self) -> str:
        return f"NodeData({self.node_id} @ {self.parent_id}+({self.x}, {self.y}))"
