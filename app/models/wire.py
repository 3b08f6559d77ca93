"""
WireData - Pure Python data model for circuit wires.

This module contains no Qt dependencies. A wire only references the two
terminal nodes it connects; positions are always derived from the nodes'
parent elements when the wire is drawn.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


class WireEnd(Enum):
    """Which end of a wire an operation applies to."""

    FROM = "from"
    TO = "to"

    @property
    def other(self) -> "WireEnd":
        return WireEnd.TO if self is WireEnd.FROM else WireEnd.FROM


@dataclass(frozen=True)
class WireData:
    """
    Connection between two terminal nodes.

    Wires are immutable; the mutation layer swaps in a new value when an
    endpoint is re-targeted.
    """

    wire_id: str
    from_node_id: str
    to_node_id: str

    # Carried for display only, never interpreted by the model
    resistance: Optional[float] = None

    def endpoint(self, end: WireEnd) -> str:
        """Return the node id at the given end."""
        if end is WireEnd.FROM:
            return self.from_node_id
        return self.to_node_id

    def with_endpoint(self, end: WireEnd, node_id: str) -> "WireData":
        """Return a copy of this wire with one end moved to another node."""
        if end is WireEnd.FROM:
            return replace(self, from_node_id=node_id)
        return replace(self, to_node_id=node_id)

    def get_node_ids(self) -> tuple[str, str]:
        return (self.from_node_id, self.to_node_id)

    def connects_node(self, node_id: str) -> bool:
        """Check if this wire ends on the given node."""
        return self.from_node_id == node_id or self.to_node_id == node_id

    def is_self_loop(self) -> bool:
        return self.from_node_id == self.to_node_id

    def __repr__(self) -> str:
        return f"WireData({self.wire_id}: {self.from_node_id} -> {self.to_node_id})"
