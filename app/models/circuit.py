"""
CircuitModel - Central data store for canvas state.

This module contains no Qt dependencies. It holds every element (with
its terminal nodes) and every wire, and answers the lookups the
interaction layer needs. Lookups never raise; a miss returns None.
"""

from dataclasses import dataclass, field
from typing import Optional

from .element import ElementData
from .node import NodeData
from .wire import WireData


@dataclass
class CircuitModel:
    """
    Central data store holding all canvas state.

    Elements and wires are kept in insertion-ordered dicts so the render
    order is stable. A node -> owning element index keeps node lookups
    O(1) amortized on the drawing path.
    """

    elements: dict[str, ElementData] = field(default_factory=dict)
    wires: dict[str, WireData] = field(default_factory=dict)
    element_counter: dict[str, int] = field(default_factory=dict)
    wire_counter: int = 0

    _node_owner: dict[str, str] = field(default_factory=dict, repr=False)

    # --- Element operations ---

    def add_element(self, element: ElementData) -> None:
        """Add an element and index its nodes."""
        if element.element_id in self.elements:
            raise ValueError(f"Duplicate element id: {element.element_id}")
        for node in element.nodes:
            if node.node_id in self._node_owner:
                raise ValueError(f"Duplicate node id: {node.node_id}")
        self.elements[element.element_id] = element
        for node in element.nodes:
            self._node_owner[node.node_id] = element.element_id

    def remove_element(self, element_id: str) -> list[str]:
        """
        Remove an element and return ids of wires that referenced its nodes.

        The caller is responsible for removing the returned wires.
        """
        element = self.elements.pop(element_id, None)
        if element is None:
            return []

        wire_ids = []
        for node in element.nodes:
            self._node_owner.pop(node.node_id, None)
            wire_ids.extend(w.wire_id for w in self.wires_for_node(node.node_id))
        return list(dict.fromkeys(wire_ids))

    def remove_node(self, node_id: str) -> list[str]:
        """
        Remove a single terminal from its element.

        Returns ids of wires that referenced it; the caller removes them.
        """
        element = self.find_parent_of(node_id)
        if element is None:
            return []
        element.nodes = [n for n in element.nodes if n.node_id != node_id]
        self._node_owner.pop(node_id, None)
        return [w.wire_id for w in self.wires_for_node(node_id)]

    # --- Lookups ---

    def find_element(self, element_id: str) -> Optional[ElementData]:
        return self.elements.get(element_id)

    def find_parent_of(self, node_id: str) -> Optional[ElementData]:
        """Resolve the element that owns a node."""
        owner_id = self._node_owner.get(node_id)
        if owner_id is None:
            return None
        element = self.elements.get(owner_id)
        if element is None or element.get_node(node_id) is None:
            return None
        return element

    def find_node(self, node_id: str) -> Optional[NodeData]:
        element = self.find_parent_of(node_id)
        if element is None:
            return None
        return element.get_node(node_id)

    def find_wire(self, wire_id: str) -> Optional[WireData]:
        return self.wires.get(wire_id)

    def wires_for_node(self, node_id: str) -> list[WireData]:
        """Return all wires with an end on the given node."""
        return [w for w in self.wires.values() if w.connects_node(node_id)]

    def iter_nodes(self):
        """Yield every node of every element, in element order."""
        for element in self.elements.values():
            yield from element.nodes

    # --- Wire operations ---

    def next_wire_id(self) -> str:
        """Mint a new wire id (wire-0, wire-1, ...)."""
        wire_id = f"wire-{self.wire_counter}"
        self.wire_counter += 1
        return wire_id

    def add_wire(self, wire: WireData) -> None:
        self.wires[wire.wire_id] = wire

    def replace_wire(self, wire: WireData) -> None:
        """Swap in a new value for an existing wire, keeping its order."""
        if wire.wire_id not in self.wires:
            raise KeyError(wire.wire_id)
        self.wires[wire.wire_id] = wire

    def remove_wire(self, wire_id: str) -> Optional[WireData]:
        return self.wires.pop(wire_id, None)

    # --- Canvas operations ---

    def clear(self) -> None:
        """Clear all canvas data."""
        self.elements.clear()
        self.wires.clear()
        self.element_counter.clear()
        self.wire_counter = 0
        self._node_owner.clear()


def build_demo_scene() -> CircuitModel:
    """Return the starting scene: two lightbulbs, no wires."""
    model = CircuitModel()
    model.add_element(ElementData.create("lightbulb-1", "Lightbulb", (100.0, 100.0)))
    model.add_element(ElementData.create("lightbulb-2", "Lightbulb", (200.0, 200.0)))
    model.element_counter["lightbulb"] = 2
    return model
