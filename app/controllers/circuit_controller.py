"""
CircuitController - Orchestrates element and wire mutations.

This module contains no Qt dependencies. It manages the CircuitModel
and notifies views of changes through an observer pattern. Every
mutation is synchronous; observers see the model after the whole
change has been applied.
"""

import logging
from typing import Any, Callable, Optional

from models.circuit import CircuitModel
from models.element import ID_PREFIXES, ElementData
from models.errors import BrokenReferenceError, DuplicateEndpointError
from models.wire import WireData, WireEnd

logger = logging.getLogger(__name__)


class CircuitController:
    """
    Controller for element and wire operations.

    Manages the CircuitModel and notifies registered observers when
    the model changes. Views register callbacks to stay in sync.

    Observer events:
        element_added (ElementData) - A new element was placed
        element_removed (str) - An element was removed (by ID)
        element_moved (ElementData) - An element was moved
        node_removed (str) - A terminal was removed (by ID)
        wire_added (WireData) - A new wire was committed
        wire_retargeted (WireData) - One end of a wire moved to another node
        wire_removed (str) - A wire was removed (by ID)
        circuit_cleared (None) - The canvas was cleared
        interaction_changed (InteractionState) - The interaction mode or pointer changed
        event_ignored (Event) - An input event had no meaning in the current mode
        broken_reference (BrokenReferenceError) - A dangling reference was found
    """

    def __init__(self, model: Optional[CircuitModel] = None):
        self.model = model if model is not None else CircuitModel()
        self._observers: list[Callable[[str, Any], None]] = []

    def add_observer(self, callback: Callable[[str, Any], None]) -> None:
        """Register a callback for model change events."""
        if callback not in self._observers:
            self._observers.append(callback)

    def remove_observer(self, callback: Callable[[str, Any], None]) -> None:
        """Unregister a previously registered callback."""
        if callback in self._observers:
            self._observers.remove(callback)

    def _notify(self, event: str, data: Any) -> None:
        """Notify all observers of a model change."""
        for observer in self._observers:
            try:
                observer(event, data)
            except (TypeError, AttributeError, RuntimeError) as e:
                logger.error("Error notifying observer: %s", e)

    # --- Element operations ---

    def add_element(self, element_type: str, position: tuple[float, float],
                    element_id: Optional[str] = None) -> ElementData:
        """
        Create and place a new element with its default terminals.

        Generates a unique ID from the element counter (lightbulb-1,
        resistor-1, ...) unless one is given. Generated IDs skip any
        already taken by an explicitly named element. The counter only
        advances once the element has been added.

        Raises:
            ValueError: For an unknown element type or a duplicate ID.
        """
        prefix = None
        if element_id is None:
            prefix = ID_PREFIXES.get(element_type, "element")
            count = self.model.element_counter.get(prefix, 0) + 1
            while f"{prefix}-{count}" in self.model.elements:
                count += 1
            element_id = f"{prefix}-{count}"

        element = ElementData.create(element_id, element_type, position)
        self.model.add_element(element)
        if prefix is not None:
            self.model.element_counter[prefix] = count
        self._notify('element_added', element)
        return element

    def remove_element(self, element_id: str) -> None:
        """Remove an element and every wire ending on one of its terminals."""
        if self.model.find_element(element_id) is None:
            return
        for wire_id in self.model.remove_element(element_id):
            self.delete_wire(wire_id)
        self._notify('element_removed', element_id)

    def remove_node(self, node_id: str) -> None:
        """Remove a single terminal and every wire ending on it."""
        if self.model.find_node(node_id) is None:
            return
        for wire_id in self.model.remove_node(node_id):
            self.delete_wire(wire_id)
        self._notify('node_removed', node_id)

    def move_element(self, element_id: str, position: tuple[float, float]) -> None:
        """
        Move an element to a new position.

        Wires are not touched: they reference nodes, and nodes are stored
        relative to their element, so attached wires follow on next read.
        """
        element = self.model.find_element(element_id)
        if element is None:
            logger.warning("Broken reference: move_element on unknown element %s", element_id)
            return
        element.position = (float(position[0]), float(position[1]))
        self._notify('element_moved', element)

    # --- Wire operations ---

    def insert_wire(self, from_node_id: str, to_node_id: str,
                    resistance: Optional[float] = None) -> str:
        """
        Commit a new wire between two distinct, existing terminals.

        Returns:
            The new wire's ID.

        Raises:
            DuplicateEndpointError: If both ends are the same node.
            BrokenReferenceError: If either node does not exist.
        """
        if from_node_id == to_node_id:
            raise DuplicateEndpointError("<new>", from_node_id)
        for node_id in (from_node_id, to_node_id):
            if self.model.find_node(node_id) is None:
                raise BrokenReferenceError("node", node_id, "insert_wire")

        wire = WireData(
            wire_id=self.model.next_wire_id(),
            from_node_id=from_node_id,
            to_node_id=to_node_id,
            resistance=resistance,
        )
        self.model.add_wire(wire)
        logger.info("Wire %s: %s -> %s", wire.wire_id, from_node_id, to_node_id)
        self._notify('wire_added', wire)
        return wire.wire_id

    def retarget_wire_endpoint(self, wire_id: str, end: WireEnd, node_id: str) -> None:
        """
        Point one end of an existing wire at another terminal.

        Raises:
            BrokenReferenceError: If the wire or the node does not exist.
            DuplicateEndpointError: If the wire would end on the same node
                twice. The wire is left unchanged.
        """
        wire = self.model.find_wire(wire_id)
        if wire is None:
            raise BrokenReferenceError("wire", wire_id, "retarget_wire_endpoint")
        if self.model.find_node(node_id) is None:
            raise BrokenReferenceError("node", node_id, "retarget_wire_endpoint")

        updated = wire.with_endpoint(end, node_id)
        if updated.is_self_loop():
            raise DuplicateEndpointError(wire_id, node_id)

        self.model.replace_wire(updated)
        logger.info("Wire %s: %s end -> %s", wire_id, end.value, node_id)
        self._notify('wire_retargeted', updated)

    def delete_wire(self, wire_id: str) -> None:
        """Remove a wire by ID. Unknown IDs are ignored."""
        if self.model.remove_wire(wire_id) is not None:
            logger.info("Wire %s deleted", wire_id)
            self._notify('wire_removed', wire_id)

    # --- Canvas operations ---

    def clear_circuit(self) -> None:
        """Clear the entire canvas."""
        self.model.clear()
        self._notify('circuit_cleared', None)
