"""
InteractionController - Drives the wire interaction session.

This module contains no Qt dependencies. It owns the current
InteractionState, feeds input events through the state machine,
executes the resulting commands on the CircuitController and exposes
what the view needs to draw the next frame.
"""

import logging
from typing import Optional

from models.circuit import CircuitModel
from models.element import ElementData
from models.errors import (
    BrokenReferenceError,
    DuplicateEndpointError,
    InvalidTransitionError,
)
from models.geometry import (
    absolute_position,
    distance,
    distance_to_segment,
    resolve_node,
    wire_endpoints,
)
from models.interaction import (
    CanvasClicked,
    CreatingWire,
    EditingWire,
    ElementClicked,
    ElementDragged,
    Event,
    Idle,
    InteractionState,
    Point,
    PointerMoved,
    TerminalClicked,
    WireClicked,
)

from .circuit_controller import CircuitController
from .settings import SettingsRegistry
from .wire_interaction import transition

logger = logging.getLogger(__name__)

Segment = tuple[str, Point, Point]


class InteractionController:
    """
    Session driver for wire creation, re-routing and deletion.

    Events are processed one at a time, to completion. Errors raised by
    the state machine or the mutation layer never escape ``dispatch``:

    - InvalidTransitionError: the event is ignored.
    - DuplicateEndpointError: the mutation is rejected, the mode is kept.
    - BrokenReferenceError: reported, and the gesture is abandoned (Idle).
    """

    def __init__(self, circuit: Optional[CircuitController] = None,
                 settings: Optional[SettingsRegistry] = None):
        self.circuit = circuit if circuit is not None else CircuitController()
        self.settings = settings if settings is not None else SettingsRegistry()
        self.state = InteractionState()
        # Dangling wires already reported by wire_segments()
        self._reported_wires: set[str] = set()

    @property
    def model(self) -> CircuitModel:
        return self.circuit.model

    # --- Event dispatch ---

    def dispatch(self, event: Event) -> InteractionState:
        """Process one input event and return the resulting state."""
        try:
            new_state, command = transition(self.model, self.state, event)
        except InvalidTransitionError as e:
            logger.debug("Ignoring event: %s", e)
            self.circuit._notify('event_ignored', event)
            return self.state
        except BrokenReferenceError as e:
            self._report_broken(e)
            self._set_state(self.state.with_mode(Idle()))
            return self.state

        if command is not None:
            try:
                command.execute(self.circuit)
            except DuplicateEndpointError as e:
                logger.warning("Rejected %s: %s", command.get_description(), e)
                self.circuit._notify('event_ignored', event)
                return self.state
            except BrokenReferenceError as e:
                self._report_broken(e)
                new_state = new_state.with_mode(Idle())

        self._set_state(new_state)
        return self.state

    def _set_state(self, state: InteractionState) -> None:
        if state != self.state:
            if state.mode != self.state.mode:
                logger.debug("Interaction mode %s -> %s", self.state.mode, state.mode)
            self.state = state
            self.circuit._notify('interaction_changed', state)

    def _report_broken(self, error: BrokenReferenceError) -> None:
        logger.warning("Broken reference: %s", error)
        self.circuit._notify('broken_reference', error)

    # --- Convenience inputs ---

    def pointer_move(self, x: float, y: float) -> InteractionState:
        return self.dispatch(PointerMoved((x, y)))

    def click_terminal(self, node_id: str) -> InteractionState:
        return self.dispatch(TerminalClicked(node_id))

    def click_wire(self, wire_id: str, x: float, y: float) -> InteractionState:
        return self.dispatch(WireClicked(wire_id, (x, y)))

    def click_canvas(self, x: float = 0.0, y: float = 0.0) -> InteractionState:
        return self.dispatch(CanvasClicked((x, y)))

    def click_element(self, element_id: str) -> InteractionState:
        return self.dispatch(ElementClicked(element_id))

    def drag_element(self, element_id: str, x: float, y: float) -> InteractionState:
        return self.dispatch(ElementDragged(element_id, (x, y)))

    def cancel(self) -> InteractionState:
        """Abandon the current gesture without changing any wire (Escape)."""
        self._set_state(self.state.with_mode(Idle()))
        return self.state

    def click_at(self, x: float, y: float) -> InteractionState:
        """Hit-test a click position and dispatch the matching click event."""
        self.pointer_move(x, y)
        return self.dispatch(self.hit_test((x, y)))

    # --- Hit testing ---

    def hit_test(self, position: Point) -> Event:
        """
        Classify a canvas position as a click target.

        Terminals win over wires, wires over element bodies. Wire bodies
        are not hit while a new wire is being created, and the wire under
        edit is never hit (its loose end sits under the pointer).
        """
        node_id = self.terminal_at(position)
        if node_id is not None:
            return TerminalClicked(node_id)

        if not isinstance(self.state.mode, CreatingWire):
            wire_id = self.wire_at(position)
            if wire_id is not None:
                return WireClicked(wire_id, position)

        element = self.element_at(position)
        if element is not None:
            return ElementClicked(element.element_id)
        return CanvasClicked(position)

    def terminal_at(self, position: Point) -> Optional[str]:
        """Return the id of the nearest terminal within click radius."""
        radius = float(self.settings.get("terminal_click_radius"))
        best_id, best_dist = None, radius
        for node in self.model.iter_nodes():
            dist = distance(position, absolute_position(self.model, node))
            if dist <= best_dist:
                best_id, best_dist = node.node_id, dist
        return best_id

    def wire_at(self, position: Point) -> Optional[str]:
        """Return the id of the nearest wire body within click width."""
        tolerance = float(self.settings.get("wire_click_width")) / 2
        mode = self.state.mode
        editing = mode.wire_id if isinstance(mode, EditingWire) else None
        best_id, best_dist = None, tolerance
        for wire in self.model.wires.values():
            if wire.wire_id == editing:
                continue
            try:
                start, end = wire_endpoints(self.model, wire, self.state)
            except BrokenReferenceError:
                continue
            dist = distance_to_segment(position, start, end)
            if dist <= best_dist:
                best_id, best_dist = wire.wire_id, dist
        return best_id

    def element_at(self, position: Point) -> Optional[ElementData]:
        """Return the top-most element whose body contains the position."""
        for element in reversed(list(self.model.elements.values())):
            if element.contains_point(position):
                return element
        return None

    # --- Render outputs ---

    def elements(self) -> list[ElementData]:
        return list(self.model.elements.values())

    def wire_segments(self) -> list[Segment]:
        """
        Resolve every wire to a drawable (wire_id, start, end) segment.

        Wires with a dangling node reference are skipped. Each one is
        reported once until it is removed or resolves again.
        """
        self._reported_wires.intersection_update(self.model.wires)
        segments = []
        for wire in self.model.wires.values():
            try:
                start, end = wire_endpoints(self.model, wire, self.state)
            except BrokenReferenceError as e:
                if wire.wire_id not in self._reported_wires:
                    self._reported_wires.add(wire.wire_id)
                    self._report_broken(e)
                continue
            self._reported_wires.discard(wire.wire_id)
            segments.append((wire.wire_id, start, end))
        return segments

    def preview_segment(self) -> Optional[tuple[Point, Point]]:
        """Return the in-flight wire (start terminal -> pointer) while creating."""
        mode = self.state.mode
        if not isinstance(mode, CreatingWire):
            return None
        try:
            start = resolve_node(self.model, mode.start_node_id)
        except BrokenReferenceError as e:
            self._report_broken(e)
            return None
        return (start, self.state.pointer)
