"""
Wire interaction state machine.

This module contains no Qt dependencies. ``transition`` maps the current
InteractionState and one input event to the next state plus, at most,
one Command for the mutation layer. It only reads the model.

    Event              Idle               CreatingWire(s)         EditingWire(w, e)
    TerminalClicked n  CreatingWire(n)    n == s: Idle            retarget e of w to n, Idle
                                          else: insert s->n, Idle
    WireClicked w'     EditingWire(w',    invalid                 EditingWire(w', nearer end)
                         nearer end)
    CanvasClicked      no-op              Idle                    delete w, Idle
    PointerMoved p     pointer = p in every mode
    ElementDragged     move element in every mode, mode unchanged
"""

from typing import Optional

from models.circuit import CircuitModel
from models.errors import BrokenReferenceError, InvalidTransitionError
from models.geometry import disambiguate, wire_endpoints
from models.interaction import (
    CanvasClicked,
    CreatingWire,
    EditingWire,
    ElementDragged,
    Event,
    Idle,
    InteractionState,
    PointerMoved,
    TerminalClicked,
    WireClicked,
)

from .commands import (
    Command,
    DeleteWireCommand,
    InsertWireCommand,
    MoveElementCommand,
    RetargetWireEndpointCommand,
)

Transition = tuple[InteractionState, Optional[Command]]


def transition(model: CircuitModel, state: InteractionState, event: Event) -> Transition:
    """
    Compute the next interaction state for one event.

    Raises:
        InvalidTransitionError: The event has no meaning in the current mode.
        BrokenReferenceError: A clicked wire does not exist.
    """
    if isinstance(event, PointerMoved):
        return state.with_pointer(event.position), None
    if isinstance(event, ElementDragged):
        return state, MoveElementCommand(event.element_id, event.position)
    if isinstance(event, TerminalClicked):
        return _on_terminal(state, event)
    if isinstance(event, WireClicked):
        return _on_wire(model, state, event)
    if isinstance(event, CanvasClicked):
        return _on_canvas(state)
    raise InvalidTransitionError(state.mode, event)


def _on_terminal(state: InteractionState, event: TerminalClicked) -> Transition:
    mode = state.mode
    idle = state.with_mode(Idle())

    if isinstance(mode, Idle):
        return state.with_mode(CreatingWire(event.node_id)), None
    if isinstance(mode, CreatingWire):
        # Same terminal cancels; must be checked before committing
        if mode.start_node_id == event.node_id:
            return idle, None
        return idle, InsertWireCommand(mode.start_node_id, event.node_id)
    return idle, RetargetWireEndpointCommand(mode.wire_id, mode.end, event.node_id)


def _on_wire(model: CircuitModel, state: InteractionState, event: WireClicked) -> Transition:
    if isinstance(state.mode, CreatingWire):
        raise InvalidTransitionError(state.mode, event)

    wire = model.find_wire(event.wire_id)
    if wire is None:
        raise BrokenReferenceError("wire", event.wire_id, "wire click")

    # Grab against the wire's committed ends, not a pointer-following one
    from_pos, to_pos = wire_endpoints(model, wire, InteractionState())
    end = disambiguate(event.position, from_pos, to_pos)
    return state.with_mode(EditingWire(wire.wire_id, end)), None


def _on_canvas(state: InteractionState) -> Transition:
    mode = state.mode
    if isinstance(mode, Idle):
        return state, None
    if isinstance(mode, CreatingWire):
        return state.with_mode(Idle()), None
    # Dropping an edited end onto nothing removes the connection
    return state.with_mode(Idle()), DeleteWireCommand(mode.wire_id)
