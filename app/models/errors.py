"""
Error taxonomy for the wire-connection model.

None of these are fatal to the session. The interaction controller turns
them into log records and observer notifications, leaving the canvas in a
visible-but-inert state.
"""


class CircuitError(Exception):
    """Base class for wire-canvas model errors."""


class BrokenReferenceError(CircuitError):
    """A wire or node references a node/element that does not exist."""

    def __init__(self, kind: str, ref_id: str, context: str = ""):
        self.kind = kind
        self.ref_id = ref_id
        self.context = context
        message = f"{kind} '{ref_id}' does not exist"
        if context:
            message += f" ({context})"
        super().__init__(message)


class InvalidTransitionError(CircuitError):
    """An event arrived that the current interaction mode does not accept."""

    def __init__(self, mode, event):
        self.mode = mode
        self.event = event
        super().__init__(f"{type(event).__name__} is not handled in {type(mode).__name__}")


class DuplicateEndpointError(CircuitError):
    """A wire would have both of its ends on the same node."""

    def __init__(self, wire_id: str, node_id: str):
        self.wire_id = wire_id
        self.node_id = node_id
        super().__init__(f"wire '{wire_id}' cannot connect node '{node_id}' to itself")
