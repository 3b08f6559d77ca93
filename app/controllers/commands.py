"""
Command objects produced by the wire interaction state machine.

Each command describes one mutation decided by a user gesture. The
interaction controller executes it against the CircuitController in a
single synchronous step, so no partial change is ever visible to the
coordinate resolver.
"""

from abc import ABC, abstractmethod
from typing import Optional

from models.wire import WireEnd


class Command(ABC):
    """Base class for gesture commands."""

    @abstractmethod
    def execute(self, controller) -> None:
        """Apply the command through the given CircuitController."""
        pass

    def get_description(self) -> str:
        """Return a human-readable description of this command."""
        return self.__class__.__name__

    def __eq__(self, other) -> bool:
        return type(self) is type(other) and vars(self) == vars(other)

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in vars(self).items())
        return f"{self.__class__.__name__}({fields})"


class InsertWireCommand(Command):
    """Command to connect two terminals with a new wire."""

    def __init__(self, from_node_id: str, to_node_id: str):
        self.from_node_id = from_node_id
        self.to_node_id = to_node_id
        self.wire_id: Optional[str] = None

    def execute(self, controller) -> None:
        """Insert the wire and store its ID."""
        self.wire_id = controller.insert_wire(self.from_node_id, self.to_node_id)

    def get_description(self) -> str:
        return f"Connect {self.from_node_id} to {self.to_node_id}"


class RetargetWireEndpointCommand(Command):
    """Command to move one end of a wire to another terminal."""

    def __init__(self, wire_id: str, end: WireEnd, node_id: str):
        self.wire_id = wire_id
        self.end = end
        self.node_id = node_id

    def execute(self, controller) -> None:
        controller.retarget_wire_endpoint(self.wire_id, self.end, self.node_id)

    def get_description(self) -> str:
        return f"Move {self.end.value} end of {self.wire_id} to {self.node_id}"


class DeleteWireCommand(Command):
    """Command to delete a wire."""

    def __init__(self, wire_id: str):
        self.wire_id = wire_id

    def execute(self, controller) -> None:
        controller.delete_wire(self.wire_id)

    def get_description(self) -> str:
        return f"Delete {self.wire_id}"


class MoveElementCommand(Command):
    """Command to move an element to a new position."""

    def __init__(self, element_id: str, position: tuple[float, float]):
        self.element_id = element_id
        self.position = position

    def execute(self, controller) -> None:
        controller.move_element(self.element_id, self.position)

    def get_description(self) -> str:
        return f"Move {self.element_id}"
