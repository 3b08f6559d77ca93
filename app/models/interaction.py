"""
Interaction state and input events for the wire canvas.

This module contains no Qt dependencies. The state is a single immutable
value: one of three modes plus the last known pointer position. Having a
single mode field makes "creating and editing at the same time"
impossible to express.
"""

from dataclasses import dataclass, field, replace
from typing import Union

from .wire import WireEnd

Point = tuple[float, float]


# --- Modes ---


@dataclass(frozen=True)
class Idle:
    """Nothing in progress."""


@dataclass(frozen=True)
class CreatingWire:
    """A new wire is being dragged out from a terminal."""

    start_node_id: str


@dataclass(frozen=True)
class EditingWire:
    """One end of an existing wire is following the pointer."""

    wire_id: str
    end: WireEnd


Mode = Union[Idle, CreatingWire, EditingWire]


@dataclass(frozen=True)
class InteractionState:
    """Session-scoped interaction state. Never persisted."""

    mode: Mode = field(default_factory=Idle)
    pointer: Point = (0.0, 0.0)

    @property
    def is_idle(self) -> bool:
        return isinstance(self.mode, Idle)

    def with_mode(self, mode: Mode) -> "InteractionState":
        return replace(self, mode=mode)

    def with_pointer(self, pointer: Point) -> "InteractionState":
        return replace(self, pointer=(float(pointer[0]), float(pointer[1])))

    def editing_end(self, wire_id: str):
        """Return the end of wire_id under edit, or None."""
        if isinstance(self.mode, EditingWire) and self.mode.wire_id == wire_id:
            return self.mode.end
        return None


# --- Input events ---


@dataclass(frozen=True)
class PointerMoved:
    position: Point


@dataclass(frozen=True)
class TerminalClicked:
    node_id: str


@dataclass(frozen=True)
class WireClicked:
    """Click on a wire body; position is used to pick the nearer end."""

    wire_id: str
    position: Point


@dataclass(frozen=True)
class CanvasClicked:
    position: Point


@dataclass(frozen=True)
class ElementClicked:
    element_id: str


@dataclass(frozen=True)
class ElementDragged:
    """One intermediate sample of an element drag."""

    element_id: str
    position: Point


Event = Union[PointerMoved, TerminalClicked, WireClicked, CanvasClicked,
              ElementClicked, ElementDragged]
