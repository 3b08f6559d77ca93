"""
Pure Python data models for the wire canvas.

This package contains Qt-free data classes for elements, their terminal
nodes, wires and the interaction state. All models use only Python
standard library types (no PyQt6 dependencies).
"""

from .circuit import CircuitModel, build_demo_scene
from .element import (
    ELEMENT_COLORS,
    ELEMENT_SIZES,
    ELEMENT_TYPES,
    TERMINAL_LAYOUTS,
    ElementData,
)
from .errors import (
    BrokenReferenceError,
    CircuitError,
    DuplicateEndpointError,
    InvalidTransitionError,
)
from .interaction import CreatingWire, EditingWire, Idle, InteractionState
from .node import NodeData
from .wire import WireData, WireEnd

__all__ = [
    "CircuitModel",
    "build_demo_scene",
    "ElementData",
    "ELEMENT_TYPES",
    "ELEMENT_SIZES",
    "ELEMENT_COLORS",
    "TERMINAL_LAYOUTS",
    "NodeData",
    "WireData",
    "WireEnd",
    "InteractionState",
    "Idle",
    "CreatingWire",
    "EditingWire",
    "CircuitError",
    "BrokenReferenceError",
    "InvalidTransitionError",
    "DuplicateEndpointError",
]
