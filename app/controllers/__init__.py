"""
Controllers for the wire canvas.

This package contains Qt-free controller classes that orchestrate
operations between models and views using an observer pattern.
"""

from .circuit_controller import CircuitController
from .interaction_controller import InteractionController
from .settings import SettingsRegistry
from .wire_interaction import transition

__all__ = [
    "CircuitController",
    "InteractionController",
    "SettingsRegistry",
    "transition",
]
