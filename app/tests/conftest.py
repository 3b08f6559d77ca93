"""
Shared test fixtures for the wire canvas test suite.

Model and controller fixtures are pure Python (no Qt dependencies).
"""

import os
import sys
from pathlib import Path

# Ensure app/ is on sys.path so bare imports (models, controllers, GUI)
# work when running individual test files (e.g., python -m pytest app/tests/unit/test_foo.py).
_app_dir = str(Path(__file__).resolve().parent.parent)
if _app_dir not in sys.path:
    sys.path.insert(0, _app_dir)

# Qt widget tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from controllers.circuit_controller import CircuitController
from controllers.interaction_controller import InteractionController
from controllers.settings import SettingsRegistry
from models.circuit import build_demo_scene
from models.element import ElementData
from models.wire import WireData

# Terminal positions of the demo scene (lightbulbs at (100, 100) and (200, 200))
LB1_N1 = (102.0, 140.0)
LB1_N2 = (140.0, 140.0)
LB2_N1 = (202.0, 240.0)
LB2_N2 = (240.0, 240.0)
EMPTY = (500.0, 500.0)


def make_element(element_id, position=(0.0, 0.0), element_type="Lightbulb"):
    """Helper to create an ElementData with its default terminals."""
    return ElementData.create(element_id, element_type, position)


def make_wire(wire_id, from_node_id, to_node_id):
    """Helper to create a WireData."""
    return WireData(wire_id=wire_id, from_node_id=from_node_id, to_node_id=to_node_id)


@pytest.fixture
def model():
    """Two lightbulbs, no wires."""
    return build_demo_scene()


@pytest.fixture
def circuit(model):
    return CircuitController(model)


@pytest.fixture
def settings(tmp_path):
    return SettingsRegistry(config_path=tmp_path / "settings.json")


@pytest.fixture
def session(circuit, settings):
    return InteractionController(circuit, settings)


@pytest.fixture
def events():
    """Fixture that returns a list and a callback that appends events to it."""
    recorded = []

    def callback(event, data):
        recorded.append((event, data))

    return recorded, callback
