"""
MainWindow - Top-level window hosting the wire canvas.
"""

from PyQt6.QtWidgets import QMainWindow

from controllers.interaction_controller import InteractionController
from models.interaction import CreatingWire, EditingWire

from .canvas_view import CanvasView
from .styles.constants import WINDOW_TITLE


class MainWindow(QMainWindow):
    """Main application window"""

    def __init__(self, controller: InteractionController):
        super().__init__()
        self.controller = controller
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(int(controller.settings.get("canvas_width")),
                    int(controller.settings.get("canvas_height")))

        self.canvas = CanvasView(controller, self)
        self.setCentralWidget(self.canvas)
        self.statusBar().showMessage("Click a terminal to start a wire")
        controller.circuit.add_observer(self._on_model_event)

    def _on_model_event(self, event, data):
        if event == 'interaction_changed':
            self.statusBar().showMessage(_describe_mode(data.mode))
        elif event == 'broken_reference':
            self.statusBar().showMessage(f"Skipped: {data}")


def _describe_mode(mode) -> str:
    if isinstance(mode, CreatingWire):
        return f"Connecting from {mode.start_node_id} (click empty canvas to cancel)"
    if isinstance(mode, EditingWire):
        return f"Moving {mode.end.value} end of {mode.wire_id} (click empty canvas to delete)"
    return "Click a terminal to start a wire"
