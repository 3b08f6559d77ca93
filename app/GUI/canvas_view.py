"""
CanvasView - Qt view for the wire canvas.

The view holds no interaction logic. It translates mouse and keyboard
events into InteractionController inputs and redraws the scene from the
controller's render outputs whenever an observer event arrives.
"""

import logging

from PyQt6.QtCore import QPointF, QRectF, Qt
from PyQt6.QtGui import QBrush, QColor, QPainter, QPen
from PyQt6.QtWidgets import QGraphicsScene, QGraphicsView

from controllers.interaction_controller import InteractionController
from models.geometry import absolute_position
from models.interaction import CreatingWire, EditingWire, ElementClicked

from .styles.constants import (
    BACKGROUND_COLOR,
    ELEMENT_FILL,
    ELEMENT_OUTLINE_COLOR,
    LABEL_COLOR,
    PREVIEW_COLOR,
    SCENE_MARGIN,
    TERMINAL_ACTIVE_COLOR,
    TERMINAL_COLOR,
    WIRE_COLOR,
    WIRE_EDIT_COLOR,
    Z_ELEMENT,
    Z_PREVIEW,
    Z_TERMINAL,
    Z_WIRE,
)

logger = logging.getLogger(__name__)


class CanvasView(QGraphicsView):
    """Main drawing canvas"""

    def __init__(self, controller: InteractionController, parent=None):
        super().__init__(parent)
        self.controller = controller
        self.scene = QGraphicsScene(self)
        self.setScene(self.scene)

        width = self.controller.settings.get("canvas_width")
        height = self.controller.settings.get("canvas_height")
        self.setSceneRect(0, 0, width, height)
        self.setBackgroundBrush(QBrush(QColor(BACKGROUND_COLOR)))

        self.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.setDragMode(QGraphicsView.DragMode.NoDrag)
        self.setViewportUpdateMode(QGraphicsView.ViewportUpdateMode.FullViewportUpdate)
        self.setMouseTracking(True)  # Pointer moves drive the in-flight wire

        # (element_id, grab offset) while an element is being dragged
        self._drag = None

        self.controller.circuit.add_observer(self._on_model_event)
        self.refresh()

    # --- Observer ---

    def _on_model_event(self, event, data):
        # Nothing to redraw; broken_reference is also emitted by refresh() itself
        if event in ('event_ignored', 'broken_reference'):
            return
        self.refresh()

    # --- Drawing ---

    def refresh(self):
        """Rebuild all scene items from the controller's current outputs."""
        self.scene.clear()
        settings = self.controller.settings
        model = self.controller.model
        state = self.controller.state

        for element in self.controller.elements():
            width, height = element.get_size()
            body = self.scene.addRect(
                QRectF(element.x, element.y, width, height),
                QPen(QColor(ELEMENT_OUTLINE_COLOR), 1),
                QBrush(QColor(ELEMENT_FILL.get(element.element_type, "#CCCCCC"))),
            )
            body.setZValue(Z_ELEMENT)
            label = self.scene.addSimpleText(element.element_id)
            label.setBrush(QBrush(QColor(LABEL_COLOR)))
            label.setPos(element.x, element.y - 16)
            label.setZValue(Z_ELEMENT)

        editing_id = state.mode.wire_id if isinstance(state.mode, EditingWire) else None
        wire_width = float(settings.get("wire_width"))
        for wire_id, start, end in self.controller.wire_segments():
            color = WIRE_EDIT_COLOR if wire_id == editing_id else WIRE_COLOR
            line = self.scene.addLine(start[0], start[1], end[0], end[1],
                                      QPen(QColor(color), wire_width))
            line.setZValue(Z_WIRE)

        active_node = state.mode.start_node_id if isinstance(state.mode, CreatingWire) else None
        radius = float(settings.get("terminal_radius"))
        for node in model.iter_nodes():
            x, y = absolute_position(model, node)
            color = TERMINAL_ACTIVE_COLOR if node.node_id == active_node else TERMINAL_COLOR
            dot = self.scene.addEllipse(
                QRectF(x - radius, y - radius, 2 * radius, 2 * radius),
                QPen(Qt.PenStyle.NoPen),
                QBrush(QColor(color)),
            )
            dot.setZValue(Z_TERMINAL)

        preview = self.controller.preview_segment()
        if preview is not None:
            (sx, sy), (px, py) = preview
            pen = QPen(QColor(PREVIEW_COLOR), wire_width)
            pen.setDashPattern([float(v) for v in settings.get("preview_dash")])
            line = self.scene.addLine(sx, sy, px, py, pen)
            line.setZValue(Z_PREVIEW)

        rect = self.scene.itemsBoundingRect().adjusted(
            -SCENE_MARGIN, -SCENE_MARGIN, SCENE_MARGIN, SCENE_MARGIN)
        self.setSceneRect(self.sceneRect().united(rect))

    # --- Input ---

    def _scene_pos(self, event) -> QPointF:
        return self.mapToScene(event.position().toPoint())

    def mousePressEvent(self, event):
        """Route left clicks to the interaction controller"""
        if event is None:
            return
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return

        pos = self._scene_pos(event)
        x, y = pos.x(), pos.y()
        target = self.controller.hit_test((x, y))
        if isinstance(target, ElementClicked):
            element = self.controller.model.find_element(target.element_id)
            self._drag = (element.element_id, (x - element.x, y - element.y))
            logger.debug("Dragging %s", element.element_id)
            self.controller.pointer_move(x, y)
            self.controller.dispatch(target)
        else:
            self.controller.click_at(x, y)
        event.accept()

    def mouseMoveEvent(self, event):
        """Track the pointer and apply drag samples"""
        if event is None:
            return
        pos = self._scene_pos(event)
        x, y = pos.x(), pos.y()
        if self._drag is not None:
            element_id, (dx, dy) = self._drag
            self.controller.drag_element(element_id, x - dx, y - dy)
        self.controller.pointer_move(x, y)
        event.accept()

    def mouseReleaseEvent(self, event):
        if event is None:
            return
        self._drag = None
        super().mouseReleaseEvent(event)

    def keyPressEvent(self, event):
        """Escape abandons the current gesture"""
        if event is None:
            return
        if event.key() == Qt.Key.Key_Escape:
            self.controller.cancel()
        else:
            super().keyPressEvent(event)
