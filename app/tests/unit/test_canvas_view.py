"""Tests for the Qt canvas view: it must mirror the controller's outputs."""

import pytest

pytest.importorskip("PyQt6")

from PyQt6.QtCore import QPoint, Qt
from PyQt6.QtWidgets import QGraphicsEllipseItem, QGraphicsLineItem

from GUI.canvas_view import CanvasView
from GUI.main_window import MainWindow
from models.interaction import CreatingWire, Idle

A = "lightbulb-1-node-2"
B = "lightbulb-2-node-1"


def _items(view, item_type):
    return [item for item in view.scene.items() if isinstance(item, item_type)]


@pytest.fixture
def view(qtbot, session):
    canvas = CanvasView(session)
    qtbot.addWidget(canvas)
    return canvas


class TestCanvasDrawing:
    def test_terminals_drawn(self, view):
        assert len(_items(view, QGraphicsEllipseItem)) == 4

    def test_wire_drawn_after_commit(self, view, session):
        session.click_terminal(A)
        session.click_terminal(B)
        assert len(_items(view, QGraphicsLineItem)) == 1

    def test_preview_drawn_while_creating(self, view, session):
        session.click_terminal(A)
        session.pointer_move(300.0, 300.0)
        lines = _items(view, QGraphicsLineItem)
        assert len(lines) == 1
        assert lines[0].pen().style() == Qt.PenStyle.CustomDashLine

    def test_wire_removed_after_delete(self, view, session):
        session.click_terminal(A)
        session.click_terminal(B)
        session.circuit.delete_wire("wire-0")
        assert _items(view, QGraphicsLineItem) == []


class TestCanvasInput:
    def test_click_terminal_starts_wire(self, qtbot, view, session):
        view.resize(800, 600)
        view.show()
        qtbot.waitExposed(view)
        target = view.mapFromScene(140.0, 140.0)
        qtbot.mouseClick(view.viewport(), Qt.MouseButton.LeftButton, pos=QPoint(target.x(), target.y()))
        assert session.state.mode == CreatingWire(A)

    def test_escape_cancels(self, qtbot, view, session):
        session.click_terminal(A)
        qtbot.keyClick(view, Qt.Key.Key_Escape)
        assert session.state.mode == Idle()


class TestMainWindow:
    def test_status_follows_mode(self, qtbot, session):
        window = MainWindow(session)
        qtbot.addWidget(window)
        session.click_terminal(A)
        assert A in window.statusBar().currentMessage()
        session.click_canvas(500.0, 500.0)
        assert window.statusBar().currentMessage().startswith("Click a terminal")
