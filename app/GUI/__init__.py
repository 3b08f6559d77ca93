from .canvas_view import CanvasView
from .main_window import MainWindow

__all__ = [
    'CanvasView',
    'MainWindow',
]
