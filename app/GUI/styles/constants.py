"""
constants.py - Centralized drawing constants for the canvas view.

User-tunable sizes (hit radii, wire width, dash pattern) live in
controllers.settings; this file only holds fixed look-and-feel values.
"""

from models.element import ELEMENT_COLORS

# Window layout
WINDOW_TITLE = "Wire Canvas"
SCENE_MARGIN = 50              # Padding around the scene rect

# Colors
BACKGROUND_COLOR = "#F0F0F0"
WIRE_COLOR = "#2C3E50"
WIRE_EDIT_COLOR = "#3498DB"    # Wire whose end is following the pointer
PREVIEW_COLOR = "#E74C3C"      # In-flight wire while creating
TERMINAL_COLOR = "#FF0000"
TERMINAL_ACTIVE_COLOR = "#27AE60"
ELEMENT_OUTLINE_COLOR = "#333333"
LABEL_COLOR = "#222222"

# Z order (higher is drawn on top)
Z_ELEMENT = 0
Z_WIRE = 10
Z_TERMINAL = 20
Z_PREVIEW = 100

# Element fill colors, sourced from models
ELEMENT_FILL = dict(ELEMENT_COLORS)
