"""Components for the reqline screen."""

from reqline.components.cursor_editor import CursorDirection, CursorEditor
from reqline.components.focus_grid import FocusGrid, NavDirection, Region, region_at
from reqline.components.pane import hstack, render_box, render_footer

__all__ = [
    "CursorDirection",
    "CursorEditor",
    "FocusGrid",
    "NavDirection",
    "Region",
    "hstack",
    "region_at",
    "render_box",
    "render_footer",
]
