"""Textual terminal surface.

Only the controller and render helpers are imported eagerly; ``app`` pulls
in Textual itself and is loaded on demand.
"""

from .controller import TextualEditorAdapter, TextualUIHooks, normalize_key
from .render import render_status, render_text_area, text_area_size

__all__ = [
    "TextualEditorAdapter",
    "TextualUIHooks",
    "normalize_key",
    "render_status",
    "render_text_area",
    "text_area_size",
]
