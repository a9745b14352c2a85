"""
Rendering pipeline: decks to standalone HTML documents and editable slides.
"""

from htmldecks.rendering.renderer import DeckRenderer, render_deck
from htmldecks.rendering.style import ThemeStyle
from htmldecks.rendering.views import build_slide_view, format_inline

__all__ = [
    "DeckRenderer",
    "ThemeStyle",
    "build_slide_view",
    "format_inline",
    "render_deck",
]
