"""
HTML Decks: themed, editable, self-contained HTML presentations.

An in-memory deck model, a structural edit engine driven by an editable
surface, and a deterministic renderer that exports a standalone document.
"""

__version__ = "0.1.0"
__author__ = "HTML Decks Team"

from htmldecks.models import Deck, Slide, Metric
from htmldecks.editing import EditEngine, EditorSession, SyncBridge
from htmldecks.rendering import render_deck
from htmldecks.themes import Theme, ThemeCatalog, default_catalog

__all__ = [
    "Deck",
    "Slide",
    "Metric",
    "EditEngine",
    "EditorSession",
    "SyncBridge",
    "render_deck",
    "Theme",
    "ThemeCatalog",
    "default_catalog",
]
