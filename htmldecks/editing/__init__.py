"""
Editing: structural edit engine, editor session and surface bridge.
"""

from htmldecks.editing.bridge import BaseSurface, SyncBridge
from htmldecks.editing.debounce import Debouncer
from htmldecks.editing.engine import EditEngine
from htmldecks.editing.session import EditorSession

__all__ = ["EditEngine", "EditorSession", "SyncBridge", "BaseSurface", "Debouncer"]
