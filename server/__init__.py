"""
FastAPI backend server for the HTML Decks editor.

Provides REST API and WebSocket endpoints for:
- Theme listing
- Editor sessions (theme selection, slide add/remove)
- Live editing from a browser surface
- HTML export
"""

__version__ = "0.1.0"
