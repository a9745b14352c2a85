"""
Server-side editor sessions.

Each session pairs an EditorSession with a SyncBridge whose surface queues
updates in an outbox, and keeps the websockets connected to it. Handlers
push the outbox after every event; debounced commits push it when their
timer fires.
"""

import asyncio
import uuid
from typing import Any, Callable, Dict, List, Optional

from fastapi import WebSocket

from htmldecks.config import EditorSettings
from htmldecks.editing import BaseSurface, EditorSession, SyncBridge
from htmldecks.themes import Theme, ThemeCatalog

from server.models import SessionResponse, SurfaceEvent


class OutboxSurface(BaseSurface):
    """Surface that records updates as JSON messages."""

    def __init__(self):
        self.outbox: List[Dict[str, Any]] = []

    def drain(self) -> List[Dict[str, Any]]:
        messages, self.outbox = self.outbox, []
        return messages

    def show_deck(self, slides: List[str], thumbnails: List[str]) -> None:
        self.outbox.append({"type": "deck", "slides": slides, "thumbnails": thumbnails})

    def replace_slide(self, index: int, html: str) -> None:
        self.outbox.append({"type": "slide", "index": index, "html": html})

    def update_thumbnail(self, index: int, html: str) -> None:
        self.outbox.append({"type": "thumbnail", "index": index, "html": html})

    def focus_field(self, slide_index: int, field: str) -> None:
        self.outbox.append({"type": "focus", "slide_index": slide_index, "field": field})

    def show_refusal(self, message: str) -> None:
        self.outbox.append({"type": "refusal", "message": message})

    def set_counter(self, current: int, total: int) -> None:
        self.outbox.append(
            {"type": "counter", "current": current, "total": total, "label": f"{current + 1} / {total}"}
        )


class LoopScheduler:
    """
    call_later() on the running event loop, with a hook after each callback.

    The hook lets debounced commits push their surface updates without an
    incoming event.
    """

    def __init__(self, after: Optional[Callable[[], None]] = None):
        self.after = after

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any):
        def run() -> None:
            callback(*args)
            if self.after is not None:
                self.after()

        return asyncio.get_running_loop().call_later(delay, run)


class EditorState:
    """One live editor: session, surface, bridge and connected websockets."""

    def __init__(self, session_id: str, theme: Theme, settings: EditorSettings):
        self.session_id = session_id
        self.session = EditorSession.start(theme, debug=settings.debug)
        self.surface = OutboxSurface()
        self.scheduler = LoopScheduler()
        self.bridge = SyncBridge(
            self.session,
            self.surface,
            self.scheduler,
            debounce_ms=settings.debounce_ms,
        )
        self.connections: List[WebSocket] = []

    async def connect(self, websocket: WebSocket):
        """Accept a websocket and send it the whole deck."""
        await websocket.accept()
        self.connections.append(websocket)

        loop = asyncio.get_running_loop()
        self.scheduler.after = lambda: loop.create_task(self.push())

        self.bridge.load()
        await self.push()

    def disconnect(self, websocket: WebSocket):
        if websocket in self.connections:
            self.connections.remove(websocket)
        if not self.connections:
            self.scheduler.after = None

    async def push(self):
        """Send queued surface updates to every connected websocket."""
        messages = self.surface.drain()
        if not messages:
            return

        dead_connections = []
        for websocket in list(self.connections):
            try:
                for message in messages:
                    await websocket.send_json(message)
            except Exception:
                dead_connections.append(websocket)

        for websocket in dead_connections:
            self.disconnect(websocket)

    def apply(self, action: Callable[[], Any]) -> Any:
        """
        Run a REST-triggered edit: commit pending text, act, resend the deck.

        Raises:
            EditRefused: if the edit would break a deck invariant
        """
        self.bridge.debouncer.flush()
        result = action()
        self.bridge.load()
        return result

    def handle(self, event: SurfaceEvent) -> Any:
        """
        Dispatch one surface event to the bridge.

        Raises:
            InvalidFieldPath: for malformed field paths
            KeyError: for unknown commands
            TypeError: for command arguments that do not match
        """
        bridge = self.bridge
        if event.event == "focus":
            return bridge.on_focus(event.slide_index, event.field or "")
        if event.event == "input":
            return bridge.on_input(event.slide_index, event.field or "", event.text)
        if event.event == "blur":
            return bridge.on_blur()
        if event.event == "key":
            return bridge.on_key(
                event.slide_index,
                event.field or "",
                event.key or "",
                event.text,
                event.caret_at_start,
            )
        return bridge.command(event.command or "", **event.args)

    def to_response(self) -> SessionResponse:
        return SessionResponse(
            session_id=self.session_id,
            theme_id=self.session.theme.id,
            current_slide_index=self.session.current_slide_index,
            slide_count=self.session.slide_count,
            deck=self.session.deck.to_dict(),
        )


class SessionManager:
    """In-memory registry of editor sessions."""

    def __init__(self, catalog: ThemeCatalog, settings: EditorSettings):
        self.catalog = catalog
        self.settings = settings
        self.sessions: Dict[str, EditorState] = {}

    def create(self, theme_id: Optional[str] = None) -> EditorState:
        """
        Raises:
            UnknownThemeError: if the theme id is not in the catalog
        """
        theme = self.catalog.get(theme_id or self.settings.default_theme)
        session_id = str(uuid.uuid4())
        state = EditorState(session_id, theme, self.settings)
        self.sessions[session_id] = state
        print(f"[Session] Created {session_id} with theme {theme.id}")
        return state

    def get(self, session_id: str) -> Optional[EditorState]:
        return self.sessions.get(session_id)

    def close(self, session_id: str) -> None:
        state = self.sessions.pop(session_id, None)
        if state is not None:
            state.bridge.debouncer.cancel()
            print(f"[Session] Closed {session_id}")
