"""
Main FastAPI application.
"""

import json
from contextlib import asynccontextmanager
from typing import Optional, List

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Request, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import ValidationError

from htmldecks.config import EditorSettings
from htmldecks.errors import EditRefused, InvalidFieldPath, UnknownThemeError
from htmldecks.export import export_deck
from htmldecks.themes import default_catalog

from server.models import (
    AddSlideRequest,
    CreateSessionRequest,
    SelectThemeRequest,
    SessionResponse,
    SurfaceEvent,
    ThemeSummary,
)
from server.sessions import EditorState, SessionManager

# Lifespan context manager
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    load_dotenv()
    app.state.settings = EditorSettings.from_env()
    app.state.catalog = default_catalog()
    app.state.sessions = SessionManager(app.state.catalog, app.state.settings)
    yield
    # Shutdown
    for session_id in list(app.state.sessions.sessions):
        app.state.sessions.close(session_id)

app = FastAPI(
    title="HTML Decks API",
    description="Edit themed HTML presentations and export them as standalone files",
    version="0.1.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://localhost:3001"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(EditRefused)
async def edit_refused_handler(request: Request, exc: EditRefused):
    return JSONResponse(status_code=409, content={"detail": str(exc)})


@app.exception_handler(UnknownThemeError)
async def unknown_theme_handler(request: Request, exc: UnknownThemeError):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


def get_state(session_id: str) -> EditorState:
    state = app.state.sessions.get(session_id)
    if state is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return state


# --- API Endpoints ---

@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "message": "HTML Decks API is running"}


@app.get("/api/themes", response_model=List[ThemeSummary])
async def list_themes():
    """List themes for the theme picker."""
    return [
        ThemeSummary(id=t.id, name=t.name, description=t.description, free=t.free)
        for t in app.state.catalog
    ]


@app.post("/api/sessions", response_model=SessionResponse)
async def create_session(request: CreateSessionRequest):
    """Open an editor session on a theme's default deck."""
    state = app.state.sessions.create(request.theme_id)
    return state.to_response()


@app.get("/api/sessions/{session_id}", response_model=SessionResponse)
async def get_session(session_id: str):
    """Current deck and selection of a session."""
    return get_state(session_id).to_response()


@app.delete("/api/sessions/{session_id}")
async def close_session(session_id: str):
    """Close a session and drop its deck."""
    get_state(session_id)
    app.state.sessions.close(session_id)
    return {"message": "Session closed"}


@app.put("/api/sessions/{session_id}/theme", response_model=SessionResponse)
async def select_theme(session_id: str, request: SelectThemeRequest):
    """
    Switch to another theme.

    The working deck is replaced by the new theme's defaults.
    """
    state = get_state(session_id)
    theme = app.state.catalog.get(request.theme_id)
    state.bridge.select_theme(theme)
    await state.push()
    return state.to_response()


@app.post("/api/sessions/{session_id}/slides", response_model=SessionResponse)
async def add_slide(session_id: str, request: AddSlideRequest):
    """Append a default slide and select it."""
    state = get_state(session_id)
    try:
        state.apply(lambda: state.session.add_slide(request.slide_type))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    await state.push()
    return state.to_response()


@app.delete("/api/sessions/{session_id}/slides/{index}", response_model=SessionResponse)
async def remove_slide(session_id: str, index: int):
    """Remove a slide. The last remaining slide cannot be removed (409)."""
    state = get_state(session_id)
    if not 0 <= index < state.session.slide_count:
        raise HTTPException(status_code=404, detail="Slide not found")
    state.apply(lambda: state.session.remove_slide(index))
    await state.push()
    return state.to_response()


@app.get("/api/sessions/{session_id}/export")
async def export_session(session_id: str, watermark: Optional[bool] = None):
    """Download the deck as a standalone HTML file."""
    state = get_state(session_id)
    state.bridge.debouncer.flush()
    if watermark is None:
        watermark = app.state.settings.watermark

    exported = export_deck(state.session.deck, state.session.theme, watermark=watermark)
    print(f"[Export] Session {session_id} -> {exported.filename}")
    return HTMLResponse(
        exported.html,
        headers={"Content-Disposition": f'attachment; filename="{exported.filename}"'},
    )


# --- WebSocket for live editing ---

@app.websocket("/ws/sessions/{session_id}")
async def websocket_endpoint(websocket: WebSocket, session_id: str):
    """
    WebSocket endpoint carrying surface events and surface updates.

    Incoming messages are SurfaceEvent JSON objects (or "ping"). Every event
    is answered by the surface updates it caused followed by a "result"
    message.
    """
    state = app.state.sessions.get(session_id)
    if state is None:
        await websocket.close(code=4404)
        return

    await state.connect(websocket)
    print(f"[WS] Client connected to session {session_id}")

    try:
        while True:
            data = await websocket.receive_text()

            # Heartbeat
            if data == "ping":
                await websocket.send_text("pong")
                continue

            try:
                event = SurfaceEvent.model_validate(json.loads(data))
                result = state.handle(event)
            except (ValidationError, InvalidFieldPath, KeyError, TypeError, ValueError) as e:
                await state.push()
                await websocket.send_json({"type": "error", "message": str(e)})
                continue

            await state.push()
            await websocket.send_json({"type": "result", "event": event.event, "value": result})

    except WebSocketDisconnect:
        state.disconnect(websocket)
        state.bridge.on_blur()
        print(f"[WS] Client disconnected from session {session_id}")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
