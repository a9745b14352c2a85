"""
Pydantic models for API requests/responses.
"""

from typing import Optional, Dict, Any, Literal
from pydantic import BaseModel, Field


class ThemeSummary(BaseModel):
    """A theme as listed in the theme picker."""
    id: str
    name: str
    description: str = ""
    free: bool = False


class CreateSessionRequest(BaseModel):
    """Request to open an editor session."""
    theme_id: Optional[str] = Field(default=None, description="Theme id (default: HTMLDECKS_DEFAULT_THEME)")


class SelectThemeRequest(BaseModel):
    """Switch a session to another theme, discarding its deck."""
    theme_id: str


class AddSlideRequest(BaseModel):
    """Append a slide with default content."""
    slide_type: str = Field(default="bullets", description="Slide type tag")


class SessionResponse(BaseModel):
    """Editor session state."""
    session_id: str
    theme_id: str
    current_slide_index: int
    slide_count: int
    deck: Dict[str, Any]


class SurfaceEvent(BaseModel):
    """An event sent by the browser surface over the websocket."""
    event: Literal["focus", "input", "blur", "key", "command"]
    slide_index: int = 0
    field: Optional[str] = None
    text: str = ""
    key: Optional[str] = None
    caret_at_start: bool = False
    command: Optional[str] = None
    args: Dict[str, Any] = Field(default_factory=dict)

    model_config = {
        "json_schema_extra": {
            "example": {
                "event": "input",
                "slide_index": 0,
                "field": "title",
                "text": "Hello",
            }
        }
    }
