"""
Theme styling consumed by the renderer.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class ThemeStyle(BaseModel):
    """Colors, fonts and chart palette of one theme."""

    name: str
    background: str = "#0f0f1a"
    surface: str = "rgba(255, 255, 255, 0.05)"
    text: str = "#f5f5f7"
    text_muted: str = "#a1a1aa"
    border: str = "rgba(255, 255, 255, 0.12)"
    heading_font: str = "'Inter', sans-serif"
    body_font: str = "'Inter', sans-serif"
    font_url: Optional[str] = None
    chart_palette: List[str] = Field(
        default_factory=lambda: ["#5A49E1", "#46D19A", "#F5A623", "#E14A8B", "#4A9FF5"]
    )
    chart_text: str = "#a1a1aa"
    corner_radius: str = "12px"
    extra_css: str = ""
