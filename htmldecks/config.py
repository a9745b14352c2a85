"""
Editor settings read from the environment.

Call ``load_dotenv()`` first so values from a local .env file are visible.
"""

import os
from pathlib import Path

from pydantic import BaseModel, Field


def _flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class EditorSettings(BaseModel):
    """Runtime settings for the editor, exporter and server."""

    debounce_ms: int = Field(default=300, ge=0)
    watermark: bool = True
    output_dir: Path = Path("output")
    default_theme: str = "startup-pitch"
    debug: bool = False

    @classmethod
    def from_env(cls) -> "EditorSettings":
        """
        Build settings from HTMLDECKS_* environment variables.

        Environment Variables:
            HTMLDECKS_DEBOUNCE_MS    Idle time before typed text is committed (300)
            HTMLDECKS_WATERMARK      Add the watermark to exports (true)
            HTMLDECKS_OUTPUT_DIR     Directory for exported decks (output)
            HTMLDECKS_DEFAULT_THEME  Theme used when none is given (startup-pitch)
            HTMLDECKS_DEBUG          Print debug progress lines (false)
        """
        return cls(
            debounce_ms=int(os.getenv("HTMLDECKS_DEBOUNCE_MS", "300")),
            watermark=_flag(os.getenv("HTMLDECKS_WATERMARK", "true")),
            output_dir=Path(os.getenv("HTMLDECKS_OUTPUT_DIR", "output")),
            default_theme=os.getenv("HTMLDECKS_DEFAULT_THEME", "startup-pitch"),
            debug=_flag(os.getenv("HTMLDECKS_DEBUG", "false")),
        )
