"""
Deck export: render a snapshot of the working deck to a standalone file.
"""

import re
from pathlib import Path

from pydantic import BaseModel

from htmldecks.models import Deck
from htmldecks.themes import Theme

NON_SLUG = re.compile(r"[^a-z0-9]+")


class ExportedDeck(BaseModel):
    """A rendered deck ready to be saved or downloaded."""

    filename: str
    html: str


def slugify(text: str) -> str:
    """Lowercase, with every run of non-alphanumerics collapsed to one hyphen."""
    return NON_SLUG.sub("-", text.lower()).strip("-")


def suggested_filename(deck: Deck, theme: Theme) -> str:
    slug = slugify(deck.company_name) or "deck"
    return f"{slug}-{theme.id}.html"


def export_deck(deck: Deck, theme: Theme, watermark: bool = False) -> ExportedDeck:
    """
    Render a deck with a theme.

    The deck is cloned before rendering, so later edits to the working deck
    never change an export that is already in flight.

    Args:
        deck: Working deck
        theme: Theme providing the styling
        watermark: Add the "Made with HTML Decks" mark

    Returns:
        ExportedDeck with suggested filename and HTML document
    """
    snapshot = deck.clone()
    html = theme.render(snapshot, watermark=watermark)
    return ExportedDeck(filename=suggested_filename(snapshot, theme), html=html)


def write_export(exported: ExportedDeck, output_dir: Path) -> Path:
    """Write an export into ``output_dir``; returns the file path."""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / exported.filename
    path.write_text(exported.html, encoding="utf-8")
    print(f"[Export] Wrote {path} ({len(exported.html):,} bytes)")
    return path
