"""
Basic usage example for HTML Decks.

This example starts a deck from a built-in theme, edits it through the
engine and exports a standalone HTML file.
"""

from pathlib import Path
from htmldecks import EditorSession, default_catalog
from htmldecks.export import export_deck, write_export
from htmldecks.paths import TextField


def main():
    # Start from the theme's default slides
    catalog = default_catalog()
    session = EditorSession.start(catalog.get("startup-pitch"))

    # Edit the deck
    engine = session.engine
    engine.set_deck_field("company_name", "Globex")
    engine.set_field(0, TextField(name="title"), "Globex")
    index = session.add_slide("quote")
    engine.set_field(index, TextField(name="quote"), "The best pitch is a working product.")

    # Export (watermark off)
    exported = export_deck(session.deck, session.theme, watermark=False)
    path = write_export(exported, Path("output"))

    print("\n✓ Export complete!")
    print(f"  Slides: {len(session.deck.slides)}")
    print(f"  HTML: {path}")


if __name__ == "__main__":
    main()
