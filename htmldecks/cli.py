"""
Command-line interface for HTML Decks.
"""

import sys
import json
import argparse
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from htmldecks import __version__
from htmldecks.config import EditorSettings
from htmldecks.errors import HTMLDecksError
from htmldecks.export import export_deck, write_export
from htmldecks.models import Deck
from htmldecks.themes import default_catalog


def _list_themes(args, settings: EditorSettings) -> int:
    for theme in default_catalog():
        marker = "*" if theme.id == settings.default_theme else " "
        plan = "free" if theme.free else "pro"
        print(f"{marker} {theme.id:<16} {theme.name} ({plan}): {theme.description}")
    return 0


def _init_deck(args, settings: EditorSettings) -> int:
    theme = default_catalog().get(args.theme or settings.default_theme)
    deck = theme.new_deck()
    output: Path = args.output or Path(f"{theme.id}.deck.json")
    output.write_text(json.dumps(deck.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")
    print(f"Created {output} from theme {theme.name} ({len(deck.slides)} slides)")
    return 0


def _export_deck(args, settings: EditorSettings) -> int:
    if not args.deck.exists():
        print(f"Error: Deck file not found: {args.deck}", file=sys.stderr)
        return 1

    theme = default_catalog().get(args.theme or settings.default_theme)
    deck = Deck.from_dict(json.loads(args.deck.read_text(encoding="utf-8")))
    watermark = settings.watermark if args.watermark is None else args.watermark

    if settings.debug:
        print(f"[Export] {len(deck.slides)} slides, theme {theme.id}, watermark {watermark}")

    exported = export_deck(deck, theme, watermark=watermark)
    write_export(exported, args.output or settings.output_dir)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    load_dotenv()  # Load .env file if present
    settings = EditorSettings.from_env()

    parser = argparse.ArgumentParser(
        prog="htmldecks",
        description="HTML Decks: themed, self-contained HTML presentations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List the built-in themes
  htmldecks themes

  # Start a deck from a theme's default slides
  htmldecks init --theme swiss-modern -o pitch.json

  # Export a deck to ./output/<company>-<theme>.html
  htmldecks export pitch.json --theme swiss-modern --no-watermark

Environment Variables:
  HTMLDECKS_DEFAULT_THEME   Theme used when --theme is omitted
  HTMLDECKS_OUTPUT_DIR      Default output directory
  HTMLDECKS_WATERMARK       Watermark exports unless told otherwise
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"HTML Decks {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    themes_parser = subparsers.add_parser("themes", help="List available themes")
    themes_parser.set_defaults(handler=_list_themes)

    init_parser = subparsers.add_parser("init", help="Write a theme's default deck as JSON")
    init_parser.add_argument("--theme", "-t", help="Theme id (default: HTMLDECKS_DEFAULT_THEME)")
    init_parser.add_argument("--output", "-o", type=Path, help="Deck JSON path")
    init_parser.set_defaults(handler=_init_deck)

    export_parser = subparsers.add_parser("export", help="Render a deck JSON file to HTML")
    export_parser.add_argument("deck", type=Path, help="Deck JSON file")
    export_parser.add_argument("--theme", "-t", help="Theme id (default: HTMLDECKS_DEFAULT_THEME)")
    export_parser.add_argument("--output", "-o", type=Path, help="Output directory")
    export_parser.add_argument(
        "--watermark",
        dest="watermark",
        action="store_true",
        default=None,
        help="Add the 'Made with HTML Decks' mark",
    )
    export_parser.add_argument(
        "--no-watermark",
        dest="watermark",
        action="store_false",
        help="Export without the watermark",
    )
    export_parser.set_defaults(handler=_export_deck)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        return args.handler(args, settings)

    except KeyboardInterrupt:
        print("\n\nInterrupted by user", file=sys.stderr)
        return 130

    except (HTMLDecksError, ValidationError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        if settings.debug:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
