"""
Deck renderer: Deck + ThemeStyle -> standalone HTML document.

Rendering never mutates the deck and never reads back from an editable
surface. Slides of an unrecognized type render with the bullets layout.
"""

from typing import List

from jinja2 import DictLoader, Environment
from markupsafe import Markup

from htmldecks.models import Deck, Slide
from htmldecks.rendering.style import ThemeStyle
from htmldecks.rendering.templates import DOCUMENT_TEMPLATE, SLIDE_TEMPLATE, THUMBNAIL_TEMPLATE
from htmldecks.rendering.views import build_slide_view


class DeckRenderer:
    """
    Render decks and single slides with Jinja2.

    The same slide template serves the exported document and the editable
    surface; ``editable=True`` adds ``contenteditable`` and ``data-field``
    attributes so surface events can be mapped back to field paths.
    """

    def __init__(self, debug: bool = False):
        self.debug = debug
        self.env = Environment(
            loader=DictLoader(
                {
                    "slide.html": SLIDE_TEMPLATE,
                    "thumbnail.html": THUMBNAIL_TEMPLATE,
                    "document.html": DOCUMENT_TEMPLATE,
                }
            ),
            autoescape=True,
        )

    def render_slide(
        self,
        deck: Deck,
        index: int,
        style: ThemeStyle,
        editable: bool = False,
    ) -> Markup:
        """Markup of one slide section."""
        slide: Slide = deck.slides[index]
        view = build_slide_view(
            slide, index, len(deck.slides), style.chart_palette, editable=editable
        )
        html = self.env.get_template("slide.html").render(
            s=view, company=deck.company_name, editable=editable
        )
        return Markup(html.strip())

    def render_thumbnail(self, deck: Deck, index: int, active: bool = False) -> Markup:
        """Small index entry for the slide strip of the editor."""
        slide = deck.slides[index]
        view = build_slide_view(slide, index, len(deck.slides), [], editable=False)
        html = self.env.get_template("thumbnail.html").render(s=view, active=active)
        return Markup(html.strip())

    def render_thumbnails(self, deck: Deck, active_index: int = -1) -> List[Markup]:
        return [
            self.render_thumbnail(deck, i, active=i == active_index)
            for i in range(len(deck.slides))
        ]

    def render_deck(self, deck: Deck, style: ThemeStyle, watermark: bool = False) -> str:
        """
        Render a complete, self-contained, navigable HTML document.

        Args:
            deck: Deck snapshot to render
            style: Theme styling
            watermark: Add a visible "Made with HTML Decks" mark

        Returns:
            The HTML document as a string
        """
        if self.debug:
            print(f"[Render] Rendering {len(deck.slides)} slides with {style.name}")

        slides = [self.render_slide(deck, i, style) for i in range(len(deck.slides))]
        return self.env.get_template("document.html").render(
            company=deck.company_name,
            accent=deck.accent_color,
            style=style,
            slides=slides,
            total=len(slides),
            watermark=watermark,
        )


_default_renderer = DeckRenderer()


def render_deck(deck: Deck, style: ThemeStyle, watermark: bool = False) -> str:
    """Render a deck with the shared default renderer."""
    return _default_renderer.render_deck(deck, style, watermark=watermark)
