"""
Theme registry.

A theme bundles display metadata, a default deck and styling. Decks handed
out by a theme are deep clones, so editing never touches the defaults.
"""

from typing import Dict, Iterator, List

from pydantic import BaseModel

from htmldecks.errors import UnknownThemeError
from htmldecks.models import Deck
from htmldecks.rendering import ThemeStyle, render_deck


class Theme(BaseModel):
    """A selectable theme."""

    id: str
    name: str
    description: str = ""
    free: bool = False
    defaults: Deck
    style: ThemeStyle

    def new_deck(self) -> Deck:
        """A fresh, independent copy of the theme's default deck."""
        return self.defaults.clone()

    def render(self, deck: Deck, watermark: bool = False) -> str:
        return render_deck(deck, self.style, watermark=watermark)


class ThemeCatalog:
    """Themes keyed by id, in registration order."""

    def __init__(self):
        self._themes: Dict[str, Theme] = {}

    def register(self, theme: Theme) -> None:
        self._themes[theme.id] = theme

    def get(self, theme_id: str) -> Theme:
        """
        Raises:
            UnknownThemeError: if no theme has this id
        """
        try:
            return self._themes[theme_id]
        except KeyError:
            raise UnknownThemeError(theme_id) from None

    def list(self) -> List[Theme]:
        return list(self._themes.values())

    @property
    def ids(self) -> List[str]:
        return list(self._themes)

    def __contains__(self, theme_id: object) -> bool:
        return theme_id in self._themes

    def __iter__(self) -> Iterator[Theme]:
        return iter(self._themes.values())

    def __len__(self) -> int:
        return len(self._themes)


def default_catalog() -> ThemeCatalog:
    """Catalog with the built-in themes."""
    from htmldecks.themes.builtin import BUILTIN_THEMES

    catalog = ThemeCatalog()
    for data in BUILTIN_THEMES:
        catalog.register(Theme.model_validate(data))
    return catalog
