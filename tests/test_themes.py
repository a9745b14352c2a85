"""
Tests for the theme catalog and built-in themes.
"""

import pytest

from htmldecks.errors import UnknownThemeError
from htmldecks.models import SLIDE_TYPES
from htmldecks.themes import ThemeCatalog, default_catalog


def test_builtin_themes_load():
    """Test that every built-in theme validates and renders."""
    catalog = default_catalog()
    assert "startup-pitch" in catalog
    assert catalog.get("startup-pitch").free

    for theme in catalog:
        deck = theme.new_deck()
        assert deck.slides
        html = theme.render(deck)
        assert html.count('<section class="slide') == len(deck.slides)


def test_builtin_themes_cover_all_slide_types():
    types = {slide.type for theme in default_catalog() for slide in theme.defaults.slides}
    assert types == set(SLIDE_TYPES)


def test_new_deck_is_independent():
    theme = default_catalog().get("startup-pitch")
    deck = theme.new_deck()
    deck.slides.clear()
    assert theme.new_deck().slides


def test_unknown_theme():
    """Test the lookup error for missing themes."""
    with pytest.raises(UnknownThemeError) as excinfo:
        default_catalog().get("nope")
    assert excinfo.value.theme_id == "nope"
    assert str(excinfo.value) == "Unknown theme: nope"

    with pytest.raises(LookupError):
        ThemeCatalog().get("nope")


def test_catalog_order(catalog):
    assert catalog.ids == ["alpha", "beta"]
    assert len(catalog) == 2
    assert [t.id for t in catalog.list()] == ["alpha", "beta"]
