"""
Theme catalog: built-in themes with default decks and styling.
"""

from htmldecks.themes.catalog import Theme, ThemeCatalog, default_catalog

__all__ = ["Theme", "ThemeCatalog", "default_catalog"]
