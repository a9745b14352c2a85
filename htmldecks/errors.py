"""
Exceptions raised by HTML Decks.
"""


class HTMLDecksError(Exception):
    """Base class for all HTML Decks errors."""


class EditRefused(HTMLDecksError):
    """
    An edit that would break a deck invariant (last bullet, last slide).

    The message is meant to be shown to the user as-is; the deck is left
    unchanged when this is raised.
    """


class UnknownThemeError(HTMLDecksError, LookupError):
    """No theme is registered under the requested id."""

    def __init__(self, theme_id: str):
        super().__init__(f"Unknown theme: {theme_id}")
        self.theme_id = theme_id


class InvalidFieldPath(HTMLDecksError, ValueError):
    """A field path string could not be parsed."""
