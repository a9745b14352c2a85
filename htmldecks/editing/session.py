"""
Editor session state.

One session owns one working deck. Selecting a theme creates the deck from
the theme defaults; selecting a theme again replaces deck and selection.
"""

from typing import Optional, Tuple

from htmldecks.editing.engine import EditEngine
from htmldecks.models import Deck, Slide
from htmldecks.paths import FieldPath
from htmldecks.themes import Theme


class EditorSession:
    """
    Theme, working deck, selected slide and focused field.

    Args:
        theme: Theme whose default deck is cloned into the session
        debug: Print session and engine progress lines
    """

    def __init__(self, theme: Theme, debug: bool = False):
        self.debug = debug
        self.theme: Theme = theme
        self.deck: Deck = theme.new_deck()
        self.engine = EditEngine(self.deck, debug=debug)
        self.current_slide_index = 0
        self.active_field: Optional[Tuple[int, FieldPath]] = None

    @classmethod
    def start(cls, theme: Theme, debug: bool = False) -> "EditorSession":
        session = cls(theme, debug=debug)
        session._log(f"Started with theme {theme.id} ({session.slide_count} slides)")
        return session

    def _log(self, message: str) -> None:
        if self.debug:
            print(f"[Session] {message}")

    @property
    def slide_count(self) -> int:
        return len(self.deck.slides)

    @property
    def current_slide(self) -> Slide:
        return self.deck.slides[self.current_slide_index]

    def select_theme(self, theme: Theme) -> None:
        """Discard the working deck and start over from another theme."""
        self.theme = theme
        self.deck = theme.new_deck()
        self.engine = EditEngine(self.deck, debug=self.debug)
        self.current_slide_index = 0
        self.active_field = None
        self._log(f"Switched to theme {theme.id}")

    # --- Selection ---

    def _clamp(self, index: int) -> int:
        return max(0, min(index, self.slide_count - 1))

    def go_to(self, index: int) -> int:
        self.current_slide_index = self._clamp(index)
        return self.current_slide_index

    def next(self) -> int:
        return self.go_to(self.current_slide_index + 1)

    def previous(self) -> int:
        return self.go_to(self.current_slide_index - 1)

    def focus(self, slide_index: int, path: FieldPath) -> None:
        """Record the focused field; focusing a field selects its slide."""
        self.active_field = (slide_index, path)
        self.go_to(slide_index)

    def blur(self) -> None:
        self.active_field = None

    # --- Slide-count changes that move the selection ---

    def add_slide(self, slide_type: str = "bullets") -> int:
        """Append a default slide and select it."""
        index = self.engine.add_slide(slide_type)
        self.current_slide_index = index
        return index

    def remove_slide(self, index: int) -> bool:
        """
        Remove a slide and keep the selection on a valid slide.

        Raises:
            EditRefused: if this is the only slide of the deck
        """
        if not self.engine.remove_slide(index):
            return False

        if index < self.current_slide_index:
            self.current_slide_index -= 1
        self.go_to(self.current_slide_index)
        if self.active_field and self.active_field[0] == index:
            self.active_field = None
        self._log(f"Removed slide {index}, now on {self.current_slide_index}")
        return True

    def duplicate_slide(self, index: int) -> Optional[int]:
        """Copy a slide and select the copy."""
        copy_index = self.engine.duplicate_slide(index)
        if copy_index is not None:
            self.current_slide_index = copy_index
        return copy_index

    def move_slide(self, from_index: int, to_index: int) -> bool:
        """Reorder slides; the selection follows the slide it was on."""
        current = self.current_slide_index
        if not self.engine.move_slide(from_index, to_index):
            return False

        if current == from_index:
            self.current_slide_index = to_index
        elif from_index < current <= to_index:
            self.current_slide_index = current - 1
        elif to_index <= current < from_index:
            self.current_slide_index = current + 1
        return True

    def render(self, watermark: bool = False) -> str:
        """Export-time HTML of the working deck."""
        return self.theme.render(self.deck, watermark=watermark)
