"""
Synchronization bridge between an editable surface and the editor session.

Plain text input is committed through a single-slot debounce. Structural
edits commit any pending text first, apply one engine operation, re-render
the slide it touched and put the caret back where the user expects it.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional, TypeVar

from htmldecks.editing.debounce import Debouncer, Scheduler
from htmldecks.editing.engine import FormatMark
from htmldecks.editing.session import EditorSession
from htmldecks.errors import EditRefused
from htmldecks.paths import BulletColumn, BulletField, MetricField, parse_field_path
from htmldecks.rendering import DeckRenderer
from htmldecks.themes import Theme

T = TypeVar("T")


class BaseSurface(ABC):
    """Abstract editable surface (browser page, websocket peer, test double)."""

    @abstractmethod
    def show_deck(self, slides: List[str], thumbnails: List[str]) -> None:
        """
        Replace every slide and the whole thumbnail strip.

        Args:
            slides: Editable markup of each slide, in order
            thumbnails: Thumbnail markup of each slide, in order
        """
        pass

    @abstractmethod
    def replace_slide(self, index: int, html: str) -> None:
        """Swap the markup of one slide."""
        pass

    @abstractmethod
    def update_thumbnail(self, index: int, html: str) -> None:
        pass

    @abstractmethod
    def focus_field(self, slide_index: int, field: str) -> None:
        """Put the caret into the element whose data-field is ``field``."""
        pass

    @abstractmethod
    def show_refusal(self, message: str) -> None:
        """Tell the user an edit was not applied."""
        pass

    @abstractmethod
    def set_counter(self, current: int, total: int) -> None:
        pass


class SyncBridge:
    """
    Translate surface events into engine operations and surface updates.

    Args:
        session: Editor session holding the working deck
        surface: Surface receiving re-rendered fragments
        scheduler: Provides call_later() for the debounce
        debounce_ms: Idle time before typed text is committed
        renderer: Renderer for slide and thumbnail fragments
    """

    def __init__(
        self,
        session: EditorSession,
        surface: BaseSurface,
        scheduler: Scheduler,
        debounce_ms: int = 300,
        renderer: Optional[DeckRenderer] = None,
    ):
        self.session = session
        self.surface = surface
        self.debouncer = Debouncer(scheduler, delay=debounce_ms / 1000)
        self.renderer = renderer or DeckRenderer(debug=session.debug)
        self.commands = {
            "add_slide": self.add_slide,
            "remove_slide": self.remove_slide,
            "duplicate_slide": self.duplicate_slide,
            "move_slide": self.move_slide,
            "change_slide_type": self.change_slide_type,
            "add_metric": self.add_metric,
            "remove_metric": self.remove_metric,
            "add_bullet": self.add_bullet,
            "add_table_row": self.add_table_row,
            "add_table_column": self.add_table_column,
            "remove_table_row": self.remove_table_row,
            "toggle_format": self.toggle_format,
            "select_slide": self.select_slide,
        }

    @property
    def deck(self):
        return self.session.deck

    # --- Rendering helpers ---

    def _slide_html(self, index: int) -> str:
        style = self.session.theme.style
        return str(self.renderer.render_slide(self.deck, index, style, editable=True))

    def _thumbnail_html(self, index: int) -> str:
        active = index == self.session.current_slide_index
        return str(self.renderer.render_thumbnail(self.deck, index, active=active))

    def _counter(self) -> None:
        self.surface.set_counter(self.session.current_slide_index, self.session.slide_count)

    def load(self) -> None:
        """Send the whole working deck to the surface."""
        slides = [self._slide_html(i) for i in range(self.session.slide_count)]
        thumbnails = [
            str(t)
            for t in self.renderer.render_thumbnails(
                self.deck, active_index=self.session.current_slide_index
            )
        ]
        self.surface.show_deck(slides, thumbnails)
        self._counter()

    def _rerender_slide(self, index: int) -> None:
        self.surface.replace_slide(index, self._slide_html(index))
        self.surface.update_thumbnail(index, self._thumbnail_html(index))

    def _structural(self, action: Callable[[], T]) -> Optional[T]:
        """Commit pending text, then run ``action``; refusals go to the surface."""
        self.debouncer.flush()
        try:
            return action()
        except EditRefused as exc:
            self.surface.show_refusal(str(exc))
            return None

    # --- Surface events ---

    def select_theme(self, theme: Theme) -> None:
        self.debouncer.cancel()
        self.session.select_theme(theme)
        self.load()

    def select_slide(self, slide_index: int) -> None:
        self.session.go_to(slide_index)
        self._counter()

    def on_focus(self, slide_index: int, field: str) -> None:
        """
        Raises:
            InvalidFieldPath: if ``field`` is not a field path
        """
        previous = self.session.current_slide_index
        self.session.focus(slide_index, parse_field_path(field))
        if self.session.current_slide_index != previous:
            self._counter()

    def on_input(self, slide_index: int, field: str, text: str) -> None:
        """Schedule a debounced write of the field's latest text."""
        path = parse_field_path(field)

        def commit() -> None:
            if self.session.engine.set_field(slide_index, path, text):
                self.surface.update_thumbnail(slide_index, self._thumbnail_html(slide_index))

        self.debouncer.schedule((slide_index, path.key), commit)

    def on_blur(self) -> None:
        self.debouncer.flush()
        self.session.blur()

    def on_key(
        self,
        slide_index: int,
        field: str,
        key: str,
        text: str,
        caret_at_start: bool,
    ) -> bool:
        """
        Handle Enter and Backspace inside bullet fields.

        Args:
            slide_index: Slide of the focused field
            field: data-field of the focused element
            key: Key name as reported by the browser
            text: Current text of the focused element
            caret_at_start: Whether the caret sits at offset 0

        Returns:
            True if the key was handled and its default action must be suppressed
        """
        path = parse_field_path(field)
        if not isinstance(path, BulletField):
            return False

        engine = self.session.engine
        if key == "Enter":
            self.debouncer.flush()
            engine.set_field(slide_index, path, text)
            new_index = engine.split_bullet_after(slide_index, path.column, path.index)
            if new_index is None:
                return False
            self._rerender_slide(slide_index)
            self.surface.focus_field(
                slide_index, BulletField(column=path.column, index=new_index).key
            )
            return True

        if key == "Backspace" and caret_at_start and text == "":
            self.debouncer.flush()
            try:
                focus_index = engine.delete_bullet(slide_index, path.column, path.index)
            except EditRefused as exc:
                self.surface.show_refusal(str(exc))
                return True
            if focus_index is None:
                return False
            self._rerender_slide(slide_index)
            self.surface.focus_field(
                slide_index, BulletField(column=path.column, index=focus_index).key
            )
            return True

        return False

    def command(self, name: str, **kwargs: Any) -> Any:
        """
        Run a named command with keyword arguments.

        Raises:
            KeyError: for unknown command names
        """
        return self.commands[name](**kwargs)

    # --- Commands ---

    def add_slide(self, slide_type: str = "bullets") -> Optional[int]:
        index = self._structural(lambda: self.session.add_slide(slide_type))
        if index is not None:
            self.load()
        return index

    def remove_slide(self, slide_index: int) -> bool:
        removed = self._structural(lambda: self.session.remove_slide(slide_index))
        if removed:
            self.load()
        return bool(removed)

    def duplicate_slide(self, slide_index: int) -> Optional[int]:
        index = self._structural(lambda: self.session.duplicate_slide(slide_index))
        if index is not None:
            self.load()
        return index

    def move_slide(self, from_index: int, to_index: int) -> bool:
        moved = self._structural(lambda: self.session.move_slide(from_index, to_index))
        if moved:
            self.load()
        return bool(moved)

    def change_slide_type(self, slide_index: int, slide_type: str) -> bool:
        changed = self._structural(
            lambda: self.session.engine.change_slide_type(slide_index, slide_type)
        )
        if changed:
            self._rerender_slide(slide_index)
        return bool(changed)

    def add_metric(self, slide_index: int) -> Optional[int]:
        index = self._structural(lambda: self.session.engine.add_metric(slide_index))
        if index is not None:
            self._rerender_slide(slide_index)
            self.surface.focus_field(slide_index, MetricField(index=index, part="number").key)
        return index

    def remove_metric(self, slide_index: int, index: int) -> bool:
        removed = self._structural(lambda: self.session.engine.remove_metric(slide_index, index))
        if removed:
            self._rerender_slide(slide_index)
        return bool(removed)

    def add_bullet(self, slide_index: int, column: BulletColumn = "content") -> Optional[int]:
        index = self._structural(lambda: self.session.engine.add_bullet(slide_index, column))
        if index is not None:
            self._rerender_slide(slide_index)
            self.surface.focus_field(slide_index, BulletField(column=column, index=index).key)
        return index

    def add_table_row(self, slide_index: int) -> Optional[int]:
        row = self._structural(lambda: self.session.engine.add_table_row(slide_index))
        if row is not None:
            self._rerender_slide(slide_index)
        return row

    def add_table_column(self, slide_index: int) -> Optional[int]:
        col = self._structural(lambda: self.session.engine.add_table_column(slide_index))
        if col is not None:
            self._rerender_slide(slide_index)
        return col

    def remove_table_row(self, slide_index: int, row: int) -> bool:
        removed = self._structural(lambda: self.session.engine.remove_table_row(slide_index, row))
        if removed:
            self._rerender_slide(slide_index)
        return bool(removed)

    def toggle_format(
        self, slide_index: int, field: str, start: int, end: int, mark: FormatMark
    ) -> bool:
        path = parse_field_path(field)
        toggled = self._structural(
            lambda: self.session.engine.toggle_format(slide_index, path, start, end, mark)
        )
        if toggled:
            self._rerender_slide(slide_index)
            self.surface.focus_field(slide_index, path.key)
        return bool(toggled)
