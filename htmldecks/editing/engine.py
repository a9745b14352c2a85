"""
Structural edit engine.

Applies named edit operations to a Deck in place. Addressing that points
outside the current deck (slide, metric, cell or bullet index) is a silent
no-op: the editable surface only emits indices that existed when it was
rendered. Edits that would break a deck invariant raise EditRefused and
leave the deck untouched.
"""

import math
from typing import List, Literal, Optional

from htmldecks.errors import EditRefused
from htmldecks.paths import (
    BulletColumn,
    BulletField,
    FieldPath,
    MetricField,
    TableCellField,
    TextField,
)
from htmldecks.models import (
    HEX_COLOR,
    SLIDE_TYPES,
    BulletsSlide,
    Deck,
    Metric,
    QuoteSlide,
    Slide,
    TwoColumnSlide,
    clean_bullet,
    default_slide,
    derive_bullets,
    edit_bullets,
    join_bullets,
    strip_bullet_marker,
)

DeckField = Literal["name", "company_name", "accent_color"]
FormatMark = Literal["bold", "italic"]

FORMAT_MARKERS = {"bold": "**", "italic": "*"}
OPTIONAL_FIELDS = ("subtitle", "badge", "attribution")
LAYOUTS = ("image-left", "image-right")

NEW_BULLET_TEXT = "New point"


def _star_run(text: str) -> int:
    """Number of leading ``*`` characters, capped at three."""
    count = 0
    while count < 3 and count < len(text) and text[count] == "*":
        count += 1
    return count


class EditEngine:
    """
    Mutates a Deck in response to discrete edit intents.

    The engine holds no state besides the deck it edits; selection and focus
    live in EditorSession.
    """

    def __init__(self, deck: Deck, debug: bool = False):
        self.deck = deck
        self.debug = debug

    def _log(self, message: str) -> None:
        if self.debug:
            print(f"[Edit] {message}")

    def _slide(self, slide_index: int) -> Optional[Slide]:
        if 0 <= slide_index < len(self.deck.slides):
            return self.deck.slides[slide_index]
        return None

    def _bullets(self, slide: Slide, column: BulletColumn) -> Optional[List[str]]:
        if column not in type(slide).model_fields:
            return None
        return edit_bullets(getattr(slide, column))

    # --- Plain field writes ---

    def get_field(self, slide_index: int, path: FieldPath) -> Optional[str]:
        """Current text at a field path, or None if it does not resolve."""
        slide = self._slide(slide_index)
        if slide is None:
            return None

        if isinstance(path, TextField):
            value = getattr(slide, path.name, None)
            return value if isinstance(value, str) else None

        if isinstance(path, MetricField):
            metrics = getattr(slide, "metrics", None)
            if metrics is None or path.index >= len(metrics):
                return None
            return getattr(metrics[path.index], path.part)

        if isinstance(path, TableCellField):
            rows = getattr(slide, "table_data", None)
            if rows is None or path.row >= len(rows) or path.col >= len(rows[path.row]):
                return None
            return rows[path.row][path.col]

        bullets = self._bullets(slide, path.column)
        if bullets is None or path.index >= len(bullets):
            return None
        return bullets[path.index]

    def set_field(self, slide_index: int, path: FieldPath, value: str) -> bool:
        """
        Write a text value at a field path.

        Returns:
            True if the deck changed, False for unresolvable paths
        """
        slide = self._slide(slide_index)
        if slide is None:
            return False

        if isinstance(path, TextField):
            return self._set_text(slide, path.name, value)

        if isinstance(path, MetricField):
            metrics = getattr(slide, "metrics", None)
            if metrics is None or path.index >= len(metrics):
                return False
            setattr(metrics[path.index], path.part, value)
            return True

        if isinstance(path, TableCellField):
            rows = getattr(slide, "table_data", None)
            if rows is None or path.row >= len(rows) or path.col >= len(rows[path.row]):
                return False
            rows[path.row][path.col] = value
            return True

        bullets = self._bullets(slide, path.column)
        if bullets is None or path.index >= len(bullets):
            return False
        bullets[path.index] = clean_bullet(value)
        setattr(slide, path.column, join_bullets(bullets))
        return True

    def _set_text(self, slide: Slide, name: str, value: str) -> bool:
        if name not in type(slide).model_fields or name == "type":
            return False

        if name == "layout":
            if value not in LAYOUTS:
                return False
        elif name in ("content", "left_column", "right_column"):
            value = join_bullets([strip_bullet_marker(line) for line in derive_bullets(value)])
        elif name in OPTIONAL_FIELDS and not value.strip():
            # Empty optional fields are omitted, not rendered empty
            value = None

        setattr(slide, name, value)
        return True

    def set_deck_field(self, name: DeckField, value: str) -> bool:
        """Write a deck-level field (display name, company, accent color)."""
        if name == "accent_color" and not HEX_COLOR.match(value):
            return False
        if name not in ("name", "company_name", "accent_color"):
            return False
        setattr(self.deck, name, value)
        return True

    # --- Bullets ---

    def split_bullet_after(
        self, slide_index: int, column: BulletColumn, index: int
    ) -> Optional[int]:
        """
        Insert an empty bullet right after ``index``.

        Returns:
            Index of the new bullet, or None if the address does not resolve
        """
        slide = self._slide(slide_index)
        if slide is None:
            return None
        bullets = self._bullets(slide, column)
        if bullets is None or not 0 <= index < len(bullets):
            return None

        bullets.insert(index + 1, "")
        setattr(slide, column, join_bullets(bullets))
        self._log(f"Split bullet {column}.{index} on slide {slide_index}")
        return index + 1

    def delete_bullet(
        self, slide_index: int, column: BulletColumn, index: int
    ) -> Optional[int]:
        """
        Remove the bullet at ``index``.

        Returns:
            Index of the bullet that should receive focus, max(0, index - 1),
            or None if the address does not resolve

        Raises:
            EditRefused: if this is the last bullet of the column
        """
        slide = self._slide(slide_index)
        if slide is None:
            return None
        bullets = self._bullets(slide, column)
        if bullets is None or not 0 <= index < len(bullets):
            return None
        if len(bullets) <= 1:
            raise EditRefused("Each list needs at least one bullet.")

        del bullets[index]
        setattr(slide, column, join_bullets(bullets))
        self._log(f"Deleted bullet {column}.{index} on slide {slide_index}")
        return max(0, index - 1)

    def add_bullet(self, slide_index: int, column: BulletColumn = "content") -> Optional[int]:
        """Append a default bullet; returns its index."""
        slide = self._slide(slide_index)
        if slide is None:
            return None
        bullets = self._bullets(slide, column)
        if bullets is None:
            return None

        if bullets == [""]:
            bullets = [NEW_BULLET_TEXT]
        else:
            bullets.append(NEW_BULLET_TEXT)
        setattr(slide, column, join_bullets(bullets))
        return len(bullets) - 1

    # --- Metrics ---

    def add_metric(self, slide_index: int) -> Optional[int]:
        """Append a default metric to a stats slide; returns its index."""
        slide = self._slide(slide_index)
        metrics = getattr(slide, "metrics", None)
        if metrics is None:
            return None
        metrics.append(Metric(number="0", label="New metric"))
        return len(metrics) - 1

    def remove_metric(self, slide_index: int, index: int) -> bool:
        """
        Raises:
            EditRefused: if this is the last metric of the slide
        """
        slide = self._slide(slide_index)
        metrics = getattr(slide, "metrics", None)
        if metrics is None or not 0 <= index < len(metrics):
            return False
        if len(metrics) <= 1:
            raise EditRefused("A stats slide needs at least one metric.")
        del metrics[index]
        return True

    # --- Tables ---

    def add_table_row(self, slide_index: int) -> Optional[int]:
        """Append an empty body row as wide as the header; returns its index."""
        slide = self._slide(slide_index)
        rows = getattr(slide, "table_data", None)
        if rows is None:
            return None
        width = len(rows[0]) if rows else 1
        rows.append([""] * width)
        return len(rows) - 1

    def add_table_column(self, slide_index: int) -> Optional[int]:
        """Append a column to every row; returns its index."""
        slide = self._slide(slide_index)
        rows = getattr(slide, "table_data", None)
        if rows is None:
            return None
        if not rows:
            rows.append([])
        col = len(rows[0])
        rows[0].append(f"Header {col + 1}")
        for row in rows[1:]:
            row.extend([""] * (col + 1 - len(row)))
        return col

    def remove_table_row(self, slide_index: int, row: int) -> bool:
        """
        Raises:
            EditRefused: for the header row or the last body row
        """
        slide = self._slide(slide_index)
        rows = getattr(slide, "table_data", None)
        if rows is None or not 0 <= row < len(rows):
            return False
        if row == 0:
            raise EditRefused("The header row cannot be removed.")
        if len(rows) <= 2:
            raise EditRefused("A table needs at least one row below the header.")
        del rows[row]
        return True

    # --- Formatting ---

    def toggle_format(
        self, slide_index: int, path: FieldPath, start: int, end: int, mark: FormatMark
    ) -> bool:
        """
        Toggle bold or italic on the character range [start, end) of a field.

        Formatting is stored inline as ``**bold**`` and ``*italic*`` markers;
        both together read ``***text***``. A range already wrapped in the
        marker is unwrapped.
        """
        text = self.get_field(slide_index, path)
        if text is None or not 0 <= start < end <= len(text):
            return False

        marker = FORMAT_MARKERS[mark]
        size = len(marker)
        stars = min(_star_run(text[:start][::-1]), _star_run(text[end:]))
        wrapped = stars >= 2 if mark == "bold" else stars in (1, 3)
        if wrapped:
            updated = text[:start - size] + text[start:end] + text[end + size:]
        else:
            updated = text[:start] + marker + text[start:end] + marker + text[end:]
        return self.set_field(slide_index, path, updated)

    # --- Slides ---

    def change_slide_type(self, slide_index: int, new_type: str) -> bool:
        """
        Replace a slide with a fresh default of ``new_type``.

        The title always carries over. Content carries over where the shapes
        are compatible:

        - bullets -> two-column: bullets split in half by count
        - bullets -> quote: first bullet becomes the quote
        - anything -> bullets: previous content, else the title
        - two-column -> bullets: both columns, left first

        Every other field is dropped.
        """
        slide = self._slide(slide_index)
        if slide is None or new_type not in SLIDE_TYPES:
            return False
        if slide.type == new_type:
            return False

        fresh = default_slide(new_type)
        fresh.title = slide.title
        old_content = getattr(slide, "content", None)

        if isinstance(fresh, TwoColumnSlide) and isinstance(slide, BulletsSlide):
            lines = derive_bullets(slide.content)
            if len(lines) >= 2:
                half = math.ceil(len(lines) / 2)
                fresh.left_column = join_bullets(lines[:half])
                fresh.right_column = join_bullets(lines[half:])
            elif lines:
                fresh.left_column = lines[0]

        elif isinstance(fresh, QuoteSlide) and isinstance(slide, BulletsSlide):
            lines = derive_bullets(slide.content)
            if lines:
                fresh.quote = strip_bullet_marker(lines[0])

        elif isinstance(fresh, BulletsSlide):
            if isinstance(slide, TwoColumnSlide):
                old_content = join_bullets(
                    derive_bullets(slide.left_column) + derive_bullets(slide.right_column)
                )
            fresh.content = old_content or slide.title or fresh.content

        self.deck.slides[slide_index] = fresh
        self._log(f"Changed slide {slide_index} from {slide.type} to {new_type}")
        return True

    def add_slide(self, slide_type: str = "bullets") -> int:
        """
        Append a default slide; returns its index.

        Raises:
            ValueError: if slide_type is not a known slide type
        """
        self.deck.slides.append(default_slide(slide_type))
        self._log(f"Added {slide_type} slide")
        return len(self.deck.slides) - 1

    def remove_slide(self, slide_index: int) -> bool:
        """
        Raises:
            EditRefused: if this is the only slide of the deck
        """
        if self._slide(slide_index) is None:
            return False
        if len(self.deck.slides) <= 1:
            raise EditRefused("A deck needs at least one slide.")
        del self.deck.slides[slide_index]
        self._log(f"Removed slide {slide_index}")
        return True

    def duplicate_slide(self, slide_index: int) -> Optional[int]:
        """Insert a deep copy right after the slide; returns the copy's index."""
        slide = self._slide(slide_index)
        if slide is None:
            return None
        self.deck.slides.insert(slide_index + 1, slide.model_copy(deep=True))
        return slide_index + 1

    def move_slide(self, from_index: int, to_index: int) -> bool:
        if self._slide(from_index) is None or self._slide(to_index) is None:
            return False
        if from_index == to_index:
            return False
        slide = self.deck.slides.pop(from_index)
        self.deck.slides.insert(to_index, slide)
        return True
