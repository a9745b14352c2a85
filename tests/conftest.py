"""
Shared test doubles: a manual clock for the debounce and a recording surface.
"""

from typing import Any, Callable, List, Tuple

import pytest

from htmldecks.editing import BaseSurface
from htmldecks.models import Deck
from htmldecks.rendering import ThemeStyle
from htmldecks.themes import Theme, ThemeCatalog


class ManualHandle:
    def __init__(self, clock: "ManualClock", when: float, callback: Callable[[], Any]):
        self.clock = clock
        self.when = when
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualClock:
    """call_later() scheduler that only runs callbacks when advanced."""

    def __init__(self):
        self.now = 0.0
        self.handles: List[ManualHandle] = []

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> ManualHandle:
        handle = ManualHandle(self, self.now + delay, lambda: callback(*args))
        self.handles.append(handle)
        return handle

    def advance(self, seconds: float) -> None:
        self.now += seconds
        due = [h for h in self.handles if not h.cancelled and h.when <= self.now + 1e-9]
        self.handles = [h for h in self.handles if h not in due and not h.cancelled]
        for handle in sorted(due, key=lambda h: h.when):
            handle.callback()

    @property
    def pending(self) -> int:
        return sum(1 for h in self.handles if not h.cancelled)


class RecordingSurface(BaseSurface):
    """Surface that records every call as (method, args)."""

    def __init__(self):
        self.calls: List[Tuple[str, tuple]] = []

    def names(self) -> List[str]:
        return [name for name, _ in self.calls]

    def last(self, name: str) -> tuple:
        for call_name, args in reversed(self.calls):
            if call_name == name:
                return args
        raise AssertionError(f"{name} was never called")

    def show_deck(self, slides, thumbnails):
        self.calls.append(("show_deck", (slides, thumbnails)))

    def replace_slide(self, index, html):
        self.calls.append(("replace_slide", (index, html)))

    def update_thumbnail(self, index, html):
        self.calls.append(("update_thumbnail", (index, html)))

    def focus_field(self, slide_index, field):
        self.calls.append(("focus_field", (slide_index, field)))

    def show_refusal(self, message):
        self.calls.append(("show_refusal", (message,)))

    def set_counter(self, current, total):
        self.calls.append(("set_counter", (current, total)))


def make_theme(theme_id: str, slides: list, **deck_fields) -> Theme:
    return Theme(
        id=theme_id,
        name=theme_id.title(),
        description=f"Test theme {theme_id}",
        free=True,
        defaults=Deck.from_dict({"companyName": "Test Co", **deck_fields, "slides": slides}),
        style=ThemeStyle(name=theme_id.title()),
    )


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def two_slide_theme():
    return make_theme(
        "alpha",
        [
            {"type": "title", "title": "Welcome", "subtitle": "Intro"},
            {"type": "bullets", "title": "Points", "content": "First\nSecond\nThird"},
        ],
    )


@pytest.fixture
def catalog(two_slide_theme):
    catalog = ThemeCatalog()
    catalog.register(two_slide_theme)
    catalog.register(
        make_theme("beta", [{"type": "quote", "title": "Q", "quote": "Be brief"}])
    )
    return catalog


@pytest.fixture
def theme_factory():
    return make_theme
