"""
Tests for the editor session and the surface bridge.
"""

import pytest

from htmldecks.editing import EditorSession, SyncBridge
from htmldecks.errors import EditRefused


@pytest.fixture
def session(two_slide_theme):
    return EditorSession.start(two_slide_theme)


@pytest.fixture
def bridge(session, surface, clock):
    bridge = SyncBridge(session, surface, clock, debounce_ms=300)
    bridge.load()
    return bridge


# --- Session ---


def test_session_clones_theme_defaults(two_slide_theme):
    """Test that editing a session never touches the theme defaults."""
    session = EditorSession.start(two_slide_theme)
    session.engine.deck.slides[0].title = "Changed"
    assert two_slide_theme.defaults.slides[0].title == "Welcome"
    assert EditorSession.start(two_slide_theme).deck.slides[0].title == "Welcome"


def test_selection_clamps(session):
    assert session.go_to(10) == 1
    assert session.go_to(-3) == 0
    assert session.next() == 1
    assert session.next() == 1
    assert session.previous() == 0


def test_select_theme_replaces_deck(session, catalog):
    session.add_slide("quote")
    session.select_theme(catalog.get("beta"))
    assert session.slide_count == 1
    assert session.current_slide_index == 0
    assert session.engine.deck is session.deck


def test_remove_slide_reclamps_selection(session):
    """Test that removing slides keeps the selection valid."""
    session.add_slide("bullets")
    assert session.current_slide_index == 2

    session.remove_slide(2)
    assert session.current_slide_index == 1

    session.go_to(1)
    session.remove_slide(0)
    assert session.current_slide_index == 0

    with pytest.raises(EditRefused):
        session.remove_slide(0)
    assert session.slide_count == 1


def test_move_slide_keeps_selection(session):
    session.add_slide("quote")
    session.go_to(0)
    session.move_slide(0, 2)
    assert session.current_slide_index == 2
    assert session.current_slide.type == "title"


# --- Bridge ---


def test_scenario_edit_title_then_add_slide(session, bridge, clock, surface):
    """Test theme selection, a title edit and adding a slide."""
    original_second = session.deck.slides[1].model_dump()

    bridge.on_focus(0, "title")
    bridge.on_input(0, "title", "H")
    bridge.on_input(0, "title", "Hello")
    clock.advance(0.3)

    bridge.add_slide("bullets")

    assert session.slide_count == 3
    assert session.current_slide_index == 2
    assert session.deck.slides[0].title == "Hello"
    assert session.deck.slides[1].model_dump() == original_second
    assert surface.last("set_counter") == (2, 3)


def test_input_is_debounced(session, bridge, clock, surface):
    """Test that input is committed after the idle delay and updates the thumbnail."""
    surface.calls.clear()
    bridge.on_input(1, "content.0", "Uno")
    clock.advance(0.1)
    assert session.deck.slides[1].content == "First\nSecond\nThird"

    clock.advance(0.2)
    assert session.deck.slides[1].content == "Uno\nSecond\nThird"
    assert surface.names() == ["update_thumbnail"]
    assert surface.last("update_thumbnail")[0] == 1


def test_blur_flushes_pending_write(session, bridge):
    bridge.on_input(0, "subtitle", "Now")
    bridge.on_blur()
    assert session.deck.slides[0].subtitle == "Now"
    assert session.active_field is None


def test_structural_edit_commits_pending_text_first(session, bridge):
    """Test that a command never loses text typed just before it."""
    bridge.on_input(0, "title", "Typed")
    bridge.add_slide("stats")
    assert session.deck.slides[0].title == "Typed"


def test_enter_splits_bullet(session, bridge, surface):
    """Test Enter inside a bullet."""
    surface.calls.clear()
    handled = bridge.on_key(1, "content.0", "Enter", "First!", caret_at_start=False)

    assert handled
    assert session.deck.slides[1].content == "First!\n\nSecond\nThird"
    assert surface.last("replace_slide")[0] == 1
    assert 'data-field="content.1"' in surface.last("replace_slide")[1]
    assert surface.last("focus_field") == (1, "content.1")


def test_backspace_on_empty_bullet_deletes_it(session, bridge, surface):
    bridge.on_key(1, "content.1", "Enter", "Second", caret_at_start=False)
    handled = bridge.on_key(1, "content.2", "Backspace", "", caret_at_start=True)

    assert handled
    assert session.deck.slides[1].content == "First\nSecond\nThird"
    assert surface.last("focus_field") == (1, "content.1")


def test_backspace_with_text_is_not_intercepted(session, bridge):
    assert not bridge.on_key(1, "content.1", "Backspace", "Second", caret_at_start=True)
    assert not bridge.on_key(1, "content.1", "Backspace", "", caret_at_start=False)
    assert not bridge.on_key(0, "title", "Enter", "Welcome", caret_at_start=False)
    assert session.deck.slides[1].content == "First\nSecond\nThird"


def test_backspace_on_last_bullet_is_refused(theme_factory, surface, clock):
    """Test that the refusal is shown and the deck is unchanged."""
    theme = theme_factory("solo", [{"type": "bullets", "title": "B", "content": ""}])
    session = EditorSession.start(theme)
    bridge = SyncBridge(session, surface, clock)

    assert bridge.on_key(0, "content.0", "Backspace", "", caret_at_start=True)
    assert surface.last("show_refusal") == ("Each list needs at least one bullet.",)
    assert session.deck.slides[0].content == ""


def test_remove_last_slide_shows_refusal(theme_factory, surface, clock):
    theme = theme_factory("solo", [{"type": "title", "title": "Only"}])
    session = EditorSession.start(theme)
    bridge = SyncBridge(session, surface, clock)

    assert not bridge.remove_slide(0)
    assert surface.last("show_refusal") == ("A deck needs at least one slide.",)
    assert session.slide_count == 1


def test_commands_rerender_only_affected_slide(session, bridge, surface):
    """Test that in-slide commands replace just that slide."""
    surface.calls.clear()
    bridge.change_slide_type(1, "stats")
    assert surface.names() == ["replace_slide", "update_thumbnail"]
    assert surface.last("replace_slide")[0] == 1

    surface.calls.clear()
    assert bridge.add_metric(1) == 2
    assert surface.last("focus_field") == (1, "metrics.2.number")
    assert "show_deck" not in surface.names()


def test_slide_count_changes_resend_deck(session, bridge, surface):
    surface.calls.clear()
    bridge.add_slide("quote")
    slides, thumbnails = surface.last("show_deck")
    assert len(slides) == 3
    assert len(thumbnails) == 3
    assert "thumb--active" in thumbnails[2]


def test_toggle_format_command(session, bridge, surface):
    assert bridge.command("toggle_format", slide_index=0, field="title", start=0, end=7, mark="italic")
    assert session.deck.slides[0].title == "*Welcome*"
    assert surface.last("focus_field") == (0, "title")


def test_typing_after_toggle_keeps_formatting(session, bridge, clock, surface):
    """Test that text read back from the surface keeps the bold markers."""
    bridge.toggle_format(0, "title", 0, 7, "bold")
    html = surface.last("replace_slide")[1]
    assert ">**Welcome**</h1>" in html

    bridge.on_input(0, "title", "**Welcome**!")
    clock.advance(0.3)
    assert session.deck.slides[0].title == "**Welcome**!"
    assert "<strong>Welcome</strong>!" in surface.last("update_thumbnail")[1]


def test_select_theme_cancels_pending_write(bridge, catalog, clock, session):
    bridge.on_input(0, "title", "Lost")
    bridge.select_theme(catalog.get("beta"))
    clock.advance(1)
    assert session.deck.slides[0].title == "Q"
    assert session.theme.id == "beta"
