"""
Tests for deck and slide models.
"""

import pytest
from pydantic import ValidationError

from htmldecks.models import (
    SLIDE_TYPES,
    BulletsSlide,
    Deck,
    LineChartSlide,
    StatsSlide,
    TableSlide,
    TitleSlide,
    UnknownSlide,
    clean_bullet,
    default_slide,
    derive_bullets,
    edit_bullets,
    strip_bullet_marker,
)


def test_deck_from_camel_case_json():
    """Test loading a deck written in camelCase JSON."""
    deck = Deck.from_dict({
        "name": "Pitch",
        "companyName": "Acme Corp",
        "accentColor": "#7B6EF6",
        "slides": [
            {"type": "title", "title": "Acme", "subtitle": "Hello"},
            {"type": "stats", "title": "Numbers", "metrics": [{"number": "10x", "label": "Faster"}]},
            {"type": "table", "title": "T", "tableData": [["A", "B"], ["1", "2"]]},
        ],
    })

    assert deck.company_name == "Acme Corp"
    assert isinstance(deck.slides[0], TitleSlide)
    assert isinstance(deck.slides[1], StatsSlide)
    assert deck.slides[1].metrics[0].number == "10x"
    assert isinstance(deck.slides[2], TableSlide)
    assert deck.slides[2].table_data[1] == ["1", "2"]


def test_untyped_slide_is_bullets():
    """Test that a slide without a type tag loads as a bullets slide."""
    deck = Deck.from_dict({"slides": [{"title": "Plain", "content": "One\nTwo"}]})
    assert isinstance(deck.slides[0], BulletsSlide)
    assert deck.slides[0].content == "One\nTwo"


def test_unknown_slide_type_is_kept():
    """Test that unknown slide types survive a load/dump cycle."""
    deck = Deck.from_dict({
        "slides": [{"type": "timeline", "title": "Roadmap", "content": "Q1", "steps": [1, 2]}]
    })
    slide = deck.slides[0]
    assert isinstance(slide, UnknownSlide)
    assert slide.type == "timeline"

    data = deck.to_dict()
    assert data["slides"][0]["type"] == "timeline"
    assert data["slides"][0]["steps"] == [1, 2]


def test_to_dict_uses_camel_case_and_omits_none():
    """Test JSON export keys."""
    deck = Deck(company_name="Acme", slides=[TitleSlide(title="Hi")])
    data = deck.to_dict()

    assert data["companyName"] == "Acme"
    assert data["accentColor"] == "#7B6EF6"
    assert "subtitle" not in data["slides"][0]


def test_accent_color_validation():
    """Test that accent colors must be hex colors."""
    Deck(accent_color="#fff")
    Deck(accent_color="#FF3300")

    with pytest.raises(ValidationError):
        Deck(accent_color="red")


def test_line_chart_x_values_are_strings():
    """Test that numeric x values load as category labels."""
    slide = LineChartSlide.model_validate(
        {"series": [{"name": "S", "data": [{"x": 2024, "y": 3}]}]}
    )
    assert slide.series[0].data[0].x == "2024"


def test_clone_is_independent():
    """Test that a cloned deck shares no mutable state."""
    deck = Deck(slides=[StatsSlide(title="S", metrics=[{"number": "1", "label": "a"}])])
    copy = deck.clone()

    copy.slides[0].metrics[0].number = "2"
    copy.slides.append(BulletsSlide(title="Extra"))

    assert deck.slides[0].metrics[0].number == "1"
    assert len(deck.slides) == 1


def test_derive_bullets_skips_blank_lines():
    """Test rendered bullet derivation."""
    assert derive_bullets("a\n\n  \nb") == ["a", "b"]
    assert derive_bullets("") == []
    assert derive_bullets(None) == []


def test_edit_bullets_keeps_empty_entries():
    """Test editing bullet derivation."""
    assert edit_bullets("a\n\nb") == ["a", "", "b"]
    assert edit_bullets("") == [""]


def test_bullet_markers():
    """Test stripping typed bullet markers."""
    assert strip_bullet_marker("- Point") == "Point"
    assert strip_bullet_marker("• Point") == "Point"
    assert strip_bullet_marker("Point - not a marker") == "Point - not a marker"
    assert clean_bullet("- two\nlines") == "two lines"


def test_leading_dash_without_space_is_text():
    """Test that a negative number is not mistaken for a marker."""
    assert strip_bullet_marker("-5% churn") == "-5% churn"
    assert strip_bullet_marker("•dot") == "•dot"
    assert clean_bullet("- -5% churn") == "-5% churn"


def test_bullet_columns_drop_blank_lines_on_load():
    """Test that stored columns hold one line per bullet."""
    assert BulletsSlide(title="B", content="A\n\n  \nB").content == "A\nB"

    deck = Deck.from_dict({
        "slides": [{"type": "two-column", "title": "C", "leftColumn": "\nl1\n\nl2", "rightColumn": ""}]
    })
    assert deck.slides[0].left_column == "l1\nl2"
    assert deck.slides[0].right_column == ""


def test_default_slides_cover_every_type():
    """Test that every slide type has default content."""
    for slide_type in SLIDE_TYPES:
        slide = default_slide(slide_type)
        assert slide.type == slide_type
        assert slide.title == "New Slide"

    assert default_slide("bullets").content == "Your content here"
    assert default_slide("table").table_data[0] == ["Header 1", "Header 2"]

    with pytest.raises(ValueError):
        default_slide("timeline")
