"""
Core data models for HTML Decks.

A Deck is an ordered list of tagged slide variants plus deck-level styling.
Models are Pydantic so decks load from and dump to the camelCase JSON the
theme defaults are written in.
"""

import re
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, field_validator
from pydantic.alias_generators import to_camel

SLIDE_TYPES = (
    "title",
    "bullets",
    "two-column",
    "stats",
    "quote",
    "table",
    "bar-chart",
    "line-chart",
    "pie-chart",
    "image-text",
)

BULLET_MARKER = re.compile(r"^[-•]\s+")
HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


class CamelModel(BaseModel):
    """Base model: snake_case attributes, camelCase JSON keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Slide content parts ---


class Metric(CamelModel):
    """A headline number on a stats slide."""

    number: str = ""
    label: str = ""


class BarPoint(CamelModel):
    label: str
    value: float = 0.0


class BarSeries(CamelModel):
    """A named series of a bar chart."""

    name: str = ""
    data: List[BarPoint] = Field(default_factory=list)


class LinePoint(CamelModel):
    x: str
    y: float = 0.0

    @field_validator("x", mode="before")
    @classmethod
    def coerce_x(cls, v: Any) -> str:
        # Years are often written as bare numbers in deck JSON
        return str(v)


class LineSeries(CamelModel):
    """A named series of a line chart."""

    name: str = ""
    data: List[LinePoint] = Field(default_factory=list)


class PieSegment(CamelModel):
    label: str
    value: float = 0.0


# --- Slide variants ---


class TitleSlide(CamelModel):
    type: Literal["title"] = "title"
    title: str = ""
    subtitle: Optional[str] = None
    badge: Optional[str] = None


class BulletsSlide(CamelModel):
    type: Literal["bullets"] = "bullets"
    title: str = ""
    content: str = ""

    @field_validator("content")
    @classmethod
    def drop_blank_lines(cls, v: str) -> str:
        return join_bullets(derive_bullets(v))


class TwoColumnSlide(CamelModel):
    type: Literal["two-column"] = "two-column"
    title: str = ""
    left_column: str = ""
    right_column: str = ""

    @field_validator("left_column", "right_column")
    @classmethod
    def drop_blank_lines(cls, v: str) -> str:
        return join_bullets(derive_bullets(v))


class StatsSlide(CamelModel):
    type: Literal["stats"] = "stats"
    title: str = ""
    metrics: List[Metric] = Field(default_factory=list)


class QuoteSlide(CamelModel):
    type: Literal["quote"] = "quote"
    title: str = ""
    quote: str = ""
    attribution: Optional[str] = None


class TableSlide(CamelModel):
    """Row 0 of table_data is always the header row."""

    type: Literal["table"] = "table"
    title: str = ""
    table_data: List[List[str]] = Field(default_factory=list)


class BarChartSlide(CamelModel):
    type: Literal["bar-chart"] = "bar-chart"
    title: str = ""
    series: List[BarSeries] = Field(default_factory=list)


class LineChartSlide(CamelModel):
    type: Literal["line-chart"] = "line-chart"
    title: str = ""
    series: List[LineSeries] = Field(default_factory=list)


class PieChartSlide(CamelModel):
    type: Literal["pie-chart"] = "pie-chart"
    title: str = ""
    segments: List[PieSegment] = Field(default_factory=list)


class ImageTextSlide(CamelModel):
    type: Literal["image-text"] = "image-text"
    title: str = ""
    image_url: str = ""
    description: str = ""
    layout: Literal["image-left", "image-right"] = "image-left"


class UnknownSlide(CamelModel):
    """
    A slide whose type tag this version does not know.

    Kept verbatim (extra keys included) and rendered with the bullets layout.
    """

    model_config = ConfigDict(extra="allow")

    type: str
    title: str = ""
    content: Optional[str] = None


def _slide_tag(value: Any) -> str:
    if isinstance(value, dict):
        tag = value.get("type")
    else:
        tag = getattr(value, "type", None)
    if tag is None:
        # Untyped slides ({title, content}) are plain bullet slides
        return "bullets"
    return tag if tag in SLIDE_TYPES else "unknown"


Slide = Annotated[
    Union[
        Annotated[TitleSlide, Tag("title")],
        Annotated[BulletsSlide, Tag("bullets")],
        Annotated[TwoColumnSlide, Tag("two-column")],
        Annotated[StatsSlide, Tag("stats")],
        Annotated[QuoteSlide, Tag("quote")],
        Annotated[TableSlide, Tag("table")],
        Annotated[BarChartSlide, Tag("bar-chart")],
        Annotated[LineChartSlide, Tag("line-chart")],
        Annotated[PieChartSlide, Tag("pie-chart")],
        Annotated[ImageTextSlide, Tag("image-text")],
        Annotated[UnknownSlide, Tag("unknown")],
    ],
    Discriminator(_slide_tag),
]

SLIDE_CLASSES = {
    "title": TitleSlide,
    "bullets": BulletsSlide,
    "two-column": TwoColumnSlide,
    "stats": StatsSlide,
    "quote": QuoteSlide,
    "table": TableSlide,
    "bar-chart": BarChartSlide,
    "line-chart": LineChartSlide,
    "pie-chart": PieChartSlide,
    "image-text": ImageTextSlide,
}


class Deck(CamelModel):
    """
    A complete presentation: ordered slides plus deck-level styling.

    Slide order is presentation order. Decks are created by cloning a
    theme's defaults and are only mutated through the edit engine.
    """

    name: str = "Untitled deck"
    accent_color: str = "#7B6EF6"
    company_name: str = "Company"
    slides: List[Slide] = Field(default_factory=list)

    @field_validator("accent_color")
    @classmethod
    def validate_accent_color(cls, v: str) -> str:
        if not HEX_COLOR.match(v):
            raise ValueError(f"Invalid accent color: {v!r} (expected #RGB or #RRGGBB)")
        return v

    def clone(self) -> "Deck":
        """Deep copy; the clone shares no mutable state with this deck."""
        return self.model_copy(deep=True)

    def to_dict(self) -> Dict[str, Any]:
        """Export to dict for JSON serialization."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Deck":
        """Load from dict."""
        return cls.model_validate(data)


# --- Bullet lists ---


def derive_bullets(text: Optional[str]) -> List[str]:
    """Bullets of a column as rendered: one per non-blank line."""
    if not text:
        return []
    return [line for line in text.split("\n") if line.strip()]


def edit_bullets(text: Optional[str]) -> List[str]:
    """
    Bullets of a column as edited.

    Unlike derive_bullets, empty entries are kept so that a freshly split
    bullet has a node to type into. Columns are stored without blank lines,
    so the only empty entry is one a split has just inserted. An empty
    column is one empty bullet.
    """
    if not text:
        return [""]
    return text.split("\n")


def join_bullets(bullets: List[str]) -> str:
    return "\n".join(bullets)


def strip_bullet_marker(line: str) -> str:
    return BULLET_MARKER.sub("", line, count=1)


def clean_bullet(text: str) -> str:
    """Normalize a single bullet before storing it."""
    return strip_bullet_marker(text.replace("\r", "").replace("\n", " "))


# --- Defaults ---


def default_slide(slide_type: str) -> Slide:
    """
    A fresh slide of the given type with placeholder content.

    Raises:
        ValueError: if slide_type is not a known slide type
    """
    if slide_type == "title":
        return TitleSlide(title="New Slide", subtitle="Add a subtitle")
    if slide_type == "bullets":
        return BulletsSlide(title="New Slide", content="Your content here")
    if slide_type == "two-column":
        return TwoColumnSlide(
            title="New Slide", left_column="Left point", right_column="Right point"
        )
    if slide_type == "stats":
        return StatsSlide(
            title="New Slide",
            metrics=[Metric(number="100%", label="Metric"), Metric(number="10x", label="Metric")],
        )
    if slide_type == "quote":
        return QuoteSlide(title="New Slide", quote="Your quote here", attribution="Name, Title")
    if slide_type == "table":
        return TableSlide(
            title="New Slide",
            table_data=[["Header 1", "Header 2"], ["Cell", "Cell"]],
        )
    if slide_type == "bar-chart":
        return BarChartSlide(
            title="New Slide",
            series=[
                BarSeries(
                    name="Series 1",
                    data=[BarPoint(label="Q1", value=10), BarPoint(label="Q2", value=20)],
                )
            ],
        )
    if slide_type == "line-chart":
        return LineChartSlide(
            title="New Slide",
            series=[
                LineSeries(
                    name="Series 1",
                    data=[LinePoint(x="Jan", y=10), LinePoint(x="Feb", y=15), LinePoint(x="Mar", y=25)],
                )
            ],
        )
    if slide_type == "pie-chart":
        return PieChartSlide(
            title="New Slide",
            segments=[PieSegment(label="A", value=60), PieSegment(label="B", value=40)],
        )
    if slide_type == "image-text":
        return ImageTextSlide(
            title="New Slide",
            image_url="https://placehold.co/600x400",
            description="Describe the image here",
        )
    raise ValueError(f"Unknown slide type: {slide_type}")
