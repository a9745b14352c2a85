"""
Per-slide template parameters.

Each slide variant has a view builder that turns it into a plain dict for
the slide templates. Unknown slide types use the bullets builder.
"""

import re
from typing import Any, Callable, Dict, List, Optional, Sequence

from markupsafe import Markup, escape

from htmldecks.charts import render_chart
from htmldecks.paths import BulletField, MetricField, TableCellField
from htmldecks.models import Slide, derive_bullets, edit_bullets, strip_bullet_marker

BOLD = re.compile(r"\*\*(?!\*)(.+?)\*\*")
ITALIC = re.compile(r"\*(.+?)\*")

View = Dict[str, Any]


def format_inline(text: Optional[str]) -> Markup:
    """Escape text and turn **bold** / *italic* markers into tags."""
    if not text:
        return Markup("")
    html = str(escape(text))
    html = BOLD.sub(r"<strong>\1</strong>", html)
    html = ITALIC.sub(r"<em>\1</em>", html)
    return Markup(html)


def _inline(text: Optional[str], editable: bool) -> Markup:
    # The surface sends textContent back, so editable fields keep raw markers
    if editable:
        return escape(text or "")
    return format_inline(text)


def _optional(text: Optional[str], editable: bool) -> Optional[Markup]:
    return _inline(text, editable) if text else None


def _bullet_items(text: Optional[str], column: str, editable: bool) -> List[View]:
    lines = edit_bullets(text) if editable else derive_bullets(text)
    return [
        {
            "text": _inline(strip_bullet_marker(line), editable),
            "field": BulletField(column=column, index=i).key,
        }
        for i, line in enumerate(lines)
    ]


def _title_view(slide, palette, editable) -> View:
    return {
        "layout": "title",
        "subtitle": _optional(slide.subtitle, editable),
        "badge": _optional(slide.badge, editable),
    }


def _bullets_view(slide, palette, editable) -> View:
    return {
        "layout": "bullets",
        "bullets": _bullet_items(getattr(slide, "content", None), "content", editable),
    }


def _two_column_view(slide, palette, editable) -> View:
    return {
        "layout": "two-column",
        "columns": [
            {"field": column, "bullets": _bullet_items(getattr(slide, column), column, editable)}
            for column in ("left_column", "right_column")
        ],
    }


def _stats_view(slide, palette, editable) -> View:
    return {
        "layout": "stats",
        "metrics": [
            {
                "number": _inline(metric.number, editable),
                "label": _inline(metric.label, editable),
                "number_field": MetricField(index=i, part="number").key,
                "label_field": MetricField(index=i, part="label").key,
            }
            for i, metric in enumerate(slide.metrics)
        ],
    }


def _quote_view(slide, palette, editable) -> View:
    return {
        "layout": "quote",
        "quote": _inline(slide.quote, editable),
        "attribution": _optional(slide.attribution, editable),
    }


def _table_view(slide, palette, editable) -> View:
    rows = [
        [
            {"text": _inline(cell, editable), "field": TableCellField(row=r, col=c).key}
            for c, cell in enumerate(row)
        ]
        for r, row in enumerate(slide.table_data)
    ]
    return {
        "layout": "table",
        "header": rows[0] if rows else [],
        "rows": rows[1:],
    }


def _chart_view(slide, palette, editable) -> View:
    return {"layout": "chart", "chart": render_chart(slide, palette)}


def _image_text_view(slide, palette, editable) -> View:
    return {
        "layout": "image-text",
        "image_url": slide.image_url,
        "image_side": "left" if slide.layout == "image-left" else "right",
        "paragraphs": [format_inline(p) for p in slide.description.split("\n") if p.strip()],
        "description": _inline(slide.description, editable),
    }


VIEW_BUILDERS: Dict[str, Callable[[Any, Sequence[str], bool], View]] = {
    "title": _title_view,
    "bullets": _bullets_view,
    "two-column": _two_column_view,
    "stats": _stats_view,
    "quote": _quote_view,
    "table": _table_view,
    "bar-chart": _chart_view,
    "line-chart": _chart_view,
    "pie-chart": _chart_view,
    "image-text": _image_text_view,
}


def build_slide_view(
    slide: Slide,
    index: int,
    total: int,
    palette: Sequence[str],
    editable: bool = False,
) -> View:
    """Template parameters for one slide."""
    builder = VIEW_BUILDERS.get(slide.type, _bullets_view)
    view = builder(slide, palette, editable)
    view.update(
        type=slide.type,
        index=index,
        number=index + 1,
        total=total,
        title=_inline(slide.title, editable),
    )
    return view
