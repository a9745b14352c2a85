"""
Inline SVG markup for chart geometry.
"""

from typing import Sequence

from jinja2 import Environment
from markupsafe import Markup

from htmldecks.charts.geometry import (
    DEFAULT_PALETTE,
    ChartGeometry,
    NoData,
    bar_chart,
    fmt_number,
    line_chart,
    pie_chart,
)
from htmldecks.models import BarChartSlide, LineChartSlide, PieChartSlide

SVG_TEMPLATE = """
{%- if g.kind == 'empty' -%}
<div class="chart-placeholder">{{ g.message }}</div>
{%- elif g.kind == 'pie' -%}
<svg class="chart chart--pie" viewBox="0 0 {{ g.canvas.width|n }} {{ g.canvas.height|n }}" role="img">
  {%- for w in g.wedges if w.visible %}
  <path d="{{ w.path }}" fill="{{ w.color }}" stroke="#fff" stroke-width="2"><title>{{ w.label }}</title></path>
  {%- endfor %}
  {%- for e in g.legend %}
  <rect x="{{ e.x|n }}" y="{{ e.y|n }}" width="{{ e.size|n }}" height="{{ e.size|n }}" fill="{{ e.color }}" />
  <text x="{{ e.text_x|n }}" y="{{ e.text_y|n }}" class="chart__legend">{{ e.text }}</text>
  {%- endfor %}
</svg>
{%- else -%}
<svg class="chart chart--{{ g.kind }}" viewBox="0 0 {{ g.canvas.width|n }} {{ g.canvas.height|n }}" role="img">
  {%- if g.kind == 'bar' %}
  {%- for b in g.bars %}
  <rect x="{{ b.x|n }}" y="{{ b.y|n }}" width="{{ b.width|n }}" height="{{ b.height|n }}" fill="{{ b.color }}" rx="2"><title>{{ b.series }} {{ b.label }}: {{ b.value|n }}</title></rect>
  {%- endfor %}
  {%- else %}
  {%- for line in g.lines %}
  <polyline points="{% for p in line.points %}{{ p.x|n }},{{ p.y|n }}{{ ' ' if not loop.last }}{% endfor %}" fill="none" stroke="{{ line.color }}" stroke-width="3" />
  {%- for p in line.points %}
  <circle cx="{{ p.x|n }}" cy="{{ p.y|n }}" r="4" fill="{{ line.color }}"><title>{{ line.series }} {{ p.label }}: {{ p.value|n }}</title></circle>
  {%- endfor %}
  {%- endfor %}
  {%- endif %}
  {%- for a in g.axes %}
  <line x1="{{ a.x1|n }}" y1="{{ a.y1|n }}" x2="{{ a.x2|n }}" y2="{{ a.y2|n }}" class="chart__axis" stroke-width="2" />
  {%- endfor %}
  {%- for l in g.x_labels %}
  <text x="{{ l.x|n }}" y="{{ l.y|n }}" text-anchor="middle" class="chart__label">{{ l.text }}</text>
  {%- endfor %}
  {%- for e in g.legend %}
  <rect x="{{ e.x|n }}" y="{{ e.y|n }}" width="{{ e.size|n }}" height="{{ e.size|n }}" fill="{{ e.color }}" />
  <text x="{{ e.text_x|n }}" y="{{ e.text_y|n }}" class="chart__legend">{{ e.text }}</text>
  {%- endfor %}
</svg>
{%- endif %}
"""

_env = Environment(autoescape=True)
_env.filters["n"] = fmt_number
_template = _env.from_string(SVG_TEMPLATE)


def render_geometry(geometry: ChartGeometry) -> Markup:
    """SVG (or placeholder) markup for computed chart geometry."""
    return Markup(_template.render(g=geometry))


def chart_geometry(slide, palette: Sequence[str] = DEFAULT_PALETTE) -> ChartGeometry:
    """Geometry for any chart slide; NoData for slides that carry no chart."""
    if isinstance(slide, BarChartSlide):
        return bar_chart(slide.series, palette)
    if isinstance(slide, LineChartSlide):
        return line_chart(slide.series, palette)
    if isinstance(slide, PieChartSlide):
        return pie_chart(slide.segments, palette)
    return NoData()


def render_chart(slide, palette: Sequence[str] = DEFAULT_PALETTE) -> Markup:
    return render_geometry(chart_geometry(slide, palette))
