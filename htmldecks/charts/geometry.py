"""
Chart geometry: numeric series to drawing primitives.

Pure functions. Every chart either yields concrete shapes with coordinates
in canvas space or a NoData placeholder; degenerate input never raises.
"""

import math
from typing import List, Literal, Optional, Sequence, Union

from pydantic import BaseModel, Field

from htmldecks.models import BarSeries, LineSeries, PieSegment

DEFAULT_PALETTE = ["#5A49E1", "#46D19A", "#F5A623", "#E14A8B", "#4A9FF5", "#FF6B6B"]

MIN_BAR_WIDTH = 10.0
BAR_GAP = 2.0
BAR_GROUP_PADDING = 4.0


def fmt_number(value: float) -> str:
    """Compact number for SVG attributes: at most 2 decimals, no trailing zeros."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def palette_color(palette: Sequence[str], index: int) -> str:
    colors = palette or DEFAULT_PALETTE
    return colors[index % len(colors)]


# --- Canvas ---


class ChartCanvas(BaseModel):
    """Drawing area of bar and line charts."""

    width: float = 600
    height: float = 300
    margin_top: float = 20
    margin_right: float = 120
    margin_bottom: float = 40
    margin_left: float = 60

    @property
    def plot_width(self) -> float:
        return self.width - self.margin_left - self.margin_right

    @property
    def plot_height(self) -> float:
        return self.height - self.margin_top - self.margin_bottom

    @property
    def baseline(self) -> float:
        return self.margin_top + self.plot_height


class PieCanvas(BaseModel):
    """Drawing area of pie charts; the legend sits right of the pie."""

    width: float = 500
    height: float = 300
    radius: float = 100

    @property
    def center(self) -> float:
        return self.height / 2


# --- Primitives ---


class AxisLabel(BaseModel):
    x: float
    y: float
    text: str


class AxisLine(BaseModel):
    x1: float
    y1: float
    x2: float
    y2: float


class LegendEntry(BaseModel):
    """Color swatch at (x, y) with its text to the right."""

    x: float
    y: float
    size: float
    color: str
    text: str
    text_x: float
    text_y: float


class BarRect(BaseModel):
    x: float
    y: float
    width: float
    height: float
    color: str
    series: str
    label: str
    value: float


class PlotPoint(BaseModel):
    x: float
    y: float
    label: str
    value: float


class LinePath(BaseModel):
    series: str
    color: str
    points: List[PlotPoint] = Field(default_factory=list)


class PieWedge(BaseModel):
    label: str
    value: float
    color: str
    start_angle: float
    end_angle: float
    span: float
    large_arc: bool
    path: str

    @property
    def visible(self) -> bool:
        return bool(self.path)


class NoData(BaseModel):
    """Placeholder for charts with nothing to draw."""

    kind: Literal["empty"] = "empty"
    message: str = "No data available"


class BarChartGeometry(BaseModel):
    kind: Literal["bar"] = "bar"
    canvas: ChartCanvas
    bars: List[BarRect] = Field(default_factory=list)
    x_labels: List[AxisLabel] = Field(default_factory=list)
    legend: List[LegendEntry] = Field(default_factory=list)
    axes: List[AxisLine] = Field(default_factory=list)


class LineChartGeometry(BaseModel):
    kind: Literal["line"] = "line"
    canvas: ChartCanvas
    lines: List[LinePath] = Field(default_factory=list)
    x_labels: List[AxisLabel] = Field(default_factory=list)
    legend: List[LegendEntry] = Field(default_factory=list)
    axes: List[AxisLine] = Field(default_factory=list)


class PieChartGeometry(BaseModel):
    kind: Literal["pie"] = "pie"
    canvas: PieCanvas
    wedges: List[PieWedge] = Field(default_factory=list)
    legend: List[LegendEntry] = Field(default_factory=list)


ChartGeometry = Union[BarChartGeometry, LineChartGeometry, PieChartGeometry, NoData]


# --- Shared pieces ---


def _axes(canvas: ChartCanvas) -> List[AxisLine]:
    left = canvas.margin_left
    return [
        AxisLine(x1=left, y1=canvas.baseline, x2=left + canvas.plot_width, y2=canvas.baseline),
        AxisLine(x1=left, y1=canvas.margin_top, x2=left, y2=canvas.baseline),
    ]


def _series_legend(
    names: List[str], canvas: ChartCanvas, palette: Sequence[str]
) -> List[LegendEntry]:
    x = canvas.width - 100
    legend = []
    for i, name in enumerate(names):
        y = canvas.margin_top + i * 20
        legend.append(
            LegendEntry(
                x=x, y=y, size=12, color=palette_color(palette, i), text=name,
                text_x=x + 20, text_y=y + 9,
            )
        )
    return legend


def _union_in_order(values: List[str]) -> List[str]:
    # dict preserves first-seen order
    return list(dict.fromkeys(values))


# --- Bar ---


def bar_chart(
    series: List[BarSeries],
    palette: Sequence[str] = DEFAULT_PALETTE,
    canvas: Optional[ChartCanvas] = None,
) -> Union[BarChartGeometry, NoData]:
    """
    Grouped bar chart.

    The x-domain is the union of labels across all series in first-seen
    order; each label gets an equal-width group with series side by side.
    Bars scale against the largest value; if that is not positive every bar
    is flat.
    """
    canvas = canvas or ChartCanvas()
    labels = _union_in_order([p.label for s in series for p in s.data])
    if not series or not labels:
        return NoData()

    max_value = max(p.value for s in series for p in s.data)
    group_width = canvas.plot_width / len(labels)
    bar_width = max(MIN_BAR_WIDTH, group_width / len(series) - BAR_GROUP_PADDING)

    bars = []
    for series_index, s in enumerate(series):
        color = palette_color(palette, series_index)
        for point in s.data:
            label_index = labels.index(point.label)
            if max_value > 0:
                height = max(0.0, point.value) / max_value * canvas.plot_height
            else:
                height = 0.0
            bars.append(
                BarRect(
                    x=canvas.margin_left + label_index * group_width + series_index * (bar_width + BAR_GAP),
                    y=canvas.baseline - height,
                    width=bar_width,
                    height=height,
                    color=color,
                    series=s.name,
                    label=point.label,
                    value=point.value,
                )
            )

    x_labels = [
        AxisLabel(
            x=canvas.margin_left + i * group_width + group_width / 2,
            y=canvas.height - 15,
            text=label,
        )
        for i, label in enumerate(labels)
    ]

    return BarChartGeometry(
        canvas=canvas,
        bars=bars,
        x_labels=x_labels,
        legend=_series_legend([s.name for s in series], canvas, palette),
        axes=_axes(canvas),
    )


# --- Line ---


def line_chart(
    series: List[LineSeries],
    palette: Sequence[str] = DEFAULT_PALETTE,
    canvas: Optional[ChartCanvas] = None,
) -> Union[LineChartGeometry, NoData]:
    """
    Multi-series line chart over a shared categorical x-domain.

    The x-domain is the union of x values in first-seen order (not sorted).
    Points are evenly spaced by x index; a single x value is centred. y is
    scaled by the largest value with 0 on the baseline.
    """
    canvas = canvas or ChartCanvas()
    xs = _union_in_order([p.x for s in series for p in s.data])
    if not series or not xs:
        return NoData()

    max_y = max(p.y for s in series for p in s.data)

    def x_position(x_index: int) -> float:
        if len(xs) == 1:
            return canvas.margin_left + canvas.plot_width / 2
        return canvas.margin_left + x_index / (len(xs) - 1) * canvas.plot_width

    def y_position(y: float) -> float:
        if max_y <= 0:
            return canvas.baseline
        return canvas.baseline - y / max_y * canvas.plot_height

    lines = []
    for series_index, s in enumerate(series):
        points = [
            PlotPoint(x=x_position(xs.index(p.x)), y=y_position(p.y), label=p.x, value=p.y)
            for p in s.data
        ]
        lines.append(LinePath(series=s.name, color=palette_color(palette, series_index), points=points))

    x_labels = [
        AxisLabel(x=x_position(i), y=canvas.height - 15, text=x)
        for i, x in enumerate(xs)
    ]

    return LineChartGeometry(
        canvas=canvas,
        lines=lines,
        x_labels=x_labels,
        legend=_series_legend([s.name for s in series], canvas, palette),
        axes=_axes(canvas),
    )


# --- Pie ---


def _polar(center: float, radius: float, degrees: float):
    radians = math.radians(degrees)
    return center + radius * math.cos(radians), center + radius * math.sin(radians)


def _wedge_path(center: float, radius: float, start: float, end: float, span: float) -> str:
    c, r = fmt_number(center), fmt_number(radius)

    if span >= 360 - 1e-9:
        # A single arc cannot close on its own start point; draw two halves
        top, bottom = fmt_number(center - radius), fmt_number(center + radius)
        return (
            f"M {c} {top} A {r} {r} 0 1 1 {c} {bottom} "
            f"A {r} {r} 0 1 1 {c} {top} Z"
        )

    x1, y1 = _polar(center, radius, start)
    x2, y2 = _polar(center, radius, end)
    large_arc = 1 if span > 180 else 0
    return " ".join([
        f"M {c} {c}",
        f"L {fmt_number(x1)} {fmt_number(y1)}",
        f"A {r} {r} 0 {large_arc} 1 {fmt_number(x2)} {fmt_number(y2)}",
        "Z",
    ])


def pie_chart(
    segments: List[PieSegment],
    palette: Sequence[str] = DEFAULT_PALETTE,
    canvas: Optional[PieCanvas] = None,
) -> Union[PieChartGeometry, NoData]:
    """
    Pie chart swept clockwise from 12 o'clock (-90 degrees).

    Each segment spans value / total * 360 degrees. A zero segment draws no
    wedge but keeps its legend entry. Negative values count as zero.
    """
    canvas = canvas or PieCanvas()
    total = sum(max(0.0, s.value) for s in segments)
    if not segments or total <= 0:
        return NoData()

    center, radius = canvas.center, canvas.radius
    angle = -90.0
    wedges, legend = [], []

    for i, segment in enumerate(segments):
        value = max(0.0, segment.value)
        share = value / total
        span = share * 360
        start, end = angle, angle + span
        color = palette_color(palette, i)

        wedges.append(
            PieWedge(
                label=segment.label,
                value=segment.value,
                color=color,
                start_angle=start,
                end_angle=end,
                span=span,
                large_arc=span > 180,
                path=_wedge_path(center, radius, start, end, span) if span > 0 else "",
            )
        )

        y = 20 + i * 25
        legend.append(
            LegendEntry(
                x=canvas.height + 20, y=y, size=15, color=color,
                text=f"{segment.label}: {share * 100:.1f}%",
                text_x=canvas.height + 45, text_y=y + 12,
            )
        )
        angle = end

    return PieChartGeometry(canvas=canvas, wedges=wedges, legend=legend)
