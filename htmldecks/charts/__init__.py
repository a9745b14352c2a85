"""
Chart geometry and SVG rendering for bar, line and pie chart slides.
"""

from htmldecks.charts.geometry import (
    BarChartGeometry,
    ChartCanvas,
    LineChartGeometry,
    NoData,
    PieCanvas,
    PieChartGeometry,
    bar_chart,
    line_chart,
    pie_chart,
)
from htmldecks.charts.svg import chart_geometry, render_chart, render_geometry

__all__ = [
    "BarChartGeometry",
    "ChartCanvas",
    "LineChartGeometry",
    "NoData",
    "PieCanvas",
    "PieChartGeometry",
    "bar_chart",
    "line_chart",
    "pie_chart",
    "chart_geometry",
    "render_chart",
    "render_geometry",
]
