# ABOUTME: Serializes chart descriptors for the Google Charts visualization API
# ABOUTME: Produces DataTable JSON literals and chart option objects instead of inline script code

from typing import Any

from wiki_visualizer.core.models import ChartDescriptor, ChartKind, MotionChartDescriptor

VISUALIZATION_CLASSES = {
    ChartKind.PIE: "PieChart",
    ChartKind.BAR: "BarChart",
    ChartKind.COL: "ColumnChart",
    ChartKind.LINE: "LineChart",
    ChartKind.SCATTER: "ScatterChart",
    ChartKind.AREA: "AreaChart",
}
MOTION_CHART_CLASS = "MotionChart"

CHART_SIZE = (1000, 500)
MOTION_CHART_SIZE = (600, 300)


def visualization_class(chart_kind: ChartKind | str) -> str:
    """Name of the google.visualization class that draws ``chart_kind``."""
    return VISUALIZATION_CLASSES[ChartKind(chart_kind)]


def to_datatable(descriptor: ChartDescriptor) -> dict[str, Any]:
    """Build the DataTable JSON literal: ``{"cols": [...], "rows": [{"c": [...]}]}``."""
    return {
        "cols": [{"type": column.type.value, "label": column.name} for column in descriptor.columns],
        "rows": [{"c": [{"v": value} for value in row]} for row in descriptor.rows],
    }


def chart_options(descriptor: ChartDescriptor, width: int = CHART_SIZE[0], height: int = CHART_SIZE[1]) -> dict[str, Any]:
    options: dict[str, Any] = {"width": width, "height": height, "title": descriptor.title}

    hints = descriptor.axis_hints
    if hints is not None:
        if hints.h_title is not None:
            options["hAxis"] = {"title": hints.h_title}
        if hints.v_title is not None:
            options["vAxis"] = {"title": hints.v_title}
    if descriptor.legend_mode is not None:
        options["legend"] = descriptor.legend_mode.value
    return options


def motion_chart_datatable(descriptor: MotionChartDescriptor) -> dict[str, Any]:
    """DataTable JSON for a motion chart; dates use the ``Date(y, m, d)`` literal form."""
    rows = []
    for dataset in descriptor.datasets:
        year, month, day = dataset.date
        values = [dataset.id, f"Date({year}, {month}, {day})", dataset.x, dataset.y, dataset.label]
        rows.append({"c": [{"v": value} for value in values]})

    return {
        "cols": [{"type": column.type.value, "label": column.name} for column in descriptor.columns],
        "rows": rows,
    }


def render_chart(descriptor: ChartDescriptor) -> dict[str, Any]:
    """Everything a page needs to draw the chart: class name, data and options."""
    return {
        "chart": visualization_class(descriptor.chart_kind),
        "data": to_datatable(descriptor),
        "options": chart_options(descriptor),
    }


def render_motion_chart(descriptor: MotionChartDescriptor) -> dict[str, Any]:
    width, height = MOTION_CHART_SIZE
    return {
        "chart": MOTION_CHART_CLASS,
        "data": motion_chart_datatable(descriptor),
        "options": {"width": width, "height": height},
    }
