# ABOUTME: Rendering of chart descriptors for client-side charting libraries
# ABOUTME: Pipeline stage 3: descriptors -> Google Charts DataTable JSON and options

from .google_charts import (
    chart_options,
    motion_chart_datatable,
    render_chart,
    render_motion_chart,
    to_datatable,
    visualization_class,
)

__all__ = [
    "chart_options",
    "motion_chart_datatable",
    "render_chart",
    "render_motion_chart",
    "to_datatable",
    "visualization_class",
]
