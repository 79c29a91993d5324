# ABOUTME: Builds chart descriptors from extracted tables and motion-chart datasets
# ABOUTME: Decides column types, coerces cells to numbers and derives axis and legend hints

from wiki_visualizer.core.errors import EmptyTableError, MalformedRowError
from wiki_visualizer.core.models import (
    AxisHints,
    ChartDescriptor,
    ChartKind,
    Column,
    ColumnType,
    DatasetTuple,
    LegendMode,
    MotionChartDescriptor,
    Table,
)
from wiki_visualizer.markup.table import normalize_table
from wiki_visualizer.utils.logging import get_logger

logger = get_logger(__name__)


def _axis_hints(labels: list[str], chart_kind: ChartKind) -> AxisHints | None:
    if chart_kind == ChartKind.SCATTER:
        return AxisHints(h_title=labels[0], v_title=labels[1] if len(labels) > 1 else None)
    if chart_kind == ChartKind.AREA:
        return AxisHints(h_title=labels[0])
    return None


def build(table: Table, chart_kind: ChartKind | str, title: str, strict: bool = False) -> ChartDescriptor:
    """Build the chart descriptor for ``table``.

    Column 0 holds category labels, except for scatter and area charts where
    it is numeric too. Every other column is numeric. A data row longer or
    shorter than the header is cut to the shorter of the two.

    Args:
        table: Extracted table with string cells
        chart_kind: Requested chart shape
        title: Chart title
        strict: Raise MalformedRowError for rows that do not match the header

    Raises:
        EmptyTableError: The table has no header labels or no data rows
        MalformedRowError: ``strict`` is set and a row length differs from the header
    """
    chart_kind = ChartKind(chart_kind)

    if table.column_count == 0:
        raise EmptyTableError("The table has no header row to take column names from")
    if table.row_count == 0:
        raise EmptyTableError("The table has no data rows")

    labels = [label.strip() for label in table.header_labels]
    first_type = ColumnType.NUMBER if chart_kind.numeric_first_column else ColumnType.STRING
    columns = [Column(type=first_type, name=labels[0])]
    columns.extend(Column(type=ColumnType.NUMBER, name=label) for label in labels[1:])

    mismatched = 0
    for index, row in enumerate(table.rows):
        if len(row) != table.column_count:
            if strict:
                raise MalformedRowError(index, table.column_count, len(row))
            mismatched += 1
    if mismatched:
        logger.warning("Accepting rows that do not match the header", mismatched_rows=mismatched, columns=len(labels))

    normalized = normalize_table(table, numeric_first_column=chart_kind.numeric_first_column)
    rows = [[cell.value for cell in row[: table.column_count]] for row in normalized.rows]

    return ChartDescriptor(
        chart_kind=chart_kind,
        title=title,
        columns=columns,
        rows=rows,
        axis_hints=_axis_hints(labels, chart_kind),
        legend_mode=LegendMode.NONE if chart_kind == ChartKind.SCATTER else None,
    )


def build_motion_chart(
    datasets: list[DatasetTuple],
    x_caption: str = "x axis",
    y_caption: str = "y axis",
    group_name: str = "Labels",
) -> MotionChartDescriptor:
    """Describe a motion chart: project, date, x and y values, then the group label."""
    columns = [
        Column(type=ColumnType.STRING, name="Project"),
        Column(type=ColumnType.DATE, name="Date"),
        Column(type=ColumnType.NUMBER, name=x_caption),
        Column(type=ColumnType.NUMBER, name=y_caption),
        Column(type=ColumnType.STRING, name=group_name),
    ]
    return MotionChartDescriptor(columns=columns, datasets=list(datasets))
