# ABOUTME: Rich table builders for showing chart descriptors and logging status in the CLI
# ABOUTME: Wiki-sourced text is escaped so page markup never reaches rich's own markup parser

from typing import Any

from rich.box import ROUNDED, SIMPLE
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from wiki_visualizer.core.models import ChartDescriptor, MotionChartDescriptor


def _styled_table(title: str, title_style: str, box_style=ROUNDED, **options) -> Table:
    return Table(
        title=f"[{title_style}]{title}[/{title_style}]",
        box=box_style,
        show_header=True,
        border_style="cyan",
        title_justify="left",
        **options,
    )


def create_key_value_table(
    title: str,
    data: dict[str, str],
    title_style: str = "bold cyan",
    key_style: str = "bold blue",
    value_style: str = "green",
    box_style=ROUNDED,
) -> Table:
    """Create a two-column Field/Value table.

    Args:
        title: Table title, may start with an emoji
        data: Rows to show, in insertion order
        title_style: Style for the table title
        key_style: Style for the Field column
        value_style: Style for the Value column
        box_style: Border style for the table
    """
    table = _styled_table(title, title_style, box_style, header_style="bold magenta", expand=False)
    table.add_column("Field", style=key_style)
    table.add_column("Value", style=value_style)

    for key, value in data.items():
        table.add_row(key, str(value))
    return table


def create_multi_column_table(
    title: str,
    columns: list[tuple[str, str]],
    rows: list[list[str]],
    title_style: str = "bold cyan",
    header_style: str = "bold magenta",
    alternate_row_styles: list[str] | None = None,
) -> Table:
    """Create a zebra-striped table from (name, style) column pairs and string rows."""
    table = _styled_table(
        title, title_style, header_style=header_style, row_styles=alternate_row_styles or ["", "dim"], expand=True
    )
    for name, style in columns:
        table.add_column(name, style=style)
    for row in rows:
        table.add_row(*row)
    return table


def _format_value(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return escape(str(value))


def create_chart_summary_table(descriptor: ChartDescriptor) -> Table:
    summary = {
        "📈 Chart": descriptor.chart_kind.value,
        "🏷️ Title": escape(descriptor.title),
        "📐 Size": f"{descriptor.row_count} rows x {descriptor.column_count} columns",
    }
    if descriptor.axis_hints is not None:
        summary["↔️ Horizontal Axis"] = escape(descriptor.axis_hints.h_title or "-")
        summary["↕️ Vertical Axis"] = escape(descriptor.axis_hints.v_title or "-")
    if descriptor.legend_mode is not None:
        summary["🗺️ Legend"] = descriptor.legend_mode.value

    return create_key_value_table(title="📊 Chart Descriptor", data=summary, box_style=SIMPLE)


def create_chart_data_table(descriptor: ChartDescriptor) -> Table:
    """Show the descriptor's rows under '<name> (<type>)' column headings."""
    columns = [
        (f"{escape(column.name)} ({column.type.value})", "green" if index else "bold blue")
        for index, column in enumerate(descriptor.columns)
    ]
    rows = [[_format_value(value) for value in row] for row in descriptor.rows]
    return create_multi_column_table(title="🧮 Chart Data", columns=columns, rows=rows)


def create_motion_chart_table(descriptor: MotionChartDescriptor) -> Table:
    columns = [(f"{escape(column.name)} ({column.type.value})", "green") for column in descriptor.columns]
    rows = [
        [
            escape(dataset.id),
            "/".join(str(part) for part in dataset.date),
            str(dataset.x),
            str(dataset.y),
            escape(dataset.label),
        ]
        for dataset in descriptor.datasets
    ]
    return create_multi_column_table(title="🎞️ Motion Chart Data", columns=columns, rows=rows)


LOG_FILE_LABELS = {"main": "📝 Main Log", "json": "📊 JSON Log", "errors": "🚨 Error Log"}


def create_logging_status_table(status: dict[str, Any]) -> Table:
    """Summarize ``get_logging_status()``; log file rows only appear in interactive mode."""
    logging_data = {
        "🔧 Mode": status["mode"].title(),
        "📁 Log Directory": status["log_directory"] or "N/A (production mode)",
        "🔇 Suppressed Libraries": ", ".join(status["third_party_suppressed"]),
    }
    for key, label in LOG_FILE_LABELS.items():
        if status["log_files"][key]:
            logging_data[label] = status["log_files"][key]

    return create_key_value_table(
        title="🔍 Logging Configuration",
        data=logging_data,
        title_style="bold green",
        key_style="blue",
        value_style="white",
    )


def print_rich_table(console: Console, table: Table) -> None:
    """Print ``table`` with a blank line above and below."""
    console.print()
    console.print(table)
    console.print()
