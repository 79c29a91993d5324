# ABOUTME: Main CLI application entry point using asyncclick for native async support
# ABOUTME: Provides commands to chart a wikitable, chart {{dataset}} motion data and show logging status

import json
import sys
from pathlib import Path

import asyncclick as click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from wiki_visualizer.config import get_config
from wiki_visualizer.core.models import ChartKind
from wiki_visualizer.core.service import VisualizationRequest, VisualizationResult, VisualizerService
from wiki_visualizer.rendering import render_chart, render_motion_chart
from wiki_visualizer.utils.logging import (
    LoggingMode,
    configure_logging,
    get_logging_status,
    with_pipeline_context,
)
from wiki_visualizer.utils.rich_tables import (
    create_chart_data_table,
    create_chart_summary_table,
    create_logging_status_table,
    create_motion_chart_table,
    print_rich_table,
)

console = Console()


async def _run(request: VisualizationRequest, source: Path | None) -> VisualizationResult:
    """Build the chart from a local markup file, or fetch the page when none is given."""
    service = VisualizerService()
    try:
        if source is not None:
            return service.visualize_source(request, source.read_text(encoding="utf-8"))
        return await service.visualize(request)
    finally:
        await service.close()


def _display_result(result: VisualizationResult, json_output: bool) -> None:
    if not result.success:
        if json_output:
            click.echo(json.dumps({"error": result.error_kind.value, "message": result.error_message}))
        else:
            console.print(f"[red]❌ Sorry, {escape(result.error_message)}[/red]")
        sys.exit(1)

    if json_output:
        rendered = render_chart(result.chart) if result.chart else render_motion_chart(result.motion_chart)
        click.echo(json.dumps(rendered, ensure_ascii=False))
        return

    if result.chart:
        print_rich_table(console, create_chart_summary_table(result.chart))
        print_rich_table(console, create_chart_data_table(result.chart))
    else:
        print_rich_table(console, create_motion_chart_table(result.motion_chart))
    console.print(f"[dim]{result.attribution}[/dim]")


@click.command()
@click.argument("page")
@click.option("--project", "-p", default=None, help="Project host, e.g. fr.wikipedia.org")
@click.option("--template", "-t", default="visualizer", show_default=True, help="Template that precedes the table")
@click.option(
    "--kind",
    "-k",
    "chart_kind",
    type=click.Choice([kind.value for kind in ChartKind]),
    default=ChartKind.PIE.value,
    show_default=True,
    help="Chart type",
)
@click.option("--title", default=None, help="Chart title (defaults to the page name)")
@click.option("--lang", default="en", show_default=True, help="Language of the source attribution")
@click.option("--source", type=click.Path(exists=True, dir_okay=False, path_type=Path), help="Read markup from a file")
@click.pass_context
async def chart(
    ctx, page: str, project: str | None, template: str, chart_kind: str, title: str | None, lang: str, source: Path | None
):
    """
    📊 Chart the wikitable that follows a template on a wiki page.
    """
    request = VisualizationRequest(
        page=page,
        project=project or get_config().default_project,
        template=template,
        chart_kind=ChartKind(chart_kind),
        title=title,
        lang=lang,
    )
    with with_pipeline_context("chart", page=request.page, chart_kind=chart_kind) as logger:
        logger.info("Starting chart", template=template)
        result = await _run(request, source)
    _display_result(result, ctx.obj["json_output"])


@click.command()
@click.argument("page")
@click.option("--project", "-p", default=None, help="Project host, e.g. en.wikipedia.org")
@click.option("--x", "x_caption", default="x axis", show_default=True, help="Caption of the x values")
@click.option("--y", "y_caption", default="y axis", show_default=True, help="Caption of the y values")
@click.option("--group", default="Labels", show_default=True, help="Caption of the label column")
@click.option("--lang", default="en", show_default=True, help="Language of the source attribution")
@click.option("--source", type=click.Path(exists=True, dir_okay=False, path_type=Path), help="Read markup from a file")
@click.pass_context
async def motion(
    ctx,
    page: str,
    project: str | None,
    x_caption: str,
    y_caption: str,
    group: str,
    lang: str,
    source: Path | None,
):
    """
    🎞️ Chart the {{dataset}} entries of a {{visualize}} template as a motion chart.
    """
    request = VisualizationRequest(
        page=page,
        project=project or get_config().default_project,
        x_caption=x_caption,
        y_caption=y_caption,
        group=group,
        lang=lang,
    )
    with with_pipeline_context("motion", page=request.page) as logger:
        logger.info("Starting motion chart")
        result = await _run(request, source)
    _display_result(result, ctx.obj["json_output"])


def _initialize_logging(json_output: bool, log_level: str | None = None, log_file: str | None = None) -> None:
    """Initialize logging configuration."""
    config = get_config()
    # JSON output keeps stdout clean, so logs go to stderr whatever the configured mode
    mode = LoggingMode.PRODUCTION if json_output else config.log_mode

    # Use config defaults when CLI parameters are not provided
    final_log_level = log_level or config.log_level
    final_log_file = log_file or (str(config.log_file) if config.log_file else None)

    configure_logging(mode=mode, log_level=final_log_level, log_file=final_log_file)


@click.command(name="logging-status")
def logging_status():
    """
    🔍 Show current logging configuration and status.
    """
    status = get_logging_status()
    print_rich_table(console, create_logging_status_table(status))


@click.group(invoke_without_command=True)
@click.option("--json", is_flag=True, help="Print Google Charts JSON instead of rich tables")
@click.option("--log-level", default=None, help="Logging level (DEBUG, INFO, WARNING, ERROR)")
@click.option("--log-file", help="Custom log file path")
@click.pass_context
def app(ctx, json: bool, log_level: str | None, log_file: str | None):
    """
    📈 Wiki Visualizer - chart the data published on a wiki page

    Reads a wikitable or {{dataset}} entries from a MediaWiki page and turns
    them into chart data for the Google visualization API.
    """
    ctx.ensure_object(dict)
    ctx.obj["json_output"] = json

    _initialize_logging(json, log_level, log_file)

    if ctx.invoked_subcommand is None:
        console.print(Panel.fit("📈 [bold cyan]Wiki Visualizer[/bold cyan]", border_style="magenta"))
        click.echo(ctx.get_help())


app.add_command(chart)
app.add_command(motion)
app.add_command(logging_status)


if __name__ == "__main__":
    app()
