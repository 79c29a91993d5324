# ABOUTME: Pipeline entry point: request parameters -> page source -> chart descriptor
# ABOUTME: Converts typed pipeline errors into a result record the presentation layer can show

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from wiki_visualizer.config import Config, get_config
from wiki_visualizer.core.descriptor import build, build_motion_chart
from wiki_visualizer.core.errors import (
    DatasetPatternNotMatchedError,
    ErrorKind,
    MissingParameterError,
    UnauthorisedDomainError,
    UnsupportedChartKindError,
    VisualizerError,
)
from wiki_visualizer.core.models import ChartDescriptor, ChartKind, MotionChartDescriptor, Table
from wiki_visualizer.extraction.base import PageSourceProvider, project_domain
from wiki_visualizer.i18n import DEFAULT_LANGUAGE, source_attribution
from wiki_visualizer.markup.cleaner import clean
from wiki_visualizer.markup.dataset import extract_datasets
from wiki_visualizer.markup.locator import locate
from wiki_visualizer.markup.table import parse_table
from wiki_visualizer.utils.logging import get_logger, with_operation_context, with_pipeline_context

MOTION_TEMPLATE = "visualize"


class VisualizationMode(str, Enum):
    TABLE = "table"
    MOTION = "motion"


class VisualizationRequest(BaseModel):
    """Everything one visualization needs, passed explicitly into the pipeline."""

    model_config = ConfigDict(frozen=True)

    page: str = Field(min_length=1, description="Page title; spaces are stored as underscores")
    project: str = Field(default="en.wikipedia.org", description="Project host, e.g. fr.wikipedia.org")
    template: str = Field(default=MOTION_TEMPLATE, min_length=1, description="Template that marks the data")
    chart_kind: ChartKind = Field(default=ChartKind.PIE, description="Chart shape for the table pipeline")
    title: str | None = Field(default=None, description="Chart title, defaults to the displayed page name")
    x_caption: str = Field(default="x axis", description="Motion chart x column caption")
    y_caption: str = Field(default="y axis", description="Motion chart y column caption")
    group: str = Field(default="Labels", description="Motion chart label column caption")
    lang: str = Field(default=DEFAULT_LANGUAGE, description="Language of the source attribution")

    @field_validator("page")
    @classmethod
    def _underscore_spaces(cls, value: str) -> str:
        return value.replace(" ", "_")

    @property
    def mode(self) -> VisualizationMode:
        return VisualizationMode.MOTION if self.template == MOTION_TEMPLATE else VisualizationMode.TABLE

    @property
    def displayed_page_name(self) -> str:
        return self.page.replace("_", " ")

    @property
    def chart_title(self) -> str:
        return self.title or self.displayed_page_name

    @classmethod
    def from_params(cls, params: Mapping[str, str], config: Config | None = None) -> VisualizationRequest:
        """Build a request from tool URL parameters (page, project, tpl, ct, title, x, y, group, lang).

        Raises:
            MissingParameterError: ``page`` is absent, empty or ``_``
            UnsupportedChartKindError: ``ct`` is not one of the table chart kinds
        """
        config = config or get_config()

        page = (params.get("page") or "").strip().replace(" ", "_")
        if page in ("", "_"):
            raise MissingParameterError("page")

        chart_kind = params.get("ct") or ChartKind.PIE.value
        try:
            kind = ChartKind(chart_kind)
        except ValueError:
            raise UnsupportedChartKindError(chart_kind) from None

        return cls(
            page=page,
            project=params.get("project") or config.default_project,
            template=params.get("tpl") or MOTION_TEMPLATE,
            chart_kind=kind,
            title=params.get("title") or None,
            x_caption=params.get("x") or "x axis",
            y_caption=params.get("y") or "y axis",
            group=params.get("group") or "Labels",
            lang=params.get("lang") or DEFAULT_LANGUAGE,
        )


class VisualizationResult(BaseModel):
    """Outcome of one visualization request; exactly one of chart/motion_chart on success."""

    request: VisualizationRequest | None = None
    success: bool = True
    error_kind: ErrorKind | None = None
    error_message: str | None = None
    chart: ChartDescriptor | None = None
    motion_chart: MotionChartDescriptor | None = None
    attribution: str | None = None

    @classmethod
    def failed(cls, request: VisualizationRequest | None, error: VisualizerError) -> VisualizationResult:
        return cls(request=request, success=False, error_kind=error.kind, error_message=str(error))


@with_operation_context("extract_table")
def extract_table(page_source: str, template_name: str) -> Table:
    """Locate the template's table, clean its markup and split it into cells."""
    return parse_table(clean(locate(page_source, template_name)))


def build_chart(
    page_source: str, template_name: str, chart_kind: ChartKind | str, title: str, strict: bool = False
) -> ChartDescriptor:
    return build(extract_table(page_source, template_name), chart_kind, title, strict=strict)


@with_operation_context("extract_motion_chart")
def build_motion_chart_from_source(
    page_source: str, x_caption: str = "x axis", y_caption: str = "y axis", group_name: str = "Labels"
) -> MotionChartDescriptor:
    datasets = extract_datasets(page_source)
    if datasets is None:
        raise DatasetPatternNotMatchedError()
    return build_motion_chart(datasets, x_caption, y_caption, group_name)


class VisualizerService:
    """Runs one request through fetch, extraction and descriptor building."""

    def __init__(self, provider: PageSourceProvider | None = None, config: Config | None = None):
        self.config = config or get_config()
        if provider is None:
            from wiki_visualizer.extraction.wiki.mediawiki import MediaWikiPageSource

            provider = MediaWikiPageSource(config=self.config)
        self.provider = provider
        self.logger = get_logger(__name__)

    def check_domain(self, project: str) -> None:
        domain = project_domain(project)
        if domain not in self.config.authorised_domains:
            raise UnauthorisedDomainError(domain or project)

    async def visualize(self, request: VisualizationRequest) -> VisualizationResult:
        """Fetch the request's page and build its chart."""
        with with_pipeline_context("visualize", page=request.page, project=request.project) as logger:
            try:
                self.check_domain(request.project)
                page_source = await self.provider.fetch(request.page, request.project)
            except VisualizerError as e:
                logger.warning("Could not get page source", error=str(e), error_kind=e.kind.value)
                return VisualizationResult.failed(request, e)

            return self.visualize_source(request, page_source)

    async def visualize_params(self, params: Mapping[str, str]) -> VisualizationResult:
        try:
            request = VisualizationRequest.from_params(params, self.config)
        except VisualizerError as e:
            self.logger.warning("Rejected request parameters", error=str(e), error_kind=e.kind.value)
            return VisualizationResult.failed(None, e)
        return await self.visualize(request)

    def visualize_source(self, request: VisualizationRequest, page_source: str) -> VisualizationResult:
        """Build the chart for ``request`` from page markup already in hand."""
        try:
            if request.mode == VisualizationMode.MOTION:
                motion_chart = build_motion_chart_from_source(
                    page_source, request.x_caption, request.y_caption, request.group
                )
                chart = None
            else:
                chart = build_chart(
                    page_source, request.template, request.chart_kind, request.chart_title, self.config.strict_rows
                )
                motion_chart = None
        except VisualizerError as e:
            self.logger.warning(
                "Could not build chart",
                page=request.page,
                template=request.template,
                error=str(e),
                error_kind=e.kind.value,
            )
            return VisualizationResult.failed(request, e)

        self.logger.info(
            "Built chart",
            page=request.page,
            mode=request.mode.value,
            chart_kind=request.chart_kind.value if chart else None,
            rows=chart.row_count if chart else motion_chart.row_count,
        )
        return VisualizationResult(
            request=request,
            chart=chart,
            motion_chart=motion_chart,
            attribution=source_attribution(request.page, request.project, request.lang),
        )

    async def close(self) -> None:
        await self.provider.close()
