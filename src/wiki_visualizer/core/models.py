# ABOUTME: Domain models for extracted tables, motion-chart datasets and chart descriptors
# ABOUTME: Immutable pydantic values handed from the extraction pipeline to the rendering layer

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class CellKind(str, Enum):
    STRING = "string"
    NUMBER = "number"


class ChartKind(str, Enum):
    """Chart shapes the table pipeline can describe."""

    PIE = "pie"
    BAR = "bar"
    COL = "col"
    LINE = "line"
    SCATTER = "scatter"
    AREA = "area"

    @property
    def numeric_first_column(self) -> bool:
        """Scatter and area charts plot column 0 on a numeric axis."""
        return self in (ChartKind.SCATTER, ChartKind.AREA)


class ColumnType(str, Enum):
    STRING = "string"
    NUMBER = "number"
    DATE = "date"


class LegendMode(str, Enum):
    NONE = "none"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


class Cell(BaseModel):
    """A single table value tagged with its kind."""

    model_config = ConfigDict(frozen=True)

    kind: CellKind
    value: str | float

    @classmethod
    def string(cls, text: str) -> "Cell":
        return cls(kind=CellKind.STRING, value=text)

    @classmethod
    def number(cls, value: float) -> "Cell":
        return cls(kind=CellKind.NUMBER, value=float(value))


class Table(BaseModel):
    """Header and data rows pulled out of a wikitable.

    An empty header means the first line could not be split into labels.
    Rows are not required to match the header length.
    """

    model_config = ConfigDict(frozen=True)

    header: list[Cell] = Field(default_factory=list)
    rows: list[list[Cell]] = Field(default_factory=list)

    @property
    def column_count(self) -> int:
        return len(self.header)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def header_labels(self) -> list[str]:
        return [str(cell.value) for cell in self.header]


class DatasetTuple(BaseModel):
    """One {{dataset}} entry of a motion chart.

    The date is kept as written on the page: (year, month, day) with the
    month as given, which the charting API reads as 0-based.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    date: tuple[int, int, int]
    x: int
    y: int
    label: str


class Column(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: ColumnType
    name: str


class AxisHints(BaseModel):
    model_config = ConfigDict(frozen=True)

    h_title: str | None = None
    v_title: str | None = None


class ChartDescriptor(BaseModel):
    """Structured chart specification for the table pipeline."""

    model_config = ConfigDict(frozen=True)

    chart_kind: ChartKind
    title: str
    columns: list[Column]
    rows: list[list[str | float]]
    axis_hints: AxisHints | None = None
    legend_mode: LegendMode | None = None

    @property
    def column_count(self) -> int:
        return len(self.columns)

    @property
    def row_count(self) -> int:
        return len(self.rows)


class MotionChartDescriptor(BaseModel):
    """Structured chart specification for the motion-chart pipeline."""

    model_config = ConfigDict(frozen=True)

    columns: list[Column]
    datasets: list[DatasetTuple]

    @property
    def row_count(self) -> int:
        return len(self.datasets)
