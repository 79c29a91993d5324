# ABOUTME: Domain models, error taxonomy and pipeline orchestration
# ABOUTME: Pipeline stage 2: raw wikitext -> chart descriptors

"""
Core Layer: Turn page markup into chart descriptors

This layer handles:
- Domain models handed to the rendering layer
- The error taxonomy shared by every stage
- Descriptor building and request orchestration

Data Flow: extraction/ page source -> markup/ parsing -> chart descriptors
"""

from .errors import ErrorKind, VisualizerError
from .models import (
    AxisHints,
    Cell,
    CellKind,
    ChartDescriptor,
    ChartKind,
    Column,
    ColumnType,
    DatasetTuple,
    LegendMode,
    MotionChartDescriptor,
    Table,
)

# Import service on-demand to avoid circular imports
# Use: from wiki_visualizer.core.service import VisualizerService

__all__ = [
    "AxisHints",
    "Cell",
    "CellKind",
    "ChartDescriptor",
    "ChartKind",
    "Column",
    "ColumnType",
    "DatasetTuple",
    "ErrorKind",
    "LegendMode",
    "MotionChartDescriptor",
    "Table",
    "VisualizerError",
]
