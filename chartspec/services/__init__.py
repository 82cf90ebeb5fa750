from .classifier import ChartKind, ChartMode, classify, parse_chart_kind
from .dataset_builder import CategoryIndex, DatasetBuilder
from .errors import ChartSpecError, InconsistentTableShapeError, TableLoadError, UnknownChartKindError
from .formatting import format_number, format_timestamp
from .labels import LabelMarshaler, preprocess_label
from .models import ChartSpec, Dataset, InputTable, Point
from .palette import ColorAssigner, get_palette
from .radius import scatter_radius
from .renderer import render_chart_config, render_chart_page
from .spec_assembler import assemble_chart_spec
from .table_loader import TableLoader, column_groups, table_from_dataframe
from .table_validator import validate_table
from .tooltips import tooltip_callback

__all__ = [
    "ChartKind",
    "ChartMode",
    "classify",
    "parse_chart_kind",
    "CategoryIndex",
    "DatasetBuilder",
    "ChartSpecError",
    "InconsistentTableShapeError",
    "TableLoadError",
    "UnknownChartKindError",
    "format_number",
    "format_timestamp",
    "LabelMarshaler",
    "preprocess_label",
    "ChartSpec",
    "Dataset",
    "InputTable",
    "Point",
    "ColorAssigner",
    "get_palette",
    "scatter_radius",
    "render_chart_config",
    "render_chart_page",
    "assemble_chart_spec",
    "TableLoader",
    "column_groups",
    "table_from_dataframe",
    "validate_table",
    "tooltip_callback",
]
