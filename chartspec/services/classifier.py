from __future__ import annotations

from enum import Enum

from .errors import UnknownChartKindError
from .models import InputTable


class ChartKind(str, Enum):
    """Chart kinds a caller may request."""

    pie = "pie"
    bar = "bar"
    line = "line"
    scatter = "scatter"


class ChartMode(str, Enum):
    """Rendering strategy resolved from the requested kind and the table's shape."""

    pie = "pie"
    bar = "bar"
    line = "line"
    scatter_line = "scatter-line"
    denormalised_scatter_line = "denormalised-scatter-line"
    bubble_scatter = "bubble-scatter"


# Literal `type` Chart.js receives for each mode.
LIBRARY_CHART_KIND = {
    ChartMode.pie: "pie",
    ChartMode.bar: "bar",
    ChartMode.line: "line",
    ChartMode.scatter_line: "line",
    ChartMode.denormalised_scatter_line: "line",
    ChartMode.bubble_scatter: "bubble",
}

_AS_REQUESTED = {
    ChartKind.pie: ChartMode.pie,
    ChartKind.bar: ChartMode.bar,
    ChartKind.line: ChartMode.line,
    ChartKind.scatter: ChartMode.bubble_scatter,
}


def parse_chart_kind(kind: str) -> ChartKind:
    try:
        return ChartKind((kind or "").strip().lower())
    except ValueError as exc:
        raise UnknownChartKindError(kind) from exc


def classify(table: InputTable) -> ChartMode:
    """Resolve the rendering mode for ``table`` without touching its requested kind."""

    kind = parse_chart_kind(table.requested_chart_kind)
    if kind is ChartKind.line and (not table.has_strings or table.has_times):
        # every row becomes one point tagged by its category rather than a column per series
        if table.has_strings and table.float_field_len + table.time_field_len >= 2:
            return ChartMode.denormalised_scatter_line
        return ChartMode.scatter_line
    return _AS_REQUESTED[kind]
