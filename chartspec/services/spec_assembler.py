from __future__ import annotations

from typing import Any, Callable, Sequence

from ..utils.logging import log_event
from .classifier import LIBRARY_CHART_KIND, ChartMode, classify
from .dataset_builder import DatasetBuilder
from .formatting import format_timestamp
from .labels import LabelMarshaler, preprocess_label
from .models import ChartSpec, InputTable
from .palette import ColorAssigner
from .table_validator import validate_radius_bounds, validate_table
from .tooltips import tooltip_callback

# modes whose datasets are flat value lists indexed by the shared labels
_LABELLED_MODES = {ChartMode.pie, ChartMode.bar, ChartMode.line}


def assemble_chart_spec(
    table: InputTable,
    *,
    palette: Sequence[str] | None = None,
    label_preprocessor: Callable[[str], str] = preprocess_label,
    timestamp_formatter: Callable[[Any], str] = format_timestamp,
) -> ChartSpec:
    """Classify ``table``, build its datasets and labels, and fill in display metadata."""

    validate_table(table)
    mode = classify(table)
    if mode is ChartMode.bubble_scatter:
        validate_radius_bounds(table, 1 if table.has_times else 2)

    builder = DatasetBuilder(ColorAssigner(palette), timestamp_formatter=timestamp_formatter)
    bundle = builder.build(table, mode)

    labels = []
    if mode in _LABELLED_MODES:
        labels = LabelMarshaler(label_preprocessor, timestamp_formatter).marshal(table)

    spec = ChartSpec(
        chart_kind=LIBRARY_CHART_KIND[mode],
        actual_mode=mode.value,
        labels=labels,
        datasets=bundle.datasets,
        uses_time_scale=bundle.uses_time_scale,
        title=table.title,
        scale_kind=table.scale_kind,
        x_label=table.x_label,
        y_label=table.y_label,
        zero_based=table.zero_based,
        tooltip_callback=tooltip_callback(mode),
    )
    log_event(
        "spec.assembled",
        {
            "requested_kind": table.requested_chart_kind,
            "mode": mode.value,
            "rows": table.row_count,
            "datasets": len(spec.datasets),
            "uses_time_scale": spec.uses_time_scale,
        },
        level="debug",
    )
    return spec
