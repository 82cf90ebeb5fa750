from datetime import datetime

import pytest

from chartspec.services import (
    ChartMode,
    InconsistentTableShapeError,
    InputTable,
    UnknownChartKindError,
    assemble_chart_spec,
    render_chart_config,
    tooltip_callback,
)


def _table(kind="bar"):
    return InputTable(
        kind,
        float_columns=[[1, 2], [3, 4], [5, 6]],
        string_columns=[["north"], ["south"], ["north"]],
        title="Sales",
        scale_kind="logarithmic",
        x_label="region",
        y_label="units",
        zero_based=True,
    )


def test_assembly_is_deterministic():
    first = assemble_chart_spec(_table())
    second = assemble_chart_spec(_table())
    assert first == second
    assert render_chart_config(first) == render_chart_config(second)


def test_metadata_passes_through():
    spec = assemble_chart_spec(_table())
    assert spec.title == "Sales"
    assert spec.scale_kind == "logarithmic"
    assert spec.x_label == "region"
    assert spec.y_label == "units"
    assert spec.zero_based is True
    assert spec.tooltip_callback == tooltip_callback(ChartMode.bar)


@pytest.mark.parametrize("kind", ["pie", "bar", "line"])
def test_labels_align_with_rows(kind):
    spec = assemble_chart_spec(_table(kind))
    assert len(spec.labels) == 3


def test_labels_from_time_column():
    table = InputTable(
        "pie",
        float_columns=[[1], [2]],
        time_columns=[[datetime(2024, 3, 1, 8)], [datetime(2024, 3, 2, 8, 0, 0, 250000)]],
    )
    spec = assemble_chart_spec(table)
    assert spec.labels == ["2024-03-01T08:00:00", "2024-03-02T08:00:00.25"]


def test_label_preprocessor_is_injected():
    spec = assemble_chart_spec(_table("pie"), label_preprocessor=str.upper)
    assert spec.labels == ["NORTH", "SOUTH", "NORTH"]


def test_default_label_preprocessing_collapses_whitespace():
    table = InputTable("pie", float_columns=[[1]], string_columns=[["  two\nlines  "]])
    assert assemble_chart_spec(table).labels == ["two lines"]


def test_public_dict_hides_mode():
    payload = assemble_chart_spec(_table()).to_public_dict()
    assert "actual_mode" not in payload
    assert payload["chart_kind"] == "bar"


def test_unknown_kind_raises():
    with pytest.raises(UnknownChartKindError):
        assemble_chart_spec(_table("radar"))


def test_row_count_mismatch_fails_fast():
    table = InputTable("pie", float_columns=[[1], [2]], string_columns=[["a"]])
    with pytest.raises(InconsistentTableShapeError, match="inconsistent table shape"):
        assemble_chart_spec(table)


def test_ragged_rows_fail_fast():
    with pytest.raises(InconsistentTableShapeError):
        assemble_chart_spec(InputTable("bar", float_columns=[[1, 2], [3]]))


@pytest.mark.parametrize("kind", ["pie", "bar", "line", "scatter"])
def test_rows_without_numbers_fail_fast(kind):
    with pytest.raises(InconsistentTableShapeError, match="no numeric column"):
        assemble_chart_spec(InputTable(kind, string_columns=[["a"], ["b"], ["c"]]))
    with pytest.raises(InconsistentTableShapeError, match="no numeric column"):
        assemble_chart_spec(InputTable(kind, time_columns=[[datetime(2024, 1, 1)]]))


def test_missing_radius_bounds_fail_fast():
    table = InputTable("scatter", float_columns=[[1, 2, 3]])
    with pytest.raises(InconsistentTableShapeError, match="column_min"):
        assemble_chart_spec(table)


def test_mismatched_bounds_fail_fast():
    table = InputTable("bar", float_columns=[[1, 2]], column_min=[1, 2], column_max=[2])
    with pytest.raises(InconsistentTableShapeError):
        assemble_chart_spec(table)


def test_tooltip_per_mode():
    assert "percentage" in tooltip_callback(ChartMode.pie)
    assert "value.y" in tooltip_callback(ChartMode.scatter_line)
    assert tooltip_callback(ChartMode.denormalised_scatter_line) == tooltip_callback(ChartMode.line)
    assert "value.x" in tooltip_callback(ChartMode.bubble_scatter)
    assert tooltip_callback(ChartMode.bar).endswith("return value;")
    assert tooltip_callback("heatmap") == ""
