from datetime import datetime

import pytest

from chartspec.services import (
    ChartMode,
    ChartSpecError,
    InputTable,
    UnknownChartKindError,
    classify,
)

T1 = datetime(2024, 1, 1)


@pytest.mark.parametrize(
    "table, expected",
    [
        (InputTable("pie", float_columns=[[1]]), ChartMode.pie),
        (InputTable("bar", float_columns=[[1, 2]]), ChartMode.bar),
        (InputTable("scatter", float_columns=[[1, 2]]), ChartMode.bubble_scatter),
        (InputTable("line", float_columns=[[0, 5]]), ChartMode.scatter_line),
        (InputTable("line", float_columns=[[1]], time_columns=[[T1]]), ChartMode.scatter_line),
        (
            InputTable("line", float_columns=[[1, 2]], string_columns=[["a"]]),
            ChartMode.line,
        ),
        (
            InputTable("line", float_columns=[[1]], time_columns=[[T1]], string_columns=[["a"]]),
            ChartMode.denormalised_scatter_line,
        ),
        (
            InputTable("line", time_columns=[[T1]], string_columns=[["a"]]),
            ChartMode.scatter_line,
        ),
        (InputTable(" Scatter "), ChartMode.bubble_scatter),
    ],
)
def test_classify(table, expected):
    assert classify(table) is expected


def test_classify_leaves_requested_kind_untouched():
    table = InputTable("line", float_columns=[[0, 5]])
    classify(table)
    classify(table)
    assert table.requested_chart_kind == "line"


def test_unknown_kind_is_fatal():
    with pytest.raises(UnknownChartKindError) as excinfo:
        classify(InputTable("donut", float_columns=[[1]]))
    assert excinfo.value.kind == "donut"
    assert isinstance(excinfo.value, ChartSpecError)
    assert "donut" in str(excinfo.value)
