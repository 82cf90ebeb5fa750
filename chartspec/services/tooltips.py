from __future__ import annotations

from textwrap import dedent
from typing import Dict

from .classifier import ChartMode

_PIE = dedent(
    """
    var value = data.datasets[0].data[tti.index];
    var total = data.datasets[0].data.reduce((a, b) => a + b, 0);
    var label = data.labels[tti.index];
    var percentage = Math.round(value / total * 100);
    return label + ': ' + percentage + '%';
    """
).strip()

_LINE = dedent(
    """
    var value = data.datasets[tti.datasetIndex].data[tti.index];
    if (value.y) {
        value = value.y;
    }
    return value;
    """
).strip()

_SCATTER = dedent(
    """
    var value = data.datasets[tti.datasetIndex].data[tti.index];
    var label = data.datasets[tti.datasetIndex].label;
    return (label ? label + ': ' : '') + '(' + value.x + ', ' + value.y + ')';
    """
).strip()

_BAR = dedent(
    """
    var value = data.datasets[tti.datasetIndex].data[tti.index];
    return value;
    """
).strip()

TOOLTIP_CALLBACKS: Dict[ChartMode, str] = {
    ChartMode.pie: _PIE,
    ChartMode.line: _LINE,
    ChartMode.scatter_line: _LINE,
    ChartMode.denormalised_scatter_line: _LINE,
    ChartMode.bubble_scatter: _SCATTER,
    ChartMode.bar: _BAR,
}


def tooltip_callback(mode: ChartMode | str) -> str:
    """Body of the Chart.js ``tooltips.callbacks.label`` function; unknown modes get an empty body."""

    try:
        return TOOLTIP_CALLBACKS.get(ChartMode(mode), "")
    except ValueError:
        return ""
