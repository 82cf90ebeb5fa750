from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence, Union

Color = Union[str, List[str]]


@dataclass
class InputTable:
    """Column groups of one table plus the display metadata passed through to the chart."""

    requested_chart_kind: str
    float_columns: Sequence[Sequence[float]] = field(default_factory=list)
    time_columns: Sequence[Sequence[datetime]] = field(default_factory=list)
    string_columns: Sequence[Sequence[str]] = field(default_factory=list)
    column_min: Sequence[float] = field(default_factory=list)
    column_max: Sequence[float] = field(default_factory=list)
    title: str = ""
    scale_kind: str = "linear"
    x_label: str = ""
    y_label: str = ""
    zero_based: bool = False

    @property
    def has_floats(self) -> bool:
        return len(self.float_columns) > 0

    @property
    def has_times(self) -> bool:
        return len(self.time_columns) > 0

    @property
    def has_strings(self) -> bool:
        return len(self.string_columns) > 0

    @property
    def float_field_len(self) -> int:
        if not self.has_floats:
            return 0
        return len(self.float_columns[0])

    @property
    def time_field_len(self) -> int:
        if not self.has_times:
            return 0
        return len(self.time_columns[0])

    @property
    def row_count(self) -> int:
        return len(self.float_columns)


@dataclass
class Point:
    x: str
    y: str
    r: Optional[str] = None

    @property
    def uses_r(self) -> bool:
        return self.r is not None


@dataclass
class Dataset:
    fill: bool
    label: str = ""
    border_color: Color = ""
    background_color: Color = ""
    simple_data: List[str] = field(default_factory=list)
    complex_data: List[Point] = field(default_factory=list)


@dataclass
class ChartSpec:
    chart_kind: str
    actual_mode: str
    labels: List[str] = field(default_factory=list)
    datasets: List[Dataset] = field(default_factory=list)
    uses_time_scale: bool = False
    title: str = ""
    scale_kind: str = "linear"
    x_label: str = ""
    y_label: str = ""
    zero_based: bool = False
    tooltip_callback: str = ""

    @property
    def many_colors(self) -> bool:
        return self.chart_kind in {"pie", "bar"}

    def to_public_dict(self) -> Dict[str, Any]:
        """Serialize everything a renderer or API client may see; the resolved mode stays internal."""
        payload = asdict(self)
        payload.pop("actual_mode", None)
        return payload
