from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Sequence

from .classifier import ChartMode
from .formatting import format_number, format_timestamp, quote_token
from .models import Dataset, InputTable, Point
from .palette import ColorAssigner
from .radius import DEFAULT_RADIUS, scatter_radius

TimestampFormatter = Callable[[Any], str]


class CategoryIndex:
    """Insertion-ordered mapping of category text to a dense index (first seen -> 0)."""

    def __init__(self) -> None:
        self._index: Dict[str, int] = {}

    def add(self, category: str) -> int:
        if category not in self._index:
            self._index[category] = len(self._index)
        return self._index[category]

    def index_of(self, category: str) -> int:
        return self._index[category]

    def __contains__(self, category: object) -> bool:
        return category in self._index

    def __len__(self) -> int:
        return len(self._index)

    def __iter__(self) -> Iterator[str]:
        return iter(self._index)


@dataclass
class DatasetBundle:
    datasets: List[Dataset] = field(default_factory=list)
    uses_time_scale: bool = False


class DatasetBuilder:
    """Decompose a table into Chart.js datasets for one resolved mode."""

    def __init__(
        self,
        colors: ColorAssigner | None = None,
        timestamp_formatter: TimestampFormatter = format_timestamp,
    ) -> None:
        self.colors = colors or ColorAssigner()
        self.timestamp_formatter = timestamp_formatter
        self._builders: Dict[ChartMode, Callable[[InputTable], DatasetBundle]] = {
            ChartMode.pie: self._pie,
            ChartMode.bar: self._bar,
            ChartMode.line: self._line,
            ChartMode.scatter_line: self._scatter_line,
            ChartMode.denormalised_scatter_line: self._denormalised_scatter_line,
            ChartMode.bubble_scatter: self._bubble_scatter,
        }

    def build(self, table: InputTable, mode: ChartMode) -> DatasetBundle:
        return self._builders[mode](table)

    # -- helpers -----------------------------------------------------------------

    def _simple_data(self, table: InputTable, col: int) -> List[str]:
        return [format_number(row[col]) for row in table.float_columns]

    def _time_token(self, value: Any) -> str:
        return quote_token(self.timestamp_formatter(value))

    def _single_series(self, table: InputTable) -> DatasetBundle:
        return DatasetBundle(
            datasets=[
                Dataset(
                    fill=True,
                    simple_data=self._simple_data(table, 0) if table.float_field_len else [],
                    background_color=self.colors.color_first_n(table.row_count),
                )
            ]
        )

    # -- modes -------------------------------------------------------------------

    def _pie(self, table: InputTable) -> DatasetBundle:
        return self._single_series(table)

    def _bar(self, table: InputTable) -> DatasetBundle:
        if table.float_field_len <= 1:
            return self._single_series(table)
        datasets = [
            Dataset(
                fill=True,
                label=f"category {col}",
                simple_data=self._simple_data(table, col),
                background_color=self.colors.color_repeat(col, table.row_count),
            )
            for col in range(table.float_field_len)
        ]
        return DatasetBundle(datasets=datasets)

    def _line(self, table: InputTable) -> DatasetBundle:
        datasets = [
            Dataset(
                fill=False,
                label=f"category {col}",
                simple_data=self._simple_data(table, col),
                border_color=self.colors.color_index(col),
                background_color=self.colors.color_index(col),
            )
            for col in range(table.float_field_len)
        ]
        return DatasetBundle(datasets=datasets)

    def _scatter_line(self, table: InputTable) -> DatasetBundle:
        bundle = DatasetBundle()
        if table.has_times:
            series = range(table.float_field_len)
        else:
            # column 0 is the x source, so it never forms a series of its own
            series = range(max(table.float_field_len - 1, 0))

        for n in series:
            points: List[Point] = []
            for idx, row in enumerate(table.float_columns):
                if table.has_times:
                    bundle.uses_time_scale = True
                    points.append(Point(x=self._time_token(table.time_columns[idx][0]), y=format_number(row[n])))
                else:
                    points.append(Point(x=format_number(row[0]), y=format_number(row[n + 1])))
            bundle.datasets.append(
                Dataset(
                    fill=False,
                    label=f"category {n}",
                    complex_data=points,
                    border_color=self.colors.color_index(n),
                    background_color=self.colors.color_index(n),
                )
            )
        return bundle

    def _denormalised_scatter_line(self, table: InputTable) -> DatasetBundle:
        bundle = DatasetBundle()
        categories = CategoryIndex()
        for idx, row in enumerate(table.float_columns):
            if table.has_times:
                bundle.uses_time_scale = True
                point = Point(x=self._time_token(table.time_columns[idx][0]), y=format_number(row[0]))
            else:
                point = Point(x=format_number(row[0]), y=format_number(row[1]))

            category = table.string_columns[idx][0]
            if category not in categories:
                color = self.colors.color_index(categories.add(category))
                bundle.datasets.append(
                    Dataset(fill=False, label=category, border_color=color, background_color=color)
                )
            bundle.datasets[categories.index_of(category)].complex_data.append(point)
        return bundle

    def _bubble_scatter(self, table: InputTable) -> DatasetBundle:
        bundle = DatasetBundle()
        categories = CategoryIndex()
        for row in table.string_columns:
            categories.add(row[0])

        labels: Sequence[str] = list(categories) or ["category 0"]
        for idx, label in enumerate(labels):
            color = self.colors.color_index(idx)
            bundle.datasets.append(Dataset(fill=True, label=label, border_color=color, background_color=color))

        for idx, row in enumerate(table.float_columns):
            if table.has_times:
                bundle.uses_time_scale = True
                x, y = self._time_token(table.time_columns[idx][0]), format_number(row[0])
                radius_col = 1
            else:
                x = format_number(row[0])
                y = format_number(row[1]) if len(row) >= 2 else "0"
                radius_col = 2
            point = Point(x=x, y=y, r=self._radius(table, row, radius_col))

            target = 0
            if len(categories):
                target = categories.index_of(table.string_columns[idx][0])
            bundle.datasets[target].complex_data.append(point)
        return bundle

    def _radius(self, table: InputTable, row: Sequence[float], col: int) -> str:
        if len(row) <= col:
            return format_number(DEFAULT_RADIUS)
        return format_number(scatter_radius(row[col], table.column_min[col], table.column_max[col]))

