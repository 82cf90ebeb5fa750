from __future__ import annotations

from typing import Iterable, Sequence, Tuple

from .errors import InconsistentTableShapeError
from .models import InputTable


def _ensure(condition: bool, message: str) -> None:
    if not condition:
        raise InconsistentTableShapeError(f"inconsistent table shape: {message}")


def _validate_rows(name: str, rows: Sequence[Sequence[object]]) -> None:
    if not rows:
        return
    width = len(rows[0])
    _ensure(width > 0, f"{name} rows must hold at least one column")
    for idx, row in enumerate(rows):
        _ensure(len(row) == width, f"{name}[{idx}] has {len(row)} columns, expected {width}")


def _present(table: InputTable) -> Iterable[Tuple[str, int]]:
    for name, rows in (
        ("float_columns", table.float_columns),
        ("time_columns", table.time_columns),
        ("string_columns", table.string_columns),
    ):
        if rows:
            yield name, len(rows)


def validate_table(table: InputTable) -> InputTable:
    """Reject tables whose column groups disagree on shape; return the table untouched otherwise."""

    _validate_rows("float_columns", table.float_columns)
    _validate_rows("time_columns", table.time_columns)
    _validate_rows("string_columns", table.string_columns)

    counts = dict(_present(table))
    _ensure(
        len(set(counts.values())) <= 1,
        "row counts differ across column kinds (" + ", ".join(f"{k}={v}" for k, v in counts.items()) + ")",
    )

    _ensure(
        table.has_floats or not counts,
        "rows hold text or time values but no numeric column to plot",
    )
    if table.has_floats:
        _ensure(
            len(table.column_min) == len(table.column_max),
            f"column_min has {len(table.column_min)} entries but column_max has {len(table.column_max)}",
        )
    return table


def validate_radius_bounds(table: InputTable, radius_col: int) -> None:
    if table.float_field_len <= radius_col:
        return
    _ensure(
        len(table.column_min) > radius_col and len(table.column_max) > radius_col,
        f"column_min/column_max must cover numeric column {radius_col} to size bubbles",
    )
