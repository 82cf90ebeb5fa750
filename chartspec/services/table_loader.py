from __future__ import annotations

from dataclasses import dataclass
from io import BytesIO
from pathlib import Path
from typing import Any, Dict, List

import numpy as np
import pandas as pd

from ..utils.logging import log_event
from .errors import TableLoadError
from .models import InputTable

_EXCEL_SUFFIXES = {".xls", ".xlsx", ".xlsm"}
_TSV_SUFFIXES = {".tsv", ".tab"}
_COERCE_RATIO = 0.7


def _semantic_type(series: pd.Series) -> str:
    if pd.api.types.is_datetime64_any_dtype(series):
        return "temporal"
    if pd.api.types.is_numeric_dtype(series) and not pd.api.types.is_bool_dtype(series):
        return "quantitative"
    return "categorical"


def _normalize_number(value: Any) -> float:
    if isinstance(value, (np.integer, np.floating)):
        return float(value.item())
    return float(value)


def _parse_datetimes(series: pd.Series) -> pd.Series:
    try:
        parsed = pd.to_datetime(series, errors="coerce", format="mixed")
    except (ValueError, TypeError):
        parsed = None
    if parsed is None or not pd.api.types.is_datetime64_any_dtype(parsed):
        # rows carry different UTC offsets; put them on one clock
        parsed = pd.to_datetime(series, errors="coerce", format="mixed", utc=True)
    return parsed


@dataclass
class ColumnGroups:
    floats: List[str]
    times: List[str]
    strings: List[str]

    def as_dict(self) -> Dict[str, List[str]]:
        return {"floats": self.floats, "times": self.times, "strings": self.strings}


class TableLoader:
    """Load CSV/TSV/Excel data into a DataFrame, inferring numeric and datetime columns."""

    def __init__(self, coerce_ratio: float = _COERCE_RATIO) -> None:
        self.coerce_ratio = coerce_ratio

    def load_bytes(self, data: bytes, filename: str = "data.csv", sheet: str | None = None) -> pd.DataFrame:
        if not data:
            raise TableLoadError("Uploaded file is empty.")
        suffix = Path(filename).suffix.lower()
        buffer = BytesIO(data)
        try:
            if suffix in _EXCEL_SUFFIXES:
                frame = pd.read_excel(buffer, sheet_name=sheet or 0)
            elif suffix in _TSV_SUFFIXES:
                frame = pd.read_csv(buffer, sep="\t")
            else:
                frame = pd.read_csv(buffer)
            frame = self.prepare_frame(frame)
        except (ValueError, pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
            raise TableLoadError(f"Could not read '{filename}' as a table: {exc}") from exc

        log_event("table.loaded", {"source": filename, "rows": len(frame), "columns": list(frame.columns)})
        return frame

    def load_path(self, path: str | Path, sheet: str | None = None) -> pd.DataFrame:
        p = Path(path)
        if not p.exists():
            raise TableLoadError(f"File not found: {p}")
        return self.load_bytes(p.read_bytes(), filename=p.name, sheet=sheet)

    def prepare_frame(self, frame: pd.DataFrame) -> pd.DataFrame:
        data = frame.dropna(axis=1, how="all")
        data = data.dropna(how="all").reset_index(drop=True)
        return self._coerce_types(data)

    def _coerce_types(self, df: pd.DataFrame) -> pd.DataFrame:
        for column in df.columns:
            series = df[column]
            if series.dropna().empty or _semantic_type(series) != "categorical":
                continue
            numeric = pd.to_numeric(series, errors="coerce")
            if numeric.notna().mean() > self.coerce_ratio:
                df[column] = numeric
                continue
            datetime = _parse_datetimes(series)
            if datetime.notna().mean() > self.coerce_ratio:
                df[column] = datetime
        return df


def column_groups(df: pd.DataFrame) -> ColumnGroups:
    groups = ColumnGroups(floats=[], times=[], strings=[])
    for column in df.columns:
        semantic = _semantic_type(df[column])
        if semantic == "temporal":
            groups.times.append(column)
        elif semantic == "quantitative":
            groups.floats.append(column)
        else:
            groups.strings.append(column)
    return groups


def table_from_dataframe(
    df: pd.DataFrame,
    chart_kind: str,
    *,
    title: str = "",
    scale_kind: str = "linear",
    x_label: str = "",
    y_label: str = "",
    zero_based: bool = False,
) -> InputTable:
    """Split ``df`` into numeric, time and text column groups (in column order) for one chart."""

    groups = column_groups(df)
    # rows with a missing number or timestamp cannot be plotted
    frame = df.dropna(subset=groups.floats + groups.times).reset_index(drop=True)

    float_rows = [[_normalize_number(v) for v in row] for row in frame[groups.floats].itertuples(index=False)]
    time_rows = [list(row) for row in frame[groups.times].itertuples(index=False)]
    string_rows = [
        ["" if pd.isna(v) else str(v) for v in row] for row in frame[groups.strings].itertuples(index=False)
    ]

    column_min: List[float] = []
    column_max: List[float] = []
    for column in groups.floats:
        numeric = frame[column]
        column_min.append(_normalize_number(numeric.min()) if len(numeric) else 0.0)
        column_max.append(_normalize_number(numeric.max()) if len(numeric) else 0.0)

    return InputTable(
        requested_chart_kind=chart_kind,
        float_columns=float_rows if groups.floats else [],
        time_columns=time_rows if groups.times else [],
        string_columns=string_rows if groups.strings else [],
        column_min=column_min,
        column_max=column_max,
        title=title,
        scale_kind=scale_kind,
        x_label=x_label,
        y_label=y_label,
        zero_based=zero_based,
    )
