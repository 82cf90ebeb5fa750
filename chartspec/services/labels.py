from __future__ import annotations

from typing import Any, Callable, List

from .formatting import format_timestamp
from .models import InputTable

LabelPreprocessor = Callable[[str], str]
TimestampFormatter = Callable[[Any], str]


def preprocess_label(text: str) -> str:
    """Default label cleanup: single line, surrounding whitespace removed."""
    return " ".join(str(text).split())


class LabelMarshaler:
    """Build one label per row from the first text column, the first time column, or the row index."""

    def __init__(
        self,
        preprocessor: LabelPreprocessor = preprocess_label,
        timestamp_formatter: TimestampFormatter = format_timestamp,
    ) -> None:
        self.preprocessor = preprocessor
        self.timestamp_formatter = timestamp_formatter

    def marshal(self, table: InputTable) -> List[str]:
        if not table.has_strings and table.has_times:
            return [self.timestamp_formatter(row[0]) for row in table.time_columns]

        if not table.has_strings:
            return [f"slice {idx}" for idx in range(len(table.float_columns))]

        return [self.preprocessor(row[0]) for row in table.string_columns]
