from __future__ import annotations


class ChartSpecError(ValueError):
    """Base error raised while turning a table into a chart specification."""


class UnknownChartKindError(ChartSpecError):
    """Raised when the requested chart kind is outside the supported set."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"Unknown chart type: {kind}")
        self.kind = kind


class InconsistentTableShapeError(ChartSpecError):
    """Raised when column groups disagree on row counts or rows are ragged."""


class TableLoadError(ChartSpecError):
    """Raised when an uploaded or local file cannot be read as a table."""
