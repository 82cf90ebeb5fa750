"""Chart.js specification builder for generic tabular data."""

__version__ = "0.1.0"
