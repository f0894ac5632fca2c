from __future__ import annotations


class ChartDataError(ValueError):
    """Raised when caller data cannot be turned into a chart series."""


class ChartConfigError(ValueError):
    """Raised when a chart configuration value is unknown or invalid."""
