from __future__ import annotations


class ChartConfigError(ValueError):
    """Raised when a chart is configured with an unusable size or config file."""


class ColorParseError(ValueError):
    """Raised when a hex color string cannot be parsed."""


class PlotDataError(ValueError):
    """Raised when input points cannot be coerced into an (n, 2) numeric array."""
