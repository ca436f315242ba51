from dotchart.chart import Chart, Layer
from dotchart.colors import Color
from dotchart.config import AxisRange, ChartConfig, RangePolicy, load_chart_config
from dotchart.errors import ChartConfigError, ColorParseError, PlotDataError
from dotchart.raster import BrailleCanvas, DotCanvas
from dotchart.scales import Interval, Scale, format_tick
from dotchart.shapes import Shape

# bound last: the factory shares its name with the dotchart.chart submodule
from dotchart.api import chart

__all__ = [
    "AxisRange",
    "BrailleCanvas",
    "Chart",
    "ChartConfig",
    "ChartConfigError",
    "Color",
    "ColorParseError",
    "DotCanvas",
    "Interval",
    "Layer",
    "PlotDataError",
    "RangePolicy",
    "Scale",
    "Shape",
    "chart",
    "format_tick",
    "load_chart_config",
]
