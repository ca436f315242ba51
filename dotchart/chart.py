from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import Any, Callable, TextIO

import numpy as np

from dotchart.adapters import normalize_points, sample_function
from dotchart.colors import Color, coerce_color
from dotchart.config import (
    AXIS_DOT_SPACING,
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    AxisRange,
    ChartConfig,
    RangePolicy,
    validate_size,
)
from dotchart.raster import BrailleCanvas, DotCanvas
from dotchart.scales import AxisFormatter, Interval, Scale, resolve_formatter
from dotchart.shapes import CanvasPoint, Dot, Primitive, Segment, Shape, decompose


LOGGER = logging.getLogger(__name__)

CanvasFactory = Callable[[int, int], DotCanvas]


@dataclass(frozen=True)
class Layer:
    shape: Shape
    color: Color | None = None


class Chart:
    """Text-mode chart over a single shared dataset.

    Layers are drawn in insertion order onto a canvas the chart owns. Drawing
    accumulates on that canvas across render calls until ``clear()`` is called.
    Axes on automatic ranging only ever widen, each time a layer is added.
    """

    def __init__(
        self,
        width: int,
        height: int,
        *,
        x_range: AxisRange | None = None,
        y_range: AxisRange | None = None,
        show_axis: bool = True,
        canvas_factory: CanvasFactory | None = None,
    ) -> None:
        validate_size(width, height)
        x_range = x_range or AxisRange.auto()
        y_range = y_range or AxisRange.auto()
        self._width = width
        self._height = height
        self._x_policy = x_range.policy
        self._y_policy = y_range.policy
        self._xmin = float(x_range.min)
        self._xmax = float(x_range.max)
        self._ymin = float(y_range.min)
        self._ymax = float(y_range.max)
        self._show_axis = show_axis
        self._x_formatter: AxisFormatter | None = None
        self._y_formatter: AxisFormatter | None = None
        self._data = np.empty((0, 2), dtype=np.float32)
        self._layers: list[Layer] = []
        factory = canvas_factory or BrailleCanvas
        self._canvas: DotCanvas = factory(width, height)

    @classmethod
    def default(cls, *, canvas_factory: CanvasFactory | None = None) -> "Chart":
        return cls(DEFAULT_WIDTH, DEFAULT_HEIGHT, canvas_factory=canvas_factory)

    @classmethod
    def with_range(
        cls,
        width: int,
        height: int,
        *,
        x_range: tuple[float, float] | None = None,
        y_range: tuple[float, float] | None = None,
        canvas_factory: CanvasFactory | None = None,
    ) -> "Chart":
        """Chart whose given axes are fixed to ``(min, max)``; an omitted axis auto-ranges."""
        return cls(
            width,
            height,
            x_range=AxisRange.from_pair(x_range),
            y_range=AxisRange.from_pair(y_range),
            canvas_factory=canvas_factory,
        )

    @classmethod
    def from_config(cls, config: ChartConfig, *, canvas_factory: CanvasFactory | None = None) -> "Chart":
        return cls(
            config.width,
            config.height,
            x_range=config.x_range,
            y_range=config.y_range,
            show_axis=config.show_axis,
            canvas_factory=canvas_factory,
        )

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def xmin(self) -> float:
        return self._xmin

    @property
    def xmax(self) -> float:
        return self._xmax

    @property
    def ymin(self) -> float:
        return self._ymin

    @property
    def ymax(self) -> float:
        return self._ymax

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        return (self._xmin, self._xmax, self._ymin, self._ymax)

    @property
    def x_policy(self) -> RangePolicy:
        return self._x_policy

    @property
    def y_policy(self) -> RangePolicy:
        return self._y_policy

    @property
    def axis_visible(self) -> bool:
        return self._show_axis

    @property
    def layers(self) -> tuple[Layer, ...]:
        return tuple(self._layers)

    @property
    def data(self) -> np.ndarray:
        return self._data.copy()

    @property
    def canvas(self) -> DotCanvas:
        return self._canvas

    def set_data(self, points: Any) -> "Chart":
        self._data = normalize_points(points)
        LOGGER.debug("dataset replaced with %d points", self._data.shape[0])
        return self

    def set_function(
        self,
        func: Callable[[float], float],
        *,
        start: float | None = None,
        stop: float | None = None,
        count: int = 200,
    ) -> "Chart":
        """Replace the dataset with ``func`` sampled over ``[start, stop]``.

        Missing bounds fall back to the current x range, which must be finite.
        """
        start = self._xmin if start is None else start
        stop = self._xmax if stop is None else stop
        if not (math.isfinite(start) and math.isfinite(stop)):
            raise ValueError("sampling range is unknown; pass start/stop or fix the x range")
        self._data = sample_function(func, start, stop, count)
        return self

    def add_layer(self, shape: Shape | str, color: Color | str | tuple[int, int, int] | None = None) -> "Chart":
        layer = Layer(shape=Shape(shape), color=coerce_color(color))
        self._layers.append(layer)
        self._rescale()
        return self

    def hide_axis(self) -> "Chart":
        self._show_axis = False
        return self

    def show_axis(self) -> "Chart":
        self._show_axis = True
        return self

    def set_xtick(self, formatter: AxisFormatter | None) -> "Chart":
        self._x_formatter = formatter
        return self

    def set_ytick(self, formatter: AxisFormatter | None) -> "Chart":
        self._y_formatter = formatter
        return self

    def to_string(self) -> str:
        if self._show_axis:
            self._draw_axis()
        self._draw_layers()
        frame = self._canvas.frame()
        if not self._show_axis:
            return frame
        return self._label_frame(frame)

    def display(self, file: TextIO | None = None) -> None:
        print(self.to_string(), file=file)

    def nice(self, file: TextIO | None = None) -> None:
        self._draw_borders()
        self.display(file=file)

    def frame(self) -> str:
        return self._canvas.frame()

    def clear(self) -> "Chart":
        self._canvas.clear()
        return self

    def x_scale(self) -> Scale:
        return Scale(Interval(self._xmin, self._xmax), Interval(0.0, float(self._width)))

    def y_scale(self) -> Scale:
        return Scale(Interval(self._ymin, self._ymax), Interval(0.0, float(self._height)))

    def project(self) -> list[CanvasPoint]:
        """Map the dataset to canvas dots, dropping points that fall off the canvas.

        Dropped points are removed outright, so any segment touching them is
        lost rather than clipped.
        """
        if self._data.shape[0] == 0:
            return []
        sx = np.asarray(self.x_scale().linear(self._data[:, 0]), dtype=np.float64)
        sy = np.asarray(self.y_scale().linear(self._data[:, 1]), dtype=np.float64)
        finite = np.isfinite(sx) & np.isfinite(sy)
        i = _round_half_away(np.where(finite, sx, 0.0))
        j = _round_half_away(np.where(finite, sy, 0.0))
        keep = finite & (i >= 0) & (i <= self._width) & (j >= 0) & (j <= self._height)
        return [(int(x), self._height - int(y)) for x, y in zip(i[keep], j[keep])]

    def _rescale(self) -> None:
        if self._data.shape[0] == 0:
            return
        if self._x_policy is RangePolicy.AUTO:
            self._xmin, self._xmax = _widen(self._xmin, self._xmax, self._data[:, 0])
        if self._y_policy is RangePolicy.AUTO:
            self._ymin, self._ymax = _widen(self._ymin, self._ymax, self._data[:, 1])
        LOGGER.debug("rescaled bounds to x=[%g, %g] y=[%g, %g]", *self.bounds)

    def _draw_borders(self) -> None:
        self._vline(0)
        self._vline(self._width)
        self._hline(0)
        self._hline(self._height)

    def _draw_axis(self) -> None:
        if self._xmin <= 0.0 <= self._xmax:
            x0 = self.x_scale().linear(0.0)
            if math.isfinite(x0):
                self._vline(int(_round_half_away(np.float64(x0))))
        if self._ymin <= 0.0 <= self._ymax:
            y0 = self.y_scale().linear(0.0)
            if math.isfinite(y0):
                self._hline(int(_round_half_away(np.float64(y0))))

    def _vline(self, i: int) -> None:
        if 0 <= i <= self._width:
            for j in range(0, self._height + 1, AXIS_DOT_SPACING):
                self._canvas.set(i, j)

    def _hline(self, j: int) -> None:
        if 0 <= j <= self._height:
            for i in range(0, self._width + 1, AXIS_DOT_SPACING):
                self._canvas.set(i, self._height - j)

    def _draw_layers(self) -> None:
        if not self._layers:
            return
        points = self.project()
        dropped = self._data.shape[0] - len(points)
        if dropped:
            LOGGER.debug("dropped %d of %d points outside the canvas", dropped, self._data.shape[0])
        if self._data.shape[0] and not points:
            LOGGER.warning("no points of the %d-point dataset map onto the canvas", self._data.shape[0])
        for layer in self._layers:
            for primitive in decompose(layer.shape, points, bottom=self._height):
                self._draw_primitive(primitive, layer.color)

    def _draw_primitive(self, primitive: Primitive, color: Color | None) -> None:
        if isinstance(primitive, Dot):
            if color is None:
                self._canvas.set(primitive.x, primitive.y)
            else:
                self._canvas.line_colored(primitive.x, primitive.y, primitive.x, primitive.y, color)
            return
        assert isinstance(primitive, Segment)
        if color is None:
            self._canvas.line(primitive.x1, primitive.y1, primitive.x2, primitive.y2)
        else:
            self._canvas.line_colored(primitive.x1, primitive.y1, primitive.x2, primitive.y2, color)

    def _label_frame(self, frame: str) -> str:
        fmt_x = resolve_formatter(self._x_formatter)
        fmt_y = resolve_formatter(self._y_formatter)
        lines = frame.split("\n")
        lines[0] = f"{lines[0]} {fmt_y(self._ymax)}"
        lines[-1] = f"{lines[-1]} {fmt_y(self._ymin)}"
        xmin_label = fmt_x(self._xmin)
        xmax_label = fmt_x(self._xmax)
        columns = self._width // 2 + 1
        pad = max(len(xmin_label) + 1, columns - len(xmax_label))
        lines.append(f"{xmin_label.ljust(pad)}{xmax_label}")
        return "\n".join(lines) + "\n"


def _widen(lo: float, hi: float, values: np.ndarray) -> tuple[float, float]:
    finite = values[np.isfinite(values)]
    if finite.size == 0:
        return lo, hi
    return min(lo, float(finite.min())), max(hi, float(finite.max()))


def _round_half_away(values: np.ndarray) -> np.ndarray:
    return np.sign(values) * np.floor(np.abs(values) + 0.5)
