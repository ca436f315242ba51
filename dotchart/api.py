from __future__ import annotations

from pathlib import Path

from dotchart.chart import CanvasFactory, Chart
from dotchart.config import DEFAULT_HEIGHT, DEFAULT_WIDTH, AxisRange, ChartConfig, load_chart_config


DEFAULT_ASPECT_RATIO = DEFAULT_WIDTH / DEFAULT_HEIGHT


def chart(
    width: int | None = None,
    height: int | None = None,
    *,
    x_range: tuple[float, float] | None = None,
    y_range: tuple[float, float] | None = None,
    aspect_ratio: float = DEFAULT_ASPECT_RATIO,
    show_axis: bool = True,
    config: str | Path | ChartConfig | None = None,
    canvas_factory: CanvasFactory | None = None,
) -> Chart:
    """Build a chart, deriving a missing dimension from ``aspect_ratio``.

    A ``config`` (path or ``ChartConfig``) supplies the defaults; explicit
    arguments override it.
    """
    if aspect_ratio <= 0:
        raise ValueError("aspect_ratio must be > 0")
    if isinstance(config, (str, Path)):
        config = load_chart_config(config)
    base = config or ChartConfig()

    if width is None and height is None:
        width, height = base.width, base.height
    elif width is None and height is not None:
        width = int(round(height * aspect_ratio))
    elif width is not None and height is None:
        height = int(round(width / aspect_ratio))
    assert width is not None and height is not None

    return Chart(
        width,
        height,
        x_range=AxisRange.from_pair(x_range) if x_range is not None else base.x_range,
        y_range=AxisRange.from_pair(y_range) if y_range is not None else base.y_range,
        show_axis=show_axis and base.show_axis,
        canvas_factory=canvas_factory,
    )
