from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import logging
import math
from pathlib import Path
import tomllib
from typing import Any

from dotchart.errors import ChartConfigError


LOGGER = logging.getLogger(__name__)

DEFAULT_WIDTH = 120
DEFAULT_HEIGHT = 60
MIN_SIZE = 32
AXIS_DOT_SPACING = 3


class RangePolicy(str, Enum):
    AUTO = "auto"
    FIXED = "fixed"


@dataclass(frozen=True)
class AxisRange:
    policy: RangePolicy = RangePolicy.AUTO
    min: float = math.inf
    max: float = -math.inf

    @classmethod
    def auto(cls) -> "AxisRange":
        return cls()

    @classmethod
    def fixed(cls, lo: float, hi: float) -> "AxisRange":
        return cls(policy=RangePolicy.FIXED, min=float(lo), max=float(hi))

    @classmethod
    def from_pair(cls, bounds: tuple[float, float] | None) -> "AxisRange":
        if bounds is None:
            return cls.auto()
        lo, hi = bounds
        return cls.fixed(lo, hi)


@dataclass(frozen=True)
class ChartConfig:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    x_range: AxisRange = field(default_factory=AxisRange.auto)
    y_range: AxisRange = field(default_factory=AxisRange.auto)
    show_axis: bool = True

    def __post_init__(self) -> None:
        validate_size(self.width, self.height)


def validate_size(width: int, height: int) -> None:
    if width < MIN_SIZE:
        raise ChartConfigError(f"width should be at least {MIN_SIZE}, {width} is provided")
    if height < MIN_SIZE:
        raise ChartConfigError(f"height should be at least {MIN_SIZE}, {height} is provided")


def load_chart_config(path: str | Path) -> ChartConfig:
    """Read a chart config from TOML.

    Recognised keys: ``width``, ``height``, ``show_axis`` and optional ``[x]``
    / ``[y]`` tables. An axis table with both ``min`` and ``max`` is fixed;
    anything else leaves that axis on automatic ranging.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"chart config not found: {config_path}")
    with config_path.open("rb") as f:
        try:
            raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ChartConfigError(f"invalid chart config {config_path}: {exc}") from exc

    width = _coerce_int(raw.get("width", DEFAULT_WIDTH), "width")
    height = _coerce_int(raw.get("height", DEFAULT_HEIGHT), "height")
    show_axis = raw.get("show_axis", True)
    if not isinstance(show_axis, bool):
        raise ChartConfigError("show_axis must be a boolean")
    config = ChartConfig(
        width=width,
        height=height,
        x_range=_coerce_axis(raw.get("x"), "x"),
        y_range=_coerce_axis(raw.get("y"), "y"),
        show_axis=show_axis,
    )
    LOGGER.debug("loaded chart config from %s: %s", config_path, config)
    return config


def _coerce_int(value: Any, key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ChartConfigError(f"{key} must be an integer")
    return value


def _coerce_axis(value: Any, key: str) -> AxisRange:
    if value is None:
        return AxisRange.auto()
    if not isinstance(value, dict):
        raise ChartConfigError(f"[{key}] must be a table")
    lo = value.get("min")
    hi = value.get("max")
    if lo is None or hi is None:
        return AxisRange.auto()
    for bound in (lo, hi):
        if isinstance(bound, bool) or not isinstance(bound, (int, float)):
            raise ChartConfigError(f"[{key}] min/max must be numbers")
    return AxisRange.fixed(lo, hi)
