from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, overload

import numpy as np


AxisFormatter = Callable[[float], str]


@dataclass(frozen=True)
class Interval:
    min: float
    max: float

    @property
    def span(self) -> float:
        return self.max - self.min

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max


@dataclass(frozen=True)
class Scale:
    """Affine map from ``source`` onto ``target``.

    No clamping is applied: values outside ``source`` extrapolate outside
    ``target``. A degenerate source (``min == max``) yields inf or nan instead
    of raising; callers drop non-finite results before drawing.
    """

    source: Interval
    target: Interval

    @overload
    def linear(self, value: float) -> float: ...

    @overload
    def linear(self, value: np.ndarray) -> np.ndarray: ...

    def linear(self, value):
        v = np.asarray(value, dtype=np.float64)
        with np.errstate(divide="ignore", invalid="ignore"):
            out = self.target.min + (v - self.source.min) * (np.float64(self.target.span) / np.float64(self.source.span))
        if np.ndim(out) == 0:
            return float(out)
        return out

    def inverse(self) -> "Scale":
        return Scale(source=self.target, target=self.source)


def format_tick(value: float) -> str:
    return f"{value:.1f}"


def resolve_formatter(formatter: AxisFormatter | None) -> AxisFormatter:
    return formatter if formatter is not None else format_tick
