from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence, TypeAlias


class Shape(str, Enum):
    POINTS = "points"
    LINES = "lines"
    STEPS = "steps"
    BARS = "bars"


@dataclass(frozen=True)
class Dot:
    x: int
    y: int


@dataclass(frozen=True)
class Segment:
    x1: int
    y1: int
    x2: int
    y2: int


Primitive: TypeAlias = Dot | Segment
CanvasPoint: TypeAlias = tuple[int, int]


def decompose(shape: Shape, points: Sequence[CanvasPoint], bottom: int) -> list[Primitive]:
    """Turn projected canvas points into drawable primitives.

    ``points`` are canvas coordinates (row grows downward) in dataset order,
    already stripped of excluded points. ``bottom`` is the canvas row that bars
    drop down to.
    """
    shape = Shape(shape)
    if shape is Shape.POINTS:
        return [Dot(x, y) for x, y in points]

    out: list[Primitive] = []
    for (x1, y1), (x2, y2) in zip(points, points[1:]):
        if shape is Shape.LINES:
            out.append(Segment(x1, y1, x2, y2))
            continue
        # step-after: run across at the new height, then rise at the old x
        out.append(Segment(x1, y2, x2, y2))
        out.append(Segment(x1, y1, x1, y2))
        if shape is Shape.BARS:
            out.append(Segment(x1, bottom, x1, y1))
            out.append(Segment(x2, bottom, x2, y2))
    return out
