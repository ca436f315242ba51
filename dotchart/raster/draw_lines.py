from __future__ import annotations

import numpy as np


def rasterize_segment(x0: int, y0: int, x1: int, y1: int) -> tuple[np.ndarray, np.ndarray]:
    """Bresenham walk from (x0, y0) to (x1, y1), both endpoints included."""
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    xs: list[int] = []
    ys: list[int] = []
    while True:
        xs.append(x0)
        ys.append(y0)
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy
    return np.asarray(xs, dtype=np.int64), np.asarray(ys, dtype=np.int64)
