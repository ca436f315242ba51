from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import Any, Callable

import numpy as np

from dotchart.errors import PlotDataError


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


def normalize_points(points: Any) -> np.ndarray:
    """Coerce ``points`` into an ``(n, 2)`` float32 array of ``(x, y)`` rows.

    Accepts a sequence of pairs, an ``(n, 2)`` ndarray, a two-column numeric
    pandas DataFrame or a 2-D torch tensor. ``None`` values become NaN.
    """
    if points is None:
        return np.empty((0, 2), dtype=np.float32)

    if torch is not None and isinstance(points, torch.Tensor):
        tensor = points.detach()
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return _check_shape(tensor.to(torch.float32).numpy())

    if pd is not None and isinstance(points, pd.DataFrame):
        numeric_cols = [c for c in points.columns if _is_numeric_dtype(points[c])]
        if len(numeric_cols) != 2:
            raise PlotDataError("DataFrame input must contain exactly two numeric columns (x, y)")
        return _check_shape(points[numeric_cols].to_numpy(dtype=np.float32))

    if isinstance(points, np.ndarray):
        if points.size == 0:
            return np.empty((0, 2), dtype=np.float32)
        return _check_shape(_coerce_ndarray(points))

    if isinstance(points, Sequence) and not isinstance(points, (str, bytes, bytearray)):
        if len(points) == 0:
            return np.empty((0, 2), dtype=np.float32)
        rows = []
        for i, pair in enumerate(points):
            try:
                x, y = pair
            except (TypeError, ValueError) as exc:
                raise PlotDataError(f"point at index {i} is not an (x, y) pair: {pair!r}") from exc
            rows.append((x, y))
        return _check_shape(_coerce_ndarray(np.asarray(rows, dtype=object)))

    raise PlotDataError(f"unsupported points input type: {type(points)!r}")


def sample_function(
    func: Callable[[float], float],
    start: float,
    stop: float,
    count: int = 200,
) -> np.ndarray:
    """Evaluate ``func`` at ``count`` evenly spaced x values in ``[start, stop]``."""
    if count < 2:
        raise ValueError("count must be >= 2")
    xs = np.linspace(start, stop, count, dtype=np.float64)
    ys = np.empty_like(xs)
    for i, x in enumerate(xs.tolist()):
        try:
            ys[i] = float(func(x))
        except (ArithmeticError, ValueError):
            ys[i] = np.nan
    return np.column_stack((xs, ys)).astype(np.float32)


def _check_shape(arr: np.ndarray) -> np.ndarray:
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise PlotDataError(f"points must have shape (n, 2), got {arr.shape}")
    return np.ascontiguousarray(arr, dtype=np.float32)


def _is_numeric_dtype(series: Any) -> bool:
    if pd is None:
        return False
    try:
        return bool(pd.api.types.is_numeric_dtype(series))
    except Exception:
        return False


def _coerce_ndarray(arr: np.ndarray) -> np.ndarray:
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float32, copy=False)

    flat = arr.reshape(-1).tolist()
    out = np.empty(len(flat), dtype=np.float32)
    for i, raw in enumerate(flat):
        if raw is None:
            out[i] = np.nan
            continue
        if isinstance(raw, Decimal):
            out[i] = float(raw)
            continue
        try:
            out[i] = float(raw)
        except (TypeError, ValueError) as exc:
            raise PlotDataError(f"points contain non-numeric value at flat index {i}: {raw!r}") from exc
    return out.reshape(arr.shape)
