from __future__ import annotations

import logging
from typing import Protocol

import numpy as np

from dotchart.colors import ANSI_RESET, Color
from dotchart.raster.draw_lines import rasterize_segment


LOGGER = logging.getLogger(__name__)

BRAILLE_BASE = 0x2800
# bit for the dot at (row, col) inside a 4-tall by 2-wide braille cell
BRAILLE_BITS = np.asarray(
    [
        [0x01, 0x08],
        [0x02, 0x10],
        [0x04, 0x20],
        [0x40, 0x80],
    ],
    dtype=np.int64,
)
DOTS_PER_CELL_X = 2
DOTS_PER_CELL_Y = 4


class DotCanvas(Protocol):
    width: int
    height: int

    def set(self, x: int, y: int) -> None:
        ...

    def line(self, x1: int, y1: int, x2: int, y2: int) -> None:
        ...

    def line_colored(self, x1: int, y1: int, x2: int, y2: int, color: Color) -> None:
        ...

    def frame(self) -> str:
        ...

    def clear(self) -> None:
        ...


class BrailleCanvas:
    """Dot grid packed into Unicode braille cells, 2x4 dots per character.

    Dots are addressable on ``0..width`` by ``0..height`` inclusive; anything
    outside is ignored. Colored draws tag the touched cells, and the last
    color written into a cell is the one emitted.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("canvas width and height must be >= 0")
        self.width = width
        self.height = height
        self.columns = width // DOTS_PER_CELL_X + 1
        self.rows = height // DOTS_PER_CELL_Y + 1
        self._dots = np.zeros((self.rows * DOTS_PER_CELL_Y, self.columns * DOTS_PER_CELL_X), dtype=bool)
        self._cell_rgb = np.zeros((self.rows, self.columns, 3), dtype=np.uint8)
        self._cell_colored = np.zeros((self.rows, self.columns), dtype=bool)

    def set(self, x: int, y: int) -> None:
        if 0 <= x <= self.width and 0 <= y <= self.height:
            self._dots[y, x] = True

    def line(self, x1: int, y1: int, x2: int, y2: int) -> None:
        self._plot(*rasterize_segment(x1, y1, x2, y2))

    def line_colored(self, x1: int, y1: int, x2: int, y2: int, color: Color) -> None:
        xs, ys = self._plot(*rasterize_segment(x1, y1, x2, y2))
        if xs.size == 0:
            return
        cy = ys // DOTS_PER_CELL_Y
        cx = xs // DOTS_PER_CELL_X
        self._cell_rgb[cy, cx] = color.as_tuple()
        self._cell_colored[cy, cx] = True

    def is_set(self, x: int, y: int) -> bool:
        if 0 <= x <= self.width and 0 <= y <= self.height:
            return bool(self._dots[y, x])
        return False

    def cell_color(self, column: int, row: int) -> Color | None:
        if not self._cell_colored[row, column]:
            return None
        r, g, b = (int(v) for v in self._cell_rgb[row, column])
        return Color(r, g, b)

    def dot_count(self) -> int:
        return int(np.count_nonzero(self._dots))

    def cell_codes(self) -> np.ndarray:
        cells = self._dots.reshape(self.rows, DOTS_PER_CELL_Y, self.columns, DOTS_PER_CELL_X)
        return (cells * BRAILLE_BITS[None, :, None, :]).sum(axis=(1, 3))

    def frame(self) -> str:
        codes = self.cell_codes()
        lines: list[str] = []
        for row in range(self.rows):
            chars: list[str] = []
            for col in range(self.columns):
                code = int(codes[row, col])
                if code == 0:
                    chars.append(" ")
                    continue
                glyph = chr(BRAILLE_BASE + code)
                color = self.cell_color(col, row)
                if color is not None:
                    glyph = f"{color.ansi_fg()}{glyph}{ANSI_RESET}"
                chars.append(glyph)
            lines.append("".join(chars))
        return "\n".join(lines)

    def clear(self) -> None:
        LOGGER.debug("clearing %dx%d braille canvas", self.width, self.height)
        self._dots[:] = False
        self._cell_rgb[:] = 0
        self._cell_colored[:] = False

    def _plot(self, xs: np.ndarray, ys: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
        keep = (xs >= 0) & (xs <= self.width) & (ys >= 0) & (ys <= self.height)
        xs = xs[keep]
        ys = ys[keep]
        self._dots[ys, xs] = True
        return xs, ys
