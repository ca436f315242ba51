from .canvas import BRAILLE_BASE, BrailleCanvas, DotCanvas
from .draw_lines import rasterize_segment

__all__ = [
    "BRAILLE_BASE",
    "BrailleCanvas",
    "DotCanvas",
    "rasterize_segment",
]
