from __future__ import annotations

from dataclasses import dataclass
import string

from dotchart.errors import ColorParseError


_HEX_DIGITS = frozenset(string.hexdigits)


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        return cls(int(r) & 0xFF, int(g) & 0xFF, int(b) & 0xFF)

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Parse ``"#rrggbb"`` or ``"rrggbb"``.

        Raises ``ColorParseError`` for any other length or for non-hex digits.
        """
        digits = value[1:] if value.startswith("#") else value
        if len(digits) != 6:
            raise ColorParseError(f"hex color must have 6 digits after an optional '#': {value!r}")
        if not all(ch in _HEX_DIGITS for ch in digits):
            raise ColorParseError(f"hex color contains non-hex characters: {value!r}")
        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    @property
    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def ansi_fg(self) -> str:
        return f"\x1b[38;2;{self.r};{self.g};{self.b}m"


ANSI_RESET = "\x1b[0m"


def coerce_color(color: Color | str | tuple[int, int, int] | None) -> Color | None:
    if color is None or isinstance(color, Color):
        return color
    if isinstance(color, str):
        return Color.from_hex(color)
    r, g, b = color
    return Color.from_rgb(r, g, b)
