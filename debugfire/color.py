"""RGB colours with HTML output, hex and HSV constructors."""

from __future__ import annotations

import functools
import math
import random as _random
from typing import ClassVar


@functools.total_ordering
class Color:
    """An immutable 24-bit RGB colour; the default is black."""

    __slots__ = ("_value",)

    WHITE: ClassVar[Color]
    BLACK: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    BLUE: ClassVar[Color]
    YELLOW: ClassVar[Color]
    CYAN: ClassVar[Color]
    MAGENTA: ClassVar[Color]
    GRAY: ClassVar[Color]

    def __init__(self, red: int = 0, green: int = 0, blue: int = 0) -> None:
        if not all(0 <= part < 256 for part in (red, green, blue)):
            raise ValueError("Color values out of range.")
        self._value = (int(red) << 16) + (int(green) << 8) + int(blue)

    @classmethod
    def from_hex(cls, hex_value: int) -> Color:
        """Build a colour from a 0xRRGGBB integer."""
        if not 0 <= hex_value <= 0xFFFFFF:
            raise ValueError("Color.from_hex(): Value out of range.")
        return cls((hex_value >> 16) & 0xFF, (hex_value >> 8) & 0xFF, hex_value & 0xFF)

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float) -> Color:
        """Build a colour from hue, saturation and value, each in [0, 1]."""
        if not (0 <= h <= 1 and 0 <= s <= 1 and 0 <= v <= 1):
            raise ValueError("Color.from_hsv(): Values out of range.")

        def channel(n: int) -> float:
            k = math.fmod(n + h * 6, 6)
            return v - v * s * max(0.0, min(k, 4 - k, 1.0))

        return cls(int(255 * channel(5)), int(255 * channel(3)), int(255 * channel(1)))

    @classmethod
    def random(cls, rng: _random.Random | None = None) -> Color:
        """A randomly chosen colour."""
        source = rng if rng is not None else _random
        return cls(source.randint(0, 255), source.randint(0, 255), source.randint(0, 255))

    def red(self) -> int:
        return (self._value >> 16) & 0xFF

    def green(self) -> int:
        return (self._value >> 8) & 0xFF

    def blue(self) -> int:
        return self._value & 0xFF

    def to_rgb(self) -> int:
        """The colour as a 0xRRGGBB integer."""
        return self._value

    def to_html(self) -> str:
        """The colour as an HTML '#rrggbb' string."""
        return f"#{self.red():02x}{self.green():02x}{self.blue():02x}"

    def __str__(self) -> str:
        name = _NAMES.get(self._value)
        if name is not None:
            return f"Color.{name}"
        return self.to_html()

    def __repr__(self) -> str:
        return f"Color({self.red()}, {self.green()}, {self.blue()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(self._value)


_PRESETS = {
    "WHITE": 0xFFFFFF,
    "BLACK": 0x000000,
    "RED": 0xFF0000,
    "GREEN": 0x00FF00,
    "BLUE": 0x0000FF,
    "YELLOW": 0xFFFF00,
    "CYAN": 0x00FFFF,
    "MAGENTA": 0xFF00FF,
    "GRAY": 0x808080,
}

_NAMES = {value: name for name, value in _PRESETS.items()}

for _name, _value in _PRESETS.items():
    setattr(Color, _name, Color.from_hex(_value))