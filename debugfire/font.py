"""Styled fonts: family, style, size and colour."""

from __future__ import annotations

import dataclasses
import enum
import sys

from .color import Color


class FontFamily(enum.Enum):
    SERIF = enum.auto()
    SANS_SERIF = enum.auto()
    MONOSPACE = enum.auto()
    UNICODE_SERIF = enum.auto()
    UNICODE_SANS_SERIF = enum.auto()
    UNICODE_MONOSPACE = enum.auto()


class FontStyle(enum.Enum):
    NORMAL = enum.auto()
    BOLD = enum.auto()
    ITALIC = enum.auto()
    BOLD_ITALIC = enum.auto()


# (macOS, Windows, other)
_FAMILY_NAMES = {
    FontFamily.SERIF: ("Didot", "Serif", "Serif"),
    FontFamily.SANS_SERIF: ("Helvetica", "Sans Serif", "Sans Serif"),
    FontFamily.MONOSPACE: ("Monaco", "Monospace", "Monospace"),
    FontFamily.UNICODE_SERIF: ("Times", "Times New Roman", "Serif"),
    FontFamily.UNICODE_SANS_SERIF: ("Lucida Grande", "Lucida Sans Unicode", "Sans Serif"),
    FontFamily.UNICODE_MONOSPACE: ("Lucida Grande", "Lucida Sans Unicode", "Monospace"),
}

_STYLE_NAMES = {
    FontStyle.BOLD: "BOLD",
    FontStyle.BOLD_ITALIC: "BOLDITALIC",
    FontStyle.ITALIC: "ITALIC",
    FontStyle.NORMAL: "<normal>",
}


def family_name(family: FontFamily, platform: str | None = None) -> str:
    """The concrete font name for a family on the given platform."""
    try:
        names = _FAMILY_NAMES[family]
    except KeyError:
        raise ValueError("Unknown font family.") from None
    platform = sys.platform if platform is None else platform
    if platform == "darwin":
        return names[0]
    if platform == "win32":
        return names[1]
    return names[2]


def style_name(style: FontStyle) -> str:
    """The name used for a style in font strings."""
    try:
        return _STYLE_NAMES[style]
    except KeyError:
        raise ValueError("Unknown font style.") from None


@dataclasses.dataclass(frozen=True)
class Font:
    """An immutable combination of family, style, size and colour."""

    family: FontFamily = FontFamily.SANS_SERIF
    style: FontStyle = FontStyle.NORMAL
    size: int = 13
    color: Color = Color.BLACK

    def with_family(self, family: FontFamily) -> Font:
        return dataclasses.replace(self, family=family)

    def with_style(self, style: FontStyle) -> Font:
        return dataclasses.replace(self, style=style)

    def with_size(self, size: int) -> Font:
        return dataclasses.replace(self, size=size)

    def with_color(self, color: Color) -> Font:
        return dataclasses.replace(self, color=color)

    def font_string(self, platform: str | None = None) -> str:
        """A 'Family[-STYLE]-size' description of the font."""
        result = family_name(self.family, platform)
        if self.style is not FontStyle.NORMAL:
            result += "-" + style_name(self.style)
        return f"{result}-{self.size}"