import pytest

from debugfire.color import Color
from debugfire.font import Font, FontFamily, FontStyle, family_name, style_name


def test_defaults():
    font = Font()
    assert font.family is FontFamily.SANS_SERIF
    assert font.style is FontStyle.NORMAL
    assert font.size == 13
    assert font.color == Color.BLACK


def test_default_font_string_on_linux():
    assert Font().font_string("linux") == "Sans Serif-13"


@pytest.mark.parametrize(
    "family, platform, expected",
    [
        (FontFamily.SERIF, "darwin", "Didot"),
        (FontFamily.SERIF, "linux", "Serif"),
        (FontFamily.UNICODE_SERIF, "win32", "Times New Roman"),
        (FontFamily.UNICODE_MONOSPACE, "darwin", "Lucida Grande"),
        (FontFamily.MONOSPACE, "linux", "Monospace"),
    ],
)
def test_family_names(family, platform, expected):
    assert family_name(family, platform) == expected


@pytest.mark.parametrize(
    "style, expected",
    [
        (FontStyle.BOLD, "BOLD"),
        (FontStyle.BOLD_ITALIC, "BOLDITALIC"),
        (FontStyle.ITALIC, "ITALIC"),
        (FontStyle.NORMAL, "<normal>"),
    ],
)
def test_style_names(style, expected):
    assert style_name(style) == expected


def test_styled_font_string_includes_style():
    font = Font(FontFamily.SERIF, FontStyle.ITALIC, 24, Color.BLUE)
    assert font.font_string("linux") == "Serif-ITALIC-24"


def test_with_methods_return_new_font():
    base = Font()
    changed = base.with_family(FontFamily.MONOSPACE).with_style(FontStyle.BOLD)
    changed = changed.with_size(20).with_color(Color.RED)
    assert base == Font()
    assert changed.family is FontFamily.MONOSPACE
    assert changed.style is FontStyle.BOLD
    assert changed.size == 20
    assert changed.color == Color.RED


def test_font_is_immutable():
    font = Font()
    with pytest.raises(AttributeError):
        font.size = 5
    assert font.size == 13
    assert font.font_string("linux") == "Sans Serif-13"


def test_unknown_family_rejected():
    with pytest.raises(ValueError):
        family_name("not a family", "linux")