"""A text console that records styled runs of text and renders them as HTML."""

from __future__ import annotations

import contextlib
import dataclasses
import html
from collections.abc import Iterator

from .color import Color
from .font import FontStyle

DEFAULT_FONT_SIZE = 11
"""Point size used when no font size is given."""

_HTML_HEADER = """
         <html>
            <head></head>
            <body style="background-color:white;color:black;">
                <pre>"""

_HTML_FOOTER = """</pre>
            </body>
        </html>
    """

_BOLD_STYLES = frozenset({FontStyle.BOLD, FontStyle.BOLD_ITALIC})
_ITALIC_STYLES = frozenset({FontStyle.ITALIC, FontStyle.BOLD_ITALIC})


@dataclasses.dataclass(frozen=True)
class TextStyle:
    """The colour, font style and point size of a run of text."""

    color: Color = Color.BLACK
    font_style: FontStyle = FontStyle.NORMAL
    font_size: int = DEFAULT_FONT_SIZE

    def __post_init__(self) -> None:
        if self.font_size < 0:
            raise ValueError("Font size must be non-negative.")

    @property
    def bold(self) -> bool:
        return self.font_style in _BOLD_STYLES

    @property
    def italic(self) -> bool:
        return self.font_style in _ITALIC_STYLES

    def css(self) -> str:
        """The style as an inline CSS declaration list."""
        parts = [f"color:{self.color.to_html()};"]
        if self.bold:
            parts.append("font-weight:bold;")
        if self.italic:
            parts.append("font-style:italic;")
        parts.append(f"font-size:{self.font_size}pt;")
        return "".join(parts)


class StyledConsole:
    """A writable text sink in which each run of text keeps the style it was written in."""

    def __init__(self) -> None:
        self._style = TextStyle()
        self._buffer: list[str] = []
        self._contents: list[tuple[TextStyle, str]] = []

    @property
    def style(self) -> TextStyle:
        """The style applied to text written from now on."""
        return self._style

    @property
    def contents(self) -> tuple[tuple[TextStyle, str], ...]:
        """All text written so far, as (style, text) runs."""
        self._flush_buffer()
        return tuple(self._contents)

    def write(self, text: str) -> int:
        """Append text in the current style; returns the number of characters written."""
        self._buffer.append(text)
        return len(text)

    def flush(self) -> None:
        """Move buffered text into the list of styled runs."""
        self._flush_buffer()

    def _flush_buffer(self) -> None:
        text = "".join(self._buffer)
        if not text:
            return
        self._buffer.clear()
        self._contents.append((self._style, text))

    def set_style(
        self,
        color: Color = Color.BLACK,
        font_style: FontStyle = FontStyle.NORMAL,
        font_size: int = DEFAULT_FONT_SIZE,
    ) -> None:
        """Change the style used for text written from now on."""
        self._flush_buffer()
        self._style = TextStyle(color, font_style, font_size)

    def clear(self) -> None:
        """Discard everything written so far."""
        self._flush_buffer()
        self._contents.clear()

    @contextlib.contextmanager
    def styled(
        self,
        color: Color | None = None,
        font_style: FontStyle | None = None,
        font_size: int | None = None,
    ) -> Iterator[StyledConsole]:
        """Temporarily change the style; arguments left as None keep their current value."""
        previous = self._style
        self.set_style(
            previous.color if color is None else color,
            previous.font_style if font_style is None else font_style,
            previous.font_size if font_size is None else font_size,
        )
        try:
            yield self
        finally:
            self.set_style(previous.color, previous.font_style, previous.font_size)

    def to_html(self) -> str:
        """Render all text written so far as an HTML document."""
        self._flush_buffer()
        spans = "".join(
            f'<span style="{style.css()}">{html.escape(text)}</span>'
            for style, text in self._contents
        )
        return _HTML_HEADER + spans + _HTML_FOOTER