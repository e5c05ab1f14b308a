"""Layout containers: words, lines and text blocks."""

from __future__ import annotations

from dataclasses import dataclass, field

from edra_pdf.styles import AttributeField, FontFamily, Style, TextAlignment


@dataclass
class Word:
    """A piece of text with its word-level style and measured width."""

    text: str
    font_style: Style
    width: float
    offset: float
    attributes: AttributeField | None = None


@dataclass
class Line:
    """Words that fit on one visual line."""

    body: list[Word] = field(default_factory=list)
    width: float = 0.0
    offset: float = 0.0


@dataclass
class TextBlock:
    """Block level container of lines.

    Defaults: font size 12.0, Times Roman, left aligned, no indent.
    """

    alignment: TextAlignment = TextAlignment.LEFT
    lines: list[Line] = field(default_factory=lambda: [Line()])
    font_family: FontFamily = FontFamily.TIMES_ROMAN
    font_size: float = 12.0
    index: int = 0
    indent: float = 0.0
    post_block_offset: float = 0.0

    def with_font_size(self, font_size: float) -> TextBlock:
        self.font_size = font_size
        return self

    def and_alignment(self, alignment: TextAlignment) -> TextBlock:
        self.alignment = alignment
        return self

    def and_indent(self, indent: float) -> TextBlock:
        self.indent = indent
        return self

    def new_line(self) -> Line:
        """Start a new empty line and make it the current one."""
        line = Line()
        self.lines.append(line)
        self.index += 1
        return line

    def current_line(self) -> Line:
        """The line words are currently being added to."""
        return self.lines[self.index]