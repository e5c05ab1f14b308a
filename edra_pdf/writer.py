"""The layout engine that draws text blocks onto pages."""

from __future__ import annotations

from dataclasses import dataclass, field

from edra_pdf.fonts import DEFAULT_CHAR_WIDTH, MAPPED_FONT_SIZE, FontType
from edra_pdf.pdf import Content, FontReference, Page, PageContent, RefAllocator
from edra_pdf.styles import Style
from edra_pdf.text import TextBlock

_STYLE_FONT_LABELS = {
    Style.NORMAL: "times-normal",
    Style.UNDERLINE: "times-normal",
    Style.STRIKETHROUGH: "times-normal",
    Style.ITALIC: "times-italic",
    Style.ITALIC_UNDERLINE: "times-italic",
    Style.ITALIC_STRIKETHROUGH: "times-italic",
    Style.BOLD: "times-bold",
    Style.BOLD_UNDERLINE: "times-bold",
    Style.BOLD_STRIKETHROUGH: "times-bold",
    Style.BOLD_ITALIC: "times-bold-italic",
    Style.BOLD_ITALIC_UNDERLINE: "times-bold-italic",
    Style.BOLD_ITALIC_STRIKETHROUGH: "times-bold-italic",
}

_UNDERLINE_STYLES = {
    Style.UNDERLINE,
    Style.ITALIC_UNDERLINE,
    Style.BOLD_UNDERLINE,
    Style.BOLD_ITALIC_UNDERLINE,
}

_STRIKETHROUGH_STYLES = {
    Style.STRIKETHROUGH,
    Style.BOLD_STRIKETHROUGH,
    Style.ITALIC_STRIKETHROUGH,
    Style.BOLD_ITALIC_STRIKETHROUGH,
}


@dataclass
class Writer:
    """Write head, page list, object number allocator and registered fonts.

    A new writer already holds one page with one empty content stream.
    """

    page_height: float = 842.4
    page_width: float = 595.6
    page_margin: float = 48.0
    x: float = 0.0
    y: float = 0.0
    alloc: RefAllocator = field(default_factory=RefAllocator)
    current_page: int | None = field(default=None, init=False)
    font_refs: list[FontReference] = field(default_factory=list, init=False)
    font_family: dict[str, FontType] = field(default_factory=dict, init=False)
    pages: list[Page] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        page_id = self.alloc.bump()
        content_id = self.alloc.bump()
        self.pages.append(Page(page_id, [PageContent(content_id, Content())]))
        self.current_page = page_id

    def bump(self) -> int:
        """A fresh indirect object number."""
        return self.alloc.bump()

    def feed(self, num: float) -> None:
        """Move the write head down the page."""
        self.y -= num

    def go_to(self, num_x: float, num_y: float) -> None:
        """Move the write head to a new position."""
        self.x = num_x
        self.y = num_y

    def write(self, text_block: TextBlock) -> None:
        """Draw every line of ``text_block`` into the last page's content stream."""
        font_map = {font.label: font for font in self.font_refs}
        font_size = text_block.font_size

        for line in text_block.lines:
            if not line.body:
                self.y -= 1.5 * font_size
                continue

            self.x = 0.0
            self.x += text_block.indent
            self.x += self.page_margin
            self.x += line.offset

            if not self.pages or not self.pages[-1].contents:
                continue
            target = self.pages[-1].contents[-1].content

            target.begin_text()
            target.next_line(self.x, self.y)
            line_start = self.x

            for word in line.body:
                font = font_map.get(_STYLE_FONT_LABELS[word.font_style])
                if font is not None:
                    target.set_font(font.name, font_size)
                target.show(word.text)
                target.next_line(word.width + word.offset, 0.0)
                self.x += word.width + word.offset

            line_end = self.x

            self.x = line_start
            target.move_to(self.x, self.y)

            underline_points: list[float] = []
            strikethrough_points: list[float] = []
            underlining = False
            striking = False
            last_offset = 0.0

            for word in line.body:
                if word.font_style in _UNDERLINE_STYLES:
                    if not underlining:
                        underline_points.append(self.x)
                        underlining = True
                elif underlining:
                    underline_points.append(self.x - word.offset)
                    underlining = False

                if word.font_style in _STRIKETHROUGH_STYLES:
                    if not striking:
                        strikethrough_points.append(self.x)
                        striking = True
                elif striking:
                    strikethrough_points.append(self.x - word.offset)
                    striking = False

                last_offset = word.offset
                self.x += word.offset
                self.x += word.width

            if underlining:
                underline_points.append(self.x - last_offset)
            if striking:
                strikethrough_points.append(self.x - last_offset)

            rule_y = self.y - font_size / 3.3
            for points in (underline_points, strikethrough_points):
                if len(points) > 1:
                    for index, point in enumerate(points):
                        if index % 2 == 0:
                            target.move_to(point, rule_y)
                        else:
                            target.line_to(point, rule_y)

            target.move_to(line_end, self.y)
            self.y -= font_size * 1.5

            target.stroke()
            target.end_text()

    def get_char_width(
        self, ch: str, font_size: float, font_style: Style, search_string: str
    ) -> float:
        """Width of ``ch`` in the registered family ``search_string``.

        Falls back to a fixed default width when the family is not registered.
        """
        font = self.font_family.get(search_string)
        if font is None:
            return font_size / MAPPED_FONT_SIZE * DEFAULT_CHAR_WIDTH
        return font.char_width(ch, font_style, font_size)