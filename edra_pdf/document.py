"""Turn an editor JSON document into a text-only PDF."""

from __future__ import annotations

import argparse
import copy
import json
import os
import sys
from dataclasses import dataclass, field
from typing import Any, Sequence

from edra_pdf.fonts import Font
from edra_pdf.pdf import Content, FontReference, Page, PageContent, PdfDocument
from edra_pdf.styles import (
    AttributeField,
    BlockType,
    ContentField,
    FontFamily,
    Style,
    TextAlignment,
)
from edra_pdf.text import TextBlock, Word
from edra_pdf.writer import Writer

DEFAULT_OUTPUT = "chunks.pdf"

_TIMES_FONTS = (
    ("times-normal", "Times-Roman"),
    ("times-bold", "Times-Bold"),
    ("times-italic", "Times-Italic"),
    ("times-bold-italic", "Times-BoldItalic"),
)

_HEADING_SIZES = {1: 16.0, 2: 15.0, 3: 14.0}
_BASE_FONT_SIZE = 12.0

_ALIGNMENTS = {
    "left": TextAlignment.LEFT,
    "right": TextAlignment.RIGHT,
    "center": TextAlignment.CENTER,
    "justify": TextAlignment.JUSTIFY,
}

_WITH_UNDERLINE = {
    Style.BOLD: Style.BOLD_UNDERLINE,
    Style.ITALIC: Style.ITALIC_UNDERLINE,
    Style.NORMAL: Style.UNDERLINE,
    Style.BOLD_ITALIC: Style.BOLD_ITALIC_UNDERLINE,
}

_WITH_STRIKETHROUGH = {
    Style.BOLD: Style.BOLD_STRIKETHROUGH,
    Style.ITALIC: Style.ITALIC_STRIKETHROUGH,
    Style.NORMAL: Style.BOLD_ITALIC_STRIKETHROUGH,
    Style.BOLD_ITALIC: Style.STRIKETHROUGH,
}


def _offset_center(phrase_width: float, writeable_area: float) -> float:
    """Offset that centres a line of ``phrase_width``."""
    if phrase_width < writeable_area:
        return (writeable_area - phrase_width) / 2.0
    return 0.0


def _offset_right_justify(phrase_width: float, writeable_area: float) -> float:
    """Offset that pushes a line of ``phrase_width`` to the right margin."""
    if phrase_width < writeable_area:
        return writeable_area - phrase_width
    return 0.0


def _apply_text_alignment(text_block: TextBlock, writeable_area: float) -> None:
    """Set line or word offsets according to the block's alignment."""
    alignment = text_block.alignment
    if alignment is TextAlignment.CENTER:
        for line in text_block.lines:
            line.offset = _offset_center(line.width, writeable_area)
    elif alignment is TextAlignment.RIGHT:
        for line in text_block.lines:
            line.offset = _offset_right_justify(line.width, writeable_area)
    elif alignment is TextAlignment.JUSTIFY and len(text_block.lines) > 2:
        for line in text_block.lines[:-1]:
            if len(line.body) > 2:
                extra = (writeable_area - line.width) / (len(line.body) - 1)
                for word in line.body:
                    word.offset += extra


def _find_first_text_node(nodes: Sequence[ContentField]) -> ContentField | None:
    """Depth-first search for the first node that carries text."""
    for node in nodes:
        if node.text is not None:
            return node
        if node.content is not None:
            found = _find_first_text_node(node.content)
            if found is not None:
                return found
    return None


def _block_font_style(block: ContentField) -> Style:
    """Combine a node's marks into one font style."""
    current = Style.NORMAL
    if block.style is None:
        return current

    styles = {s for s in (mark.style() for mark in block.style) if s is not None}

    if Style.BOLD in styles and Style.ITALIC in styles:
        current = Style.BOLD_ITALIC
    elif Style.BOLD in styles:
        current = Style.BOLD
    elif Style.ITALIC in styles:
        current = Style.ITALIC

    if Style.UNDERLINE in styles:
        current = _WITH_UNDERLINE.get(current, current)
    if Style.STRIKETHROUGH in styles:
        current = _WITH_STRIKETHROUGH.get(current, current)
    return current


def _block_attributes(block: ContentField) -> AttributeField | None:
    """Attributes of the first mark that has any."""
    for mark in block.style or ():
        if mark.attributes is not None:
            return mark.attributes
    return None


def _block_text_alignment(block: ContentField) -> TextAlignment:
    if block.attributes is None or block.attributes.text_align is None:
        return TextAlignment.LEFT
    return _ALIGNMENTS.get(block.attributes.text_align, TextAlignment.LEFT)


def _block_font_size(block: ContentField) -> float:
    """Font size from a heading level, or the body size."""
    if block.attributes is None or block.attributes.level is None:
        return _BASE_FONT_SIZE
    return _HEADING_SIZES.get(block.attributes.level, _BASE_FONT_SIZE)


def _build_new_page(writer: Writer) -> None:
    page_id = writer.bump()
    content_id = writer.bump()
    writer.pages.append(Page(page_id, [PageContent(content_id, Content())]))
    writer.current_page = page_id
    writer.y = writer.page_height - writer.page_margin


def _needs_new_page(writer: Writer, font_size: float) -> bool:
    return writer.y - font_size * 1.5 < writer.page_margin


def _word_width(
    word: str, font_size: float, family: FontFamily, font_style: Style, writer: Writer
) -> float:
    return sum(
        writer.get_char_width(ch, font_size, font_style, family.value) for ch in word
    )


def _write_empty_block(writer: Writer, block: ContentField) -> None:
    empty = TextBlock().with_font_size(_block_font_size(block))
    if _needs_new_page(writer, empty.font_size):
        _build_new_page(writer)
    writer.write(empty)


def _render_text_block(
    writer: Writer, block: ContentField, indent: float, post_block_offset: float
) -> None:
    """Lay out a block's text runs into lines and write them."""
    if block.content is None:
        _write_empty_block(writer, block)
        writer.feed(post_block_offset)
        return

    font_size = _block_font_size(block)
    writeable_area = writer.page_width - writer.page_margin * 2.0 - indent
    text_block = (
        TextBlock()
        .with_font_size(font_size)
        .and_alignment(_block_text_alignment(block))
        .and_indent(indent)
    )
    line = text_block.current_line()

    for section in block.content:
        if section.text is None:
            _write_empty_block(writer, block)
            continue

        family = text_block.font_family
        font_style = _block_font_style(section)
        attributes = _block_attributes(section)
        space_width = _word_width(" ", font_size, family, font_style, writer)

        for text in section.text.split(" "):
            if not text:
                continue
            text_width = _word_width(text.strip(), font_size, family, font_style, writer)
            if line.width + text_width + space_width > writeable_area:
                if _needs_new_page(writer, font_size):
                    _build_new_page(writer)
                line = text_block.new_line()
            line.width += text_width + space_width
            line.body.append(
                Word(
                    text=text,
                    font_style=font_style,
                    width=text_width,
                    offset=space_width,
                    attributes=attributes,
                )
            )

    _apply_text_alignment(text_block, writeable_area)
    writer.write(text_block)
    writer.feed(post_block_offset)


def _render_ordered_list(writer: Writer, block: ContentField) -> None:
    """Number each list item and write its children indented."""
    font_size = _block_font_size(block)
    counter = 1
    if block.attributes is not None and block.attributes.list_start is not None:
        counter = block.attributes.list_start

    for item in block.content or ():
        if item.content is None:
            continue
        node = _find_first_text_node(item.content)
        if node is not None:
            node.text = f"{counter}. {node.text}"
            counter += 1
        for child in item.content:
            _render_text_block(writer, child, font_size, font_size * 1.5)


@dataclass
class Doc:
    """A whole editor document."""

    content: list[ContentField] = field(default_factory=list)
    doc_type: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> Doc:
        """Build a document from decoded JSON."""
        if not isinstance(data, dict):
            raise ValueError(f"document must be a JSON object, got {type(data).__name__}")
        if "content" not in data:
            raise ValueError("document is missing field 'content'")
        content = data["content"]
        if not isinstance(content, list):
            raise ValueError("field 'content' must be a list")
        doc_type = data.get("type")
        if doc_type is not None and not isinstance(doc_type, str):
            raise ValueError("field 'type' must be a string")
        return cls(
            content=[ContentField.from_dict(node) for node in content],
            doc_type=doc_type,
        )

    @classmethod
    def from_json(cls, text: str | bytes) -> Doc:
        """Build a document from the editor's JSON text."""
        return cls.from_dict(json.loads(text))

    def render(self, path: str | os.PathLike[str] | None = DEFAULT_OUTPUT) -> bytes:
        """Lay out the document, return the PDF and write it to ``path`` unless it is None."""
        pdf = PdfDocument()
        writer = Writer()
        page_tree_id = writer.bump()

        font_refs = [
            FontReference(id=writer.bump(), label=label, name=name)
            for label, name in _TIMES_FONTS
        ]
        writer.go_to(writer.page_margin, writer.page_height - writer.page_margin)
        writer.font_refs.extend(font_refs)
        writer.font_family[FontFamily.TIMES_ROMAN.value] = Font()

        for ref in writer.font_refs:
            pdf.type1_font(ref.id, ref.name)

        for block in copy.deepcopy(self.content):
            if block.block_type is BlockType.HEADING or block.block_type is BlockType.PARAGRAPH:
                _render_text_block(writer, block, 0.0, 0.0)
            elif block.block_type is BlockType.ORDERED_LIST:
                _render_ordered_list(writer, block)

        font_resources = {ref.name: ref.id for ref in writer.font_refs}
        media_box = (0.0, 0.0, writer.page_width, writer.page_height)
        streams: list[tuple[int, bytes]] = []
        for page in writer.pages:
            contents, page.contents = page.contents, []
            streams.extend((pc.content_id, pc.content.finish()) for pc in contents)
            pdf.page(
                page.page_id,
                media_box,
                page_tree_id,
                [pc.content_id for pc in contents],
                font_resources if contents else {},
            )

        if writer.pages:
            first_page_id = writer.pages[0].page_id
            writer.bump()  # signature field
            sig_annot_id = writer.bump()
            writer.bump()  # acroform
            pdf.signature_field(
                sig_annot_id, first_page_id, "Signature1", "etst", (0.0, 0.0, 100.0, 100.0)
            )
        else:
            print("missing page_id", file=sys.stderr)

        for content_id, data in streams:
            pdf.stream(content_id, data)

        pdf.pages(page_tree_id, [page.page_id for page in writer.pages])
        pdf.catalog(writer.bump(), page_tree_id)

        output = pdf.finish()
        if path is not None:
            with open(path, "wb") as handle:
                handle.write(output)
        return output


def main(argv: Sequence[str] | None = None) -> int:
    """Convert an editor JSON file into a PDF."""
    parser = argparse.ArgumentParser(
        prog="edra-pdf", description="Render editor JSON output as a text-only PDF."
    )
    parser.add_argument("input", help="JSON file to read, or '-' for standard input")
    parser.add_argument(
        "-o", "--output", default=DEFAULT_OUTPUT, help=f"PDF file to write (default {DEFAULT_OUTPUT})"
    )
    args = parser.parse_args(argv)

    try:
        if args.input == "-":
            text = sys.stdin.read()
        else:
            with open(args.input, encoding="utf-8") as handle:
                text = handle.read()
        Doc.from_json(text).render(args.output)
    except (OSError, ValueError) as exc:
        print(f"edra-pdf: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())