from edra_pdf.styles import AttributeField, FontFamily, Style, TextAlignment
from edra_pdf.text import Line, TextBlock, Word


def test_text_block_defaults():
    block = TextBlock()
    assert block.font_size == 12.0
    assert block.alignment is TextAlignment.LEFT
    assert block.font_family is FontFamily.TIMES_ROMAN
    assert block.indent == 0.0
    assert block.index == 0
    assert block.lines == [Line()]


def test_default_blocks_do_not_share_lines():
    first = TextBlock()
    second = TextBlock()
    first.current_line().width = 5.0
    assert second.current_line().width == 0.0


def test_builder_chain_returns_same_block():
    block = TextBlock()
    result = block.with_font_size(16.0).and_alignment(TextAlignment.CENTER).and_indent(8.0)
    assert result is block
    assert block.font_size == 16.0
    assert block.alignment is TextAlignment.CENTER
    assert block.indent == 8.0


def test_new_line_advances_index():
    block = TextBlock()
    first = block.current_line()
    created = block.new_line()
    assert block.index == 1
    assert len(block.lines) == 2
    assert block.current_line() is created
    assert block.lines[0] is first
    assert created == Line()


def test_words_added_to_current_line():
    block = TextBlock()
    word = Word(text="hi", font_style=Style.BOLD, width=3.0, offset=1.0,
                attributes=AttributeField(color="red"))
    line = block.current_line()
    line.body.append(word)
    line.width += word.width + word.offset
    assert block.lines[0].body == [word]
    assert block.lines[0].width == word.width + word.offset


def test_line_defaults():
    line = Line()
    assert line.body == []
    assert line.width == 0.0
    assert line.offset == 0.0