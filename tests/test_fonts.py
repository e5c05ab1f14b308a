import pytest

from edra_pdf.fonts import Font, FontType
from edra_pdf.styles import Style


@pytest.fixture
def font():
    return Font()


def test_standardize_at_mapped_size_and_width():
    assert FontType.standardize(499.0, 18.0) == pytest.approx(1.0)


def test_standardize_scales_linearly_with_size():
    assert FontType.standardize(62.5, 36.0) == pytest.approx(2 * FontType.standardize(62.5, 18.0))


def test_normal_uses_table_value(font):
    assert font.normal("a", 12.0) == pytest.approx(FontType.standardize(62.5, 12.0))
    assert font.normal(" ", 12.0) == pytest.approx(FontType.standardize(110.5, 12.0))


def test_variants_use_their_own_tables(font):
    assert font.bold("a", 12.0) == pytest.approx(FontType.standardize(55.5, 12.0))
    assert font.italic("f", 12.0) == pytest.approx(FontType.standardize(99.5, 12.0))
    assert font.bold_italic("=", 12.0) == pytest.approx(FontType.standardize(45.5, 12.0))


def test_missing_character_uses_default(font):
    expected = FontType.standardize(55.0, 14.0)
    assert font.normal("é", 14.0) == pytest.approx(expected)
    assert font.bold("€", 14.0) == pytest.approx(expected)
    assert font.italic("\t", 14.0) == pytest.approx(expected)
    assert font.bold_italic("ß", 14.0) == pytest.approx(expected)


@pytest.mark.parametrize(
    "style, variant",
    [
        (Style.NORMAL, "normal"),
        (Style.UNDERLINE, "normal"),
        (Style.STRIKETHROUGH, "normal"),
        (Style.BOLD, "bold"),
        (Style.BOLD_UNDERLINE, "bold"),
        (Style.BOLD_STRIKETHROUGH, "bold"),
        (Style.ITALIC, "italic"),
        (Style.ITALIC_UNDERLINE, "italic"),
        (Style.ITALIC_STRIKETHROUGH, "italic"),
        (Style.BOLD_ITALIC, "bold_italic"),
        (Style.BOLD_ITALIC_UNDERLINE, "bold_italic"),
        (Style.BOLD_ITALIC_STRIKETHROUGH, "bold_italic"),
    ],
)
def test_char_width_dispatch(font, style, variant):
    for ch in "aMz{":
        assert font.char_width(ch, style, 12.0) == getattr(font, variant)(ch, 12.0)


def test_widths_are_positive(font):
    for style in Style:
        for ch in "Hello, World! 123":
            assert font.char_width(ch, style, 12.0) > 0


def test_custom_font_type_tables():
    custom = FontType({"x": 499.0}, {}, {}, {})
    assert custom.normal("x", 18.0) == pytest.approx(1.0)
    assert custom.bold("x", 18.0) == pytest.approx(FontType.standardize(55.0, 18.0))