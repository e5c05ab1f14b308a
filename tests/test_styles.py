import pytest

from edra_pdf.styles import (
    AttributeField,
    BlockType,
    ContentField,
    FontFamily,
    FontStyle,
    Style,
    TextAlignment,
)


def test_block_type_from_json_names():
    assert BlockType("paragraph") is BlockType.PARAGRAPH
    assert BlockType("hardBreak") is BlockType.BREAK
    assert BlockType("orderedList") is BlockType.ORDERED_LIST
    assert BlockType("listItem") is BlockType.LIST_ITEM


def test_alignment_and_family_values():
    assert TextAlignment("justify") is TextAlignment.JUSTIFY
    assert FontFamily("times-roman") is FontFamily.TIMES_ROMAN


def test_attribute_field_from_dict_renames():
    attrs = AttributeField.from_dict(
        {"textAlign": "center", "level": 2, "class": "x", "tight": True,
         "start": 3, "color": "red", "fontSize": "large", "unknown": 1}
    )
    assert attrs.text_align == "center"
    assert attrs.level == 2
    assert attrs.class_ == "x"
    assert attrs.tight is True
    assert attrs.list_start == 3
    assert attrs.color == "red"
    assert attrs.font_size == "large"


def test_attribute_field_nulls_become_none():
    attrs = AttributeField.from_dict({"textAlign": None, "level": None})
    assert attrs == AttributeField()


@pytest.mark.parametrize("data", [{"level": 256}, {"level": -1}, {"level": "1"}, {"start": True}])
def test_attribute_field_rejects_bad_integers(data):
    with pytest.raises(ValueError):
        AttributeField.from_dict(data)


def test_attribute_field_rejects_non_object():
    with pytest.raises(ValueError):
        AttributeField.from_dict([1, 2])


@pytest.mark.parametrize(
    "name, expected",
    [("bold", Style.BOLD), ("italic", Style.ITALIC),
     ("underline", Style.UNDERLINE), ("strike", Style.STRIKETHROUGH)],
)
def test_font_style_known_marks(name, expected):
    assert FontStyle.from_dict({"type": name}).style() is expected


def test_font_style_unknown_or_missing_mark():
    assert FontStyle.from_dict({"type": "textStyle"}).style() is None
    assert FontStyle().style() is None


def test_font_style_attributes():
    mark = FontStyle.from_dict({"type": "textStyle", "attrs": {"color": "blue"}})
    assert mark.name == "textStyle"
    assert mark.attributes == AttributeField(color="blue")


def test_content_field_tree():
    node = ContentField.from_dict(
        {
            "type": "paragraph",
            "attrs": {"textAlign": "right"},
            "content": [
                {"type": "text", "text": "hello", "marks": [{"type": "bold"}]},
                {"type": "hardBreak"},
            ],
        }
    )
    assert node.block_type is BlockType.PARAGRAPH
    assert node.attributes.text_align == "right"
    assert [child.block_type for child in node.content] == [BlockType.TEXT, BlockType.BREAK]
    assert node.content[0].text == "hello"
    assert node.content[0].style[0].style() is Style.BOLD
    assert node.content[1].content is None
    assert node.text is None


def test_content_field_unknown_type():
    with pytest.raises(ValueError):
        ContentField.from_dict({"type": "image"})


def test_content_field_missing_type():
    with pytest.raises(ValueError):
        ContentField.from_dict({"text": "x"})


def test_content_field_text_must_be_string():
    with pytest.raises(ValueError):
        ContentField.from_dict({"type": "text", "text": 5})