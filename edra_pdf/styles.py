"""Document model types read from the editor's JSON output."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Mapping


class Style(enum.Enum):
    """Font style of a run of text, including the compound styles."""

    NORMAL = "normal"
    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    STRIKETHROUGH = "strike"
    BOLD_ITALIC = "bold_italic"
    BOLD_UNDERLINE = "bold_underline"
    ITALIC_UNDERLINE = "italic_underline"
    BOLD_ITALIC_UNDERLINE = "bold_italic_underline"
    BOLD_STRIKETHROUGH = "bold_strikethrough"
    ITALIC_STRIKETHROUGH = "italic_strikethrough"
    BOLD_ITALIC_STRIKETHROUGH = "bold_italic_strikethrough"


class TextAlignment(enum.Enum):
    """Horizontal alignment of a text block."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"
    JUSTIFY = "justify"


class FontFamily(enum.Enum):
    """Font families available to the renderer."""

    TIMES_ROMAN = "times-roman"


class BlockType(enum.Enum):
    """Node type, read from the JSON ``type`` field."""

    PARAGRAPH = "paragraph"
    HEADING = "heading"
    BREAK = "hardBreak"
    ORDERED_LIST = "orderedList"
    TEXT = "text"
    LIST_ITEM = "listItem"


_MARK_STYLES = {
    "bold": Style.BOLD,
    "italic": Style.ITALIC,
    "underline": Style.UNDERLINE,
    "strike": Style.STRIKETHROUGH,
}


def _require_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"{what} must be a JSON object, got {type(data).__name__}")
    return data


def _optional_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


def _optional_bool(data: Mapping[str, Any], key: str) -> bool | None:
    value = data.get(key)
    if value is not None and not isinstance(value, bool):
        raise ValueError(f"field {key!r} must be a boolean")
    return value


def _optional_u8(data: Mapping[str, Any], key: str) -> int | None:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {key!r} must be an integer")
    if not 0 <= value <= 255:
        raise ValueError(f"field {key!r} out of range 0..255: {value}")
    return value


def _optional_list(data: Mapping[str, Any], key: str) -> list[Any] | None:
    value = data.get(key)
    if value is not None and not isinstance(value, list):
        raise ValueError(f"field {key!r} must be a list")
    return value


@dataclass
class AttributeField:
    """Block level attributes from the ``attrs`` JSON field."""

    text_align: str | None = None
    level: int | None = None
    class_: str | None = None
    tight: bool | None = None
    list_start: int | None = None
    color: str | None = None
    font_size: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> AttributeField:
        data = _require_mapping(data, "attrs")
        return cls(
            text_align=_optional_str(data, "textAlign"),
            level=_optional_u8(data, "level"),
            class_=_optional_str(data, "class"),
            tight=_optional_bool(data, "tight"),
            list_start=_optional_u8(data, "start"),
            color=_optional_str(data, "color"),
            font_size=_optional_str(data, "fontSize"),
        )


@dataclass
class FontStyle:
    """One entry of a node's ``marks`` list."""

    name: str | None = None
    attributes: AttributeField | None = None

    @classmethod
    def from_dict(cls, data: Any) -> FontStyle:
        data = _require_mapping(data, "mark")
        attrs = data.get("attrs")
        return cls(
            name=_optional_str(data, "type"),
            attributes=None if attrs is None else AttributeField.from_dict(attrs),
        )

    def style(self) -> Style | None:
        """The basic style this mark names, or None for marks that carry no font style."""
        if self.name is None:
            return None
        return _MARK_STYLES.get(self.name)


@dataclass
class ContentField:
    """A node of the document tree."""

    block_type: BlockType
    content: list[ContentField] | None = None
    style: list[FontStyle] | None = None
    attributes: AttributeField | None = None
    text: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> ContentField:
        data = _require_mapping(data, "content node")
        if data.get("type") is None:
            raise ValueError("content node is missing field 'type'")
        try:
            block_type = BlockType(data["type"])
        except ValueError:
            raise ValueError(f"unknown block type {data['type']!r}") from None

        children = _optional_list(data, "content")
        marks = _optional_list(data, "marks")
        attrs = data.get("attrs")
        return cls(
            block_type=block_type,
            content=None if children is None else [cls.from_dict(child) for child in children],
            style=None if marks is None else [FontStyle.from_dict(mark) for mark in marks],
            attributes=None if attrs is None else AttributeField.from_dict(attrs),
            text=_optional_str(data, "text"),
        )