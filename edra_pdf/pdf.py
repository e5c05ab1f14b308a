"""A small PDF object writer: references, content streams and the file layout."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Mapping, Sequence

_HEADER = b"%PDF-1.7\n%\x80\x80\x80\x80\n"
_NAME_DELIMITERS = set(b"()<>[]{}/%#")


def _number(value: float) -> str:
    """Format a number the way PDF operands expect it."""
    if isinstance(value, bool):
        raise ValueError("booleans are not PDF numbers")
    if isinstance(value, int):
        return str(value)
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"PDF numbers must be finite, got {value!r}")
    if number == int(number):
        return str(int(number))
    text = f"{number:.4f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def _name(name: str) -> bytes:
    """Encode ``name`` as a PDF name object."""
    out = bytearray(b"/")
    for byte in name.encode("utf-8"):
        if 0x21 <= byte <= 0x7E and byte not in _NAME_DELIMITERS:
            out.append(byte)
        else:
            out += f"#{byte:02X}".encode("ascii")
    return bytes(out)


def _literal(data: bytes) -> bytes:
    """Encode raw bytes as a PDF literal string."""
    out = bytearray(b"(")
    for byte in data:
        if byte in b"\\()":
            out += b"\\" + bytes([byte])
        elif byte < 0x20 or byte == 0x7F:
            out += f"\\{byte:03o}".encode("ascii")
        else:
            out.append(byte)
    out += b")"
    return bytes(out)


def _text_string(text: str) -> bytes:
    """Encode a text string: literal when plain ASCII, UTF-16BE hex otherwise."""
    if all(0x20 <= ord(ch) < 0x7F for ch in text):
        return _literal(text.encode("ascii"))
    return b"<FEFF" + text.encode("utf-16-be").hex().upper().encode("ascii") + b">"


def _reference(ref: int) -> bytes:
    return f"{ref} 0 R".encode("ascii")


def _rect(rect: Sequence[float]) -> bytes:
    if len(rect) != 4:
        raise ValueError("a rectangle needs exactly four numbers")
    return ("[" + " ".join(_number(v) for v in rect) + "]").encode("ascii")


def _ref_array(refs: Iterable[int]) -> bytes:
    return b"[" + b" ".join(_reference(ref) for ref in refs) + b"]"


@dataclass
class RefAllocator:
    """Hands out consecutive indirect object numbers."""

    next_id: int = 1

    def bump(self) -> int:
        """Return the current number and advance to the next one."""
        current = self.next_id
        self.next_id += 1
        return current


@dataclass
class FontReference:
    """A font registered with the document under a label."""

    id: int
    label: str
    name: str


class Content:
    """Builder for a page content stream."""

    def __init__(self) -> None:
        self._ops: list[bytes] = []

    def _op(self, *parts: bytes | str) -> Content:
        encoded = [p.encode("ascii") if isinstance(p, str) else p for p in parts]
        self._ops.append(b" ".join(encoded))
        return self

    def begin_text(self) -> Content:
        return self._op("BT")

    def end_text(self) -> Content:
        return self._op("ET")

    def next_line(self, x: float, y: float) -> Content:
        return self._op(_number(x), _number(y), "Td")

    def set_font(self, name: str, size: float) -> Content:
        return self._op(_name(name), _number(size), "Tf")

    def show(self, text: str | bytes) -> Content:
        data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
        return self._op(_literal(data), "Tj")

    def move_to(self, x: float, y: float) -> Content:
        return self._op(_number(x), _number(y), "m")

    def line_to(self, x: float, y: float) -> Content:
        return self._op(_number(x), _number(y), "l")

    def stroke(self) -> Content:
        return self._op("S")

    def finish(self) -> bytes:
        """The encoded stream data."""
        return b"\n".join(self._ops)


@dataclass
class PageContent:
    """A content stream and the object number it is written under."""

    content_id: int
    content: Content = field(default_factory=Content)


@dataclass
class Page:
    """A page and its content streams."""

    page_id: int
    contents: list[PageContent] = field(default_factory=list)


class PdfDocument:
    """Collects indirect objects and serialises them into a PDF file."""

    def __init__(self) -> None:
        self._objects: dict[int, bytes] = {}
        self._root: int | None = None

    def _add(self, ref: int, body: bytes) -> None:
        if ref < 1:
            raise ValueError(f"object numbers start at 1, got {ref}")
        if ref in self._objects:
            raise ValueError(f"object {ref} was already written")
        self._objects[ref] = body

    def type1_font(self, ref: int, base_font: str) -> None:
        self._add(ref, b"<< /Type /Font /Subtype /Type1 /BaseFont " + _name(base_font) + b" >>")

    def stream(self, ref: int, data: bytes) -> None:
        head = f"<< /Length {len(data)} >>\nstream\n".encode("ascii")
        self._add(ref, head + data + b"\nendstream")

    def page(
        self,
        ref: int,
        media_box: Sequence[float],
        parent: int,
        contents: Sequence[int],
        fonts: Mapping[str, int],
    ) -> None:
        parts = [b"<< /Type /Page /MediaBox ", _rect(media_box), b" /Parent ", _reference(parent)]
        if contents:
            parts += [b" /Contents ", _ref_array(contents)]
        font_entries = b" ".join(_name(name) + b" " + _reference(font) for name, font in fonts.items())
        parts += [b" /Resources << /Font << ", font_entries, b" >> >> >>"]
        self._add(ref, b"".join(parts))

    def signature_field(
        self, ref: int, parent: int, name: str, value: str, rect: Sequence[float]
    ) -> None:
        body = b"".join(
            [
                b"<< /Parent ", _reference(parent),
                b" /Type ", _text_string("Annot"),
                b" /SubType ", _text_string("Widget"),
                b" /Sig ", _text_string(name),
                b" /FT /Sig",
                b" /V ", _text_string(value),
                b" /T ", _text_string(name),
                b" /Rect ", _rect(rect),
                b" >>",
            ]
        )
        self._add(ref, body)

    def pages(self, ref: int, kids: Sequence[int]) -> None:
        kids = list(kids)
        body = b"<< /Type /Pages /Kids " + _ref_array(kids) + f" /Count {len(kids)} >>".encode("ascii")
        self._add(ref, body)

    def catalog(self, ref: int, pages: int) -> None:
        self._add(ref, b"<< /Type /Catalog /Pages " + _reference(pages) + b" >>")
        self._root = ref

    def finish(self) -> bytes:
        """Serialise every object with a cross-reference table and trailer."""
        out = bytearray(_HEADER)
        offsets: dict[int, int] = {}
        for ref, body in self._objects.items():
            offsets[ref] = len(out)
            out += f"{ref} 0 obj\n".encode("ascii") + body + b"\nendobj\n\n"

        size = max(offsets, default=0) + 1
        free = [ref for ref in range(1, size) if ref not in offsets]
        next_free = dict(zip([0, *free], [*free, 0]))

        xref_offset = len(out)
        out += f"xref\n0 {size}\n".encode("ascii")
        for ref in range(size):
            if ref in offsets:
                out += f"{offsets[ref]:010} 00000 n\r\n".encode("ascii")
            else:
                generation = 65535 if ref == 0 else 0
                out += f"{next_free[ref]:010} {generation:05} f\r\n".encode("ascii")

        trailer = f"trailer\n<< /Size {size}"
        if self._root is not None:
            trailer += f" /Root {self._root} 0 R"
        trailer += f" >>\nstartxref\n{xref_offset}\n%%EOF"
        out += trailer.encode("ascii")
        return bytes(out)