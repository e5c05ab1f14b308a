import re

import pytest

from edra_pdf.pdf import Content, Page, PageContent, PdfDocument, RefAllocator


def ops(content):
    return content.finish().decode("utf-8").splitlines()


def test_allocator_counts_from_one():
    alloc = RefAllocator()
    assert [alloc.bump(), alloc.bump(), alloc.bump()] == [1, 2, 3]
    assert alloc.next_id == 4


def test_content_text_operators():
    content = Content()
    content.begin_text()
    content.set_font("Times-Roman", 12.0)
    content.show("Hi")
    content.end_text()
    assert ops(content) == ["BT", "/Times-Roman 12 Tf", "(Hi) Tj", "ET"]


def test_content_path_operators_and_numbers():
    content = Content()
    content.next_line(1.5, 0.0)
    content.move_to(10, 20)
    content.line_to(30.25, 20)
    content.stroke()
    assert ops(content) == ["1.5 0 Td", "10 20 m", "30.25 20 l", "S"]


def test_show_escapes_delimiters():
    content = Content()
    content.show("a(b)\\")
    assert ops(content) == ["(a\\(b\\)\\\\) Tj"]


def test_font_name_escapes_space():
    content = Content()
    content.set_font("A B", 1)
    assert ops(content)[0].startswith("/A#20B ")


def test_non_finite_number_rejected():
    with pytest.raises(ValueError):
        Content().move_to(float("nan"), 0)


def test_empty_content_finishes_empty():
    assert Content().finish() == b""


def test_page_containers():
    page = Page(page_id=1, contents=[PageContent(content_id=2)])
    assert page.contents[0].content_id == 2
    assert page.contents[0].content.finish() == b""


def build_document():
    doc = PdfDocument()
    doc.type1_font(3, "Times-Roman")
    content = Content().begin_text().show("Hello").end_text()
    doc.stream(2, content.finish())
    doc.page(1, (0, 0, 595.6, 842.4), 5, [2], {"Times-Roman": 3})
    doc.pages(5, [1])
    doc.catalog(6, 5)
    return doc.finish()


def test_document_framing():
    data = build_document()
    assert data.startswith(b"%PDF-1.7\n")
    assert data.endswith(b"%%EOF")


def test_xref_offsets_point_at_objects():
    data = build_document()
    start = int(re.search(rb"startxref\n(\d+)\n", data).group(1))
    assert data[start:].startswith(b"xref\n0 7\n")
    entries = re.findall(rb"(\d{10}) (\d{5}) ([nf])\r\n", data[start:])
    assert len(entries) == 7
    for number, (offset, _gen, kind) in enumerate(entries):
        if kind == b"n":
            assert data[int(offset):].startswith(f"{number} 0 obj".encode())
    # object 4 was never written
    assert entries[4][2] == b"f"


def test_trailer_names_root_and_pages_count():
    data = build_document()
    assert b"/Root 6 0 R" in data
    assert b"/Kids [1 0 R] /Count 1" in data
    assert b"/Type /Catalog /Pages 5 0 R" in data


def test_stream_length_matches_data():
    doc = PdfDocument()
    payload = b"BT\nET"
    doc.stream(1, payload)
    data = doc.finish()
    match = re.search(rb"/Length (\d+) >>\nstream\n(.*?)\nendstream", data, re.S)
    assert int(match.group(1)) == len(match.group(2)) == len(payload)


def test_duplicate_object_rejected():
    doc = PdfDocument()
    doc.type1_font(1, "Times-Roman")
    with pytest.raises(ValueError):
        doc.type1_font(1, "Times-Bold")


def test_signature_field_entries():
    doc = PdfDocument()
    doc.signature_field(4, 1, "Signature1", "value", (0, 0, 100, 100))
    data = doc.finish()
    assert b"/FT /Sig" in data
    assert b"/T (Signature1)" in data
    assert b"/V (value)" in data
    assert b"/Parent 1 0 R" in data


def test_non_ascii_text_string_is_hex():
    doc = PdfDocument()
    doc.signature_field(1, 2, "Signatur\u00e9", "v", (0, 0, 1, 1))
    assert b"/T <FEFF" in doc.finish()