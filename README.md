# edra_pdf

Turn the JSON output of the Edra rich-text editor into a plain, text-only PDF.
It has no dependencies outside the standard library. The PDF file is written
directly by the package.

Text is laid out on A4-sized pages (595.6 × 842.4 points, 48-point margins) in
the four standard Times fonts. The following are supported:

- normal, bold, italic and bold-italic text (the `bold` and `italic` marks)
- underline and strikethrough (the `underline` and `strike` marks)
- headings: level 1, 2 and 3 are set at 16, 15 and 14 points, and all other
  text is set at 12 points
- left, right, center and justify values of `textAlign`
- ordered lists, numbered from `attrs.start` (default 1) and indented
- empty paragraphs and nodes without text, which advance one line

Words wrap at the right margin, and a new page starts when the text reaches the
bottom margin. Character widths come from built-in tables. A character that is
not in the tables is given a default width.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
edra-pdf document.json -o output.pdf
```

- `input` is the JSON file saved from the editor. Pass `-` to read from
  standard input.
- `-o` / `--output` is the PDF file to write. It defaults to `chunks.pdf`.

If the input cannot be read or is not a valid document, the command prints an
`edra-pdf: ...` message to standard error and exits with status 1.

## Library use

```python
from edra_pdf.document import Doc

with open("document.json", encoding="utf-8") as handle:
    doc = Doc.from_json(handle.read())

pdf_bytes = doc.render("output.pdf")
```

If you already have the parsed JSON as a dictionary, use `Doc.from_dict(data)`
in place of `Doc.from_json`. A document that is malformed raises `ValueError`.
This covers a missing `content` list, a wrongly typed field, or a node `type`
other than `paragraph`, `heading`, `hardBreak`, `orderedList`, `text` or
`listItem`.

`Doc.render(path)` returns the PDF as bytes and also writes it to `path`. The
default path is `chunks.pdf`. Pass `path=None` if you only want the bytes.
Rendering works on a copy of the document, so the list numbers it inserts do
not change the `Doc`.

The modules can also be used on their own:

- `edra_pdf.styles` holds the document model (`ContentField`,
  `AttributeField`, `FontStyle`) and the enums `Style`, `TextAlignment`,
  `BlockType` and `FontFamily`.
- `edra_pdf.fonts.Font` gives character widths through `char_width(ch, style,
  font_size)`.
- `edra_pdf.text.TextBlock` collects `Word`s into `Line`s.
- `edra_pdf.writer.Writer` draws a `TextBlock` onto the current page.
- `edra_pdf.pdf.PdfDocument` and `Content` are a minimal PDF object and
  content-stream writer.

## What it does not do

- Only `paragraph`, `heading` and `orderedList` nodes at the top level are
  drawn. Bullet lists, images, links, colours, highlights, the `fontSize`
  attribute, superscript and subscript are not rendered. Marks other than the
  four listed above are ignored.
- Fonts are not embedded, and no other font family can be registered from the
  command line.
- The first page gets a placeholder signature form field. The document is not
  signed and not encrypted.
- Text is written as UTF-8 bytes against the standard Type 1 fonts. Characters
  outside plain ASCII will not display correctly.
- Some rendering quirks:
  - Strikethrough on otherwise plain text is set in the bold-italic font.
  - Strikethrough on bold-italic text is set in the normal font.
  - Both underline and strikethrough rules are drawn just below the baseline.