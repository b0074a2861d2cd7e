# pdfcraft

pdfcraft is a pure-Python library for building and inspecting the object graph of a PDF document in memory. It has no third-party dependencies.

## Modules

- `pdfcraft.objects` holds the object model. PDF values are plain Python values: `None`, `bool`, `int`, `float`, `list`, and `(number, generation)` tuples for references. The module adds `Name`, `PdfString` (with `StringFormat.LITERAL` or `StringFormat.HEXADECIMAL`), `Dictionary` and `Stream`.
  - `string_literal` makes a literal string.
  - `write_object` serialises any object to PDF syntax.
  - `Dictionary` has `get`, `set`, `has`, `remove`, `get_type`, `has_type` and `get_deref`. `get` raises `DictionaryKeyError` for a missing key.
  - `Stream.compress()` deflates the content when that makes it smaller. `Stream.decompressed_content()` undoes `FlateDecode` filters.
- `pdfcraft.textstring` covers PDF text strings.
  - `text_string` writes ASCII text as a literal string and any other text as hex UTF-16BE with a BOM.
  - `decode_text_string` reads PDFDocEncoding, UTF-16BE and UTF-8 according to the BOM.
  - `encode_pdfdoc` and `decode_pdfdoc` handle the raw PDFDocEncoding.
- `pdfcraft.content` has `Operation` and `Content`. `Content.encode()` writes the operations one per line.
- `pdfcraft.document.Document` is the document itself. It provides:
  - `with_version`, `new_object_id`, `add_object`, `set_object` and `remove_object` to create and store objects.
  - `remove_annot`, `get_or_create_resources`, `add_xobject` and `add_graphics_state` to edit pages and their resources.
  - `dereference`, `get_object`, `get_dictionary`, `get_dict_in_dict`, `has_object`, `catalog`, `traverse_objects`, `get_encrypted` and `is_encrypted` to look objects up. `dereference` follows at most 128 references.
  - `get_pages`, `page_iter` and `page_count_hint` to walk the page tree.
  - `get_page_contents`, `get_page_content`, `add_page_contents`, `get_page_resources`, `get_page_fonts`, `get_page_annotations`, `get_page_images` and `get_object_page` for per-page data.
  - `add_bookmark`, `adjust_zero_pages` and `build_outline` for bookmarks (`pdfcraft.bookmarks.Bookmark`).
  - `get_named_destinations` to collect destinations from a name tree into `pdfcraft.destinations.Destination` objects.
  - `new_from_prev` to start an incremental update on top of another document.
- `pdfcraft.pdfdate` converts dates.
  - `to_pdf_date` formats a datetime as a PDF date string.
  - `parse_pdf_date` and `as_datetime` read PDF dates into aware datetimes. Seconds, the time of day and the zone may be missing.
  - `datetime_string` strips the `D`, `:` and `'` characters from a date string.
- `pdfcraft.barcode` builds a page-number barcode.
  - `generate_barcode(page, code)` returns the rectangles. It takes a page from 1 to 255 and a code from 0 to 511.
  - `generate_operations` turns the rectangles into content-stream drawing text.
- `pdfcraft.cmap_section` holds the data types for ToUnicode CMap sections: `CsRange`, `BfChar`, `BfRange` and `CMapParseError`.
- `pdfcraft.errors` holds the exceptions. They all derive from `PdfError`.

## Installation

```
pip install .
```

To install the test tools as well:

```
pip install ".[test]"
```

## Example

```python
from pdfcraft.document import Document
from pdfcraft.content import Content, Operation
from pdfcraft.objects import Dictionary, Name, Stream, string_literal, write_object

doc = Document.with_version("1.5")
pages_id = doc.new_object_id()
font_id = doc.add_object(Dictionary({
    "Type": Name("Font"), "Subtype": Name("Type1"), "BaseFont": Name("Courier"),
}))
resources_id = doc.add_object(Dictionary({"Font": Dictionary({"F1": font_id})}))

content = Content([
    Operation("BT", []),
    Operation("Tf", [Name("F1"), 48]),
    Operation("Td", [100, 600]),
    Operation("Tj", [string_literal("Hello World!")]),
    Operation("ET", []),
])
content_id = doc.add_object(Stream(Dictionary(), content.encode()))
page_id = doc.add_object(Dictionary({
    "Type": Name("Page"), "Parent": pages_id, "Contents": content_id,
}))
doc.set_object(pages_id, Dictionary({
    "Type": Name("Pages"), "Kids": [page_id], "Count": 1,
    "Resources": resources_id, "MediaBox": [0, 0, 595, 842],
}))
catalog_id = doc.add_object(Dictionary({"Type": Name("Catalog"), "Pages": pages_id}))
doc.trailer.set("Root", catalog_id)

print(doc.get_pages())                      # {1: (5, 0)}
print(doc.get_page_content(page_id))        # b'BT\n/F1 48 Tf\n100 600 Td\n(Hello World!) Tj\nET'
print(write_object(doc.get_object(page_id)))
```

## What it does not do

pdfcraft works only on documents held in memory.

- It does not read or write PDF files. There is no parser, no cross-reference table and no whole-file writer.
- It does not encrypt or decrypt. `is_encrypted` only reports whether the trailer points at an encryption dictionary.
- It does not extract or replace page text, and it does not parse CMaps; `pdfcraft.cmap_section` holds only their data types.
- It has no command-line tool.

## Running the tests

```
pytest
```